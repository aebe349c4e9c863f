from PIL import Image

from wallhue.invert import Inverter, invert_color, invert_image


def sample_image():
    img = Image.new("RGBA", (3, 2), (10, 20, 30, 255))
    img.putpixel((0, 0), (0, 0, 0, 255))
    img.putpixel((2, 1), (200, 100, 50, 128))
    return img


def test_invert_color_extremes():
    assert invert_color((0, 0, 0, 255)) == (255, 255, 255, 255)
    assert invert_color((255, 255, 255)) == (0, 0, 0, 255)


def test_invert_color_is_an_involution():
    color = (12, 34, 56, 78)
    assert invert_color(invert_color(color)) == color


def test_invert_image_matches_pixelwise_inversion():
    img = sample_image()
    result = invert_image(img)
    assert result.mode == "RGBA"
    assert result.size == img.size
    for x in range(img.width):
        for y in range(img.height):
            assert result.getpixel((x, y)) == invert_color(img.getpixel((x, y)))


def test_invert_image_twice_restores_original():
    img = sample_image()
    assert list(invert_image(invert_image(img)).getdata()) == list(img.getdata())


def test_invert_image_preserves_alpha():
    img = sample_image()
    result = invert_image(img)
    assert result.getchannel("A").tobytes() == img.getchannel("A").tobytes()


def test_invert_image_accepts_rgb_input():
    img = Image.new("RGB", (2, 2), (255, 0, 128))
    result = invert_image(img)
    assert result.getpixel((1, 1)) == invert_color((255, 0, 128))


def test_inverter_process_ignores_theme():
    img = sample_image()
    first = Inverter().process(img, "nord")
    second = Inverter().process(img, "")
    assert list(first.getdata()) == list(second.getdata())
    assert list(first.getdata()) == list(invert_image(img).getdata())