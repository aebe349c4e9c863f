import itertools

import pytest
from PIL import Image

from wallhue.haldclut import (
    RBFMapper,
    apply_clut,
    correct_pixel,
    generate_identity_clut,
    interpolate_clut,
    load_hald_clut,
    rbf_interpolation,
    save_hald_clut,
)

GRID = (0, 85, 170, 255)


def _grid_image():
    colors = [(r, g, b, 255) for r, g, b in itertools.product(GRID, repeat=3)]
    img = Image.new("RGBA", (8, 8))
    img.putdata(colors)
    return img, colors


class _IdentityMapper:
    def map(self, original, palette):
        return tuple(original)


class _ConstantMapper:
    def __init__(self, color):
        self.color = color

    def map(self, original, palette):
        return self.color


def test_identity_clut_size_and_corners():
    clut = generate_identity_clut(2)
    assert clut.size == (8, 8)
    assert clut.getpixel((0, 0)) == (0, 0, 0, 255)
    assert clut.getpixel((7, 7)) == (255, 255, 255, 255)


def test_identity_clut_level_eight_size():
    assert generate_identity_clut(8).size == (512, 512)


def test_identity_clut_rejects_level_one():
    with pytest.raises(ValueError):
        generate_identity_clut(1)


def test_correct_pixel_finds_grid_colours_in_identity():
    clut = generate_identity_clut(2)
    for r, g, b in itertools.product(GRID, repeat=3):
        assert clut.getpixel(correct_pixel((r, g, b, 255), 2)) == (r, g, b, 255)


def test_apply_identity_clut_keeps_grid_image():
    img, colors = _grid_image()
    result = apply_clut(img, generate_identity_clut(2), 2)
    assert list(result.getdata()) == colors


def test_apply_clut_keeps_transparent_pixels_transparent():
    img = Image.new("RGBA", (2, 1))
    img.putdata([(85, 170, 255, 0), (85, 170, 255, 255)])
    result = apply_clut(img, generate_identity_clut(2), 2)
    assert result.getpixel((0, 0))[3] == 0
    assert result.getpixel((1, 0)) == (85, 170, 255, 255)


def test_rbf_target_equal_to_single_palette_colour():
    assert rbf_interpolation((10, 20, 30), [(10, 20, 30)], 50.0) == (10, 20, 30, 255)


def test_rbf_empty_palette_falls_back_to_black():
    assert rbf_interpolation((10, 20, 30), [], 50.0) == (0, 0, 0, 255)


def test_rbf_result_stays_within_palette_range():
    palette = [(0, 0, 0), (200, 100, 50)]
    for target in [(0, 0, 0), (255, 255, 255), (120, 60, 30), (30, 200, 90)]:
        r, g, b, a = rbf_interpolation(target, palette, 50.0)
        assert 0 <= r <= 200 and 0 <= g <= 100 and 0 <= b <= 50
        assert a == 255


def test_rbf_mapper_uses_default_sigma():
    palette = [(0, 0, 0, 255), (200, 100, 50, 255)]
    target = (120, 60, 30, 255)
    assert RBFMapper().map(target, palette) == rbf_interpolation(target, palette, 50.0)


def test_interpolate_with_identity_mapper_returns_same_clut():
    identity = generate_identity_clut(2)
    result = interpolate_clut(identity, [], 2, _IdentityMapper())
    assert result.tobytes() == identity.tobytes()


def test_interpolate_with_constant_mapper_fills_clut():
    identity = generate_identity_clut(2)
    result = interpolate_clut(identity, [], 2, _ConstantMapper((1, 2, 3, 255)))
    assert set(result.getdata()) == {(1, 2, 3, 255)}


def test_interpolated_single_colour_clut_maps_that_colour_to_itself():
    palette = [(85, 170, 255, 255)]
    clut = interpolate_clut(generate_identity_clut(2), palette, 2, RBFMapper())
    img = Image.new("RGBA", (1, 1), (85, 170, 255, 255))
    assert apply_clut(img, clut, 2).getpixel((0, 0)) == (85, 170, 255, 255)


def test_save_and_load_round_trip(tmp_path):
    clut = generate_identity_clut(2)
    path = tmp_path / "clut.png"
    save_hald_clut(clut, path)
    loaded = load_hald_clut(path)
    assert loaded.mode == "RGBA"
    assert loaded.tobytes() == clut.tobytes()


def test_load_rejects_non_png(tmp_path):
    path = tmp_path / "clut.png"
    path.write_text("not an image")
    with pytest.raises(OSError):
        load_hald_clut(path)