import pytest
from PIL import Image

from wallhue.colorcube import HISTOGRAM_SIZE, ColorCube, rgb15
from wallhue.mediancut import (
    EmptyQueueError,
    PriorityQueue,
    cut_cubes,
    get_histogram,
    get_palette,
)


def _two_colour_image(major, minor, major_rows=3, minor_rows=1, width=4):
    img = Image.new("RGB", (width, major_rows + minor_rows), major)
    for y in range(major_rows, major_rows + minor_rows):
        for x in range(width):
            img.putpixel((x, y), minor)
    return img


def _gradient_image(width=16, height=16):
    img = Image.new("RGB", (width, height))
    for y in range(height):
        for x in range(width):
            img.putpixel((x, y), (x * 16, y * 16, (x + y) * 8))
    return img


def test_queue_pops_highest_priority_first():
    queue = PriorityQueue()
    queue.push(ColorCube(count=1), 5)
    queue.push(ColorCube(count=2), 50)
    queue.push(ColorCube(count=3), 20)
    priorities = [queue.pop()[1] for _ in range(3)]
    assert priorities == [50, 20, 5]


def test_queue_pop_returns_pushed_cube():
    queue = PriorityQueue()
    cube = ColorCube(count=7)
    queue.push(cube, 3)
    popped, priority = queue.pop()
    assert popped is cube
    assert priority == 3


def test_queue_len_tracks_pushes_and_pops():
    queue = PriorityQueue()
    queue.push(ColorCube(), 1)
    queue.push(ColorCube(), 2)
    assert len(queue) == 2
    queue.pop()
    assert len(queue) == 1


def test_pop_from_empty_queue_raises():
    with pytest.raises(EmptyQueueError):
        PriorityQueue().pop()


def test_by_count_orders_largest_first():
    queue = PriorityQueue()
    for count, priority in ((3, 9), (10, 1), (6, 4)):
        queue.push(ColorCube(count=count), priority)
    assert [cube.count for cube in queue.by_count()] == [10, 6, 3]


def test_histogram_of_solid_image():
    img = Image.new("RGB", (5, 4), (200, 96, 48))
    hist = get_histogram(img)
    assert len(hist) == HISTOGRAM_SIZE
    assert hist[rgb15(200, 96, 48)] == 20
    assert sum(hist) == 20


def test_histogram_skips_mostly_transparent_pixels():
    img = Image.new("RGBA", (3, 3), (10, 20, 30, 124))
    assert sum(get_histogram(img)) == 0


def test_histogram_keeps_pixels_at_alpha_threshold():
    img = Image.new("RGBA", (3, 2), (255, 255, 255, 125))
    assert sum(get_histogram(img)) == 6


def test_histogram_uses_premultiplied_colour():
    img = Image.new("RGBA", (2, 2), (248, 200, 160, 130))
    hist = get_histogram(img)
    assert sum(hist) == 4
    assert hist[rgb15(248, 200, 160)] == 0


def test_cut_cubes_rejects_non_positive_count():
    with pytest.raises(ValueError):
        cut_cubes([0] * HISTOGRAM_SIZE, 0)


def test_cut_cubes_pads_to_requested_size():
    hist = get_histogram(_gradient_image())
    cubes, produced = cut_cubes(hist, 6)
    assert len(cubes) == 6
    assert 1 <= produced <= 6


def test_cut_cubes_preserves_pixel_count():
    hist = get_histogram(_gradient_image())
    cubes, _ = cut_cubes(hist, 8)
    assert sum(cube.count for cube in cubes) == sum(hist)


def test_cut_cubes_partitions_colours():
    hist = get_histogram(_gradient_image())
    cubes, _ = cut_cubes(hist, 8)
    held = sorted(color for cube in cubes for color in cube.hist)
    assert held == [color for color, count in enumerate(hist) if count]


def test_cut_cubes_orders_by_count():
    hist = get_histogram(_gradient_image())
    cubes, _ = cut_cubes(hist, 8)
    counts = [cube.count for cube in cubes]
    assert counts == sorted(counts, reverse=True)


def test_palette_of_solid_image_contains_its_colour():
    img = Image.new("RGB", (6, 6), (200, 96, 48))
    palette = get_palette(img, 6)
    assert len(palette) == 6
    assert palette[0] == (200, 96, 48, 255)


def test_palette_puts_dominant_colour_first():
    img = _two_colour_image((248, 0, 0), (0, 0, 248))
    palette = get_palette(img, 6)
    assert palette[0] == (248, 0, 0, 255)
    assert palette[1] == (0, 0, 248, 255)


def test_palette_of_transparent_image_is_empty_colours():
    img = Image.new("RGBA", (4, 4), (0, 0, 0, 0))
    palette = get_palette(img, 4)
    assert palette == [(0, 0, 0, 0)] * 4


def test_palette_length_matches_request():
    palette = get_palette(_gradient_image(), 3)
    assert len(palette) == 3
    assert all(color[3] == 255 for color in palette)