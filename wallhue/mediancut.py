"""Median cut colour quantisation used to extract an image's dominant colours."""

from __future__ import annotations

import heapq
import itertools
from collections import Counter
from collections.abc import Sequence

from PIL import Image

from wallhue.colorcube import HISTOGRAM_SIZE, ColorCube, rgb15

_MIN_ALPHA = 125


class EmptyQueueError(LookupError):
    """Raised when popping from an empty priority queue."""


class PriorityQueue:
    """Max-heap of colour cubes keyed by an integer priority."""

    def __init__(self) -> None:
        self._heap: list[tuple[int, int, ColorCube]] = []
        self._order = itertools.count()

    def push(self, cube: ColorCube, priority: int) -> None:
        """Add a cube with the given priority."""
        heapq.heappush(self._heap, (-priority, next(self._order), cube))

    def pop(self) -> tuple[ColorCube, int]:
        """Remove and return the cube with the highest priority and that priority."""
        if not self._heap:
            raise EmptyQueueError("Empty")
        negated, _, cube = heapq.heappop(self._heap)
        return cube, -negated

    def by_count(self) -> list[ColorCube]:
        """All held cubes, ordered by pixel count, largest first."""
        return [entry[2] for entry in sorted(self._heap, key=lambda entry: -entry[2].count)]

    def __len__(self) -> int:
        return len(self._heap)


def get_histogram(img: Image.Image) -> list[int]:
    """Count the pixels of each 15-bit colour, skipping mostly transparent pixels.

    Colours are taken alpha-premultiplied, as a pixel's colour is composed
    over black.
    """
    if img.mode == "RGBa":
        data = img.tobytes()
        premultiplied = True
    else:
        data = img.convert("RGBA").tobytes()
        premultiplied = False

    hist = [0] * HISTOGRAM_SIZE
    pixels = Counter(zip(*[iter(data)] * 4))
    for (r, g, b, a), count in pixels.items():
        if a < _MIN_ALPHA:
            continue
        if not premultiplied:
            r = (r * 257 * a // 255) >> 8
            g = (g * 257 * a // 255) >> 8
            b = (b * 257 * a // 255) >> 8
        hist[rgb15(r, g, b)] += count
    return hist


def _find_median(cube: ColorCube, hist: Sequence[int]) -> tuple[int, int]:
    """Index splitting the cube's sorted colours in half by pixels, and the pixels before it."""
    count = 0
    for position, color in enumerate(cube.hist):
        if count >= cube.count // 2:
            return position, count
        count += hist[color]
    last = len(cube.hist) - 1
    return last, cube.count - hist[cube.hist[last]]


def cut_cubes(hist: Sequence[int], max_cubes: int) -> tuple[list[ColorCube], int]:
    """Split the colour space into at most max_cubes cubes.

    Returns a list of exactly max_cubes cubes, largest by pixel count first
    and padded with empty cubes, and the number of cubes actually produced.
    """
    if max_cubes < 1:
        raise ValueError("max_cubes must be at least 1")

    colors = [color for color, count in enumerate(hist) if count]
    first = ColorCube(count=sum(hist[color] for color in colors), hist=colors)
    first.shrink()
    queue = PriorityQueue()
    queue.push(first, first.rank())

    for _ in range(1, max_cubes):
        try:
            cube, priority = queue.pop()
        except EmptyQueueError:
            break
        if cube.level > 255 or not cube.hist:
            queue.push(cube, priority)
            break
        cube.sort_along_longest()
        median, count = _find_median(cube, hist)

        halves = (
            (cube.hist[:median], count),
            (cube.hist[median:], cube.count - count),
        )
        for part_hist, part_count in halves:
            part = cube.clone()
            part.count = part_count
            part.hist = part_hist
            part.level += 1
            part.shrink()
            queue.push(part, part.rank())

    cubes = queue.by_count()
    produced = len(cubes)
    cubes.extend(ColorCube() for _ in range(max_cubes - produced))
    return cubes, produced


def get_palette(img: Image.Image, max_cubes: int) -> list[tuple[int, int, int, int]]:
    """Dominant colours of an image as (r, g, b, a) tuples, most common first."""
    hist = get_histogram(img)
    cubes, _ = cut_cubes(hist, max_cubes)
    return [cube.average_color(hist) for cube in cubes]