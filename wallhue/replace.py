"""Replacement of one colour in an image by another."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from PIL import Image

from wallhue.themes import hex_to_rgba, rgb_to_hex

Rgba = tuple[int, int, int, int]

DEFAULT_THRESHOLD = 8.5


class ColorNotFoundError(ValueError):
    """Raised when no pixel of the image is close to the colour to replace."""


def _rgba(color: Sequence[int]) -> Rgba:
    alpha = color[3] if len(color) > 3 else 255
    return (color[0], color[1], color[2], alpha)


def _premultiplied(color: Sequence[int]) -> tuple[int, int, int]:
    """8-bit RGB of a colour composed over black."""
    r, g, b, a = _rgba(color)
    if a == 255:
        return r, g, b
    return tuple((c * 257 * a // 255) >> 8 for c in (r, g, b))  # type: ignore[return-value]


def colors_are_similar(
    first: Sequence[int], second: Sequence[int], threshold: float
) -> bool:
    """Whether the Euclidean RGB distance of two colours is at most threshold."""
    return math.dist(_premultiplied(first), _premultiplied(second)) <= threshold


def replace_color(
    img: Image.Image,
    source: Sequence[int],
    target: Sequence[int],
    threshold: float,
) -> Image.Image:
    """Return a copy of img with every pixel close to source set to target."""
    src = img.convert("RGBA")
    replacement = _rgba(target)
    similar: dict[tuple[int, ...], bool] = {}
    pixels = []
    replaced = False
    for pixel in src.getdata():
        match = similar.get(pixel)
        if match is None:
            match = similar[pixel] = colors_are_similar(pixel, source, threshold)
        if match:
            pixels.append(replacement)
            replaced = True
        else:
            pixels.append(pixel)

    if not replaced:
        raise ColorNotFoundError(
            f"the color : {rgb_to_hex(source)} was not found in the image, nothing to replace"
        )

    out = Image.new("RGBA", src.size)
    out.putdata(pixels)
    return out


@dataclass
class ReplaceProcessor:
    """Image processor replacing from_color by to_color; the theme is ignored."""

    from_color: str
    to_color: str
    threshold: float = DEFAULT_THRESHOLD

    def process(self, img: Image.Image, theme: str) -> Image.Image:
        source = hex_to_rgba(self.from_color)
        target = hex_to_rgba(self.to_color)
        try:
            return replace_color(img, source, target, self.threshold)
        except ColorNotFoundError as exc:
            raise ColorNotFoundError(f"replacing color failed : {exc}") from exc