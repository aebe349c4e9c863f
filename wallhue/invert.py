"""Colour inversion of images."""

from __future__ import annotations

from collections.abc import Sequence

from PIL import Image, ImageOps


def invert_color(color: Sequence[int]) -> tuple[int, int, int, int]:
    """Invert the RGB channels of an (r, g, b[, a]) colour, keeping its alpha."""
    r, g, b = color[0], color[1], color[2]
    a = color[3] if len(color) > 3 else 255
    return (255 - r, 255 - g, 255 - b, a)


def invert_image(img: Image.Image) -> Image.Image:
    """Return a new RGBA image with every pixel's colour inverted."""
    r, g, b, a = img.convert("RGBA").split()
    return Image.merge("RGBA", (ImageOps.invert(r), ImageOps.invert(g), ImageOps.invert(b), a))


class Inverter:
    """Image processor that inverts colours; the theme is ignored."""

    def process(self, img: Image.Image, theme: str) -> Image.Image:
        return invert_image(img)