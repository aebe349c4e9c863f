"""Printing of an image's dominant colours."""

from __future__ import annotations

from dataclasses import dataclass

from PIL import Image

from wallhue import logger
from wallhue.mediancut import get_palette
from wallhue.themes import rgb_to_hex

DEFAULT_NUM_COLORS = 6


@dataclass
class ExtractProcessor:
    """Image processor that prints the palette of an image and produces no image."""

    num_of_colors: int = DEFAULT_NUM_COLORS

    def process(self, img: Image.Image, theme: str) -> None:
        for color in get_palette(img, self.num_of_colors):
            logger.info(rgb_to_hex(color))
        return None