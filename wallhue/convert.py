"""Recolouring images to a theme, through a Hald CLUT or nearest colours."""

from __future__ import annotations

import hashlib
import math
import os
import threading
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from PIL import Image

from wallhue.haldclut import (
    RBFMapper,
    apply_clut,
    generate_identity_clut,
    interpolate_clut,
    load_hald_clut,
    save_hald_clut,
)
from wallhue.themes import Theme, UnknownThemeError, get_theme_colors, select_theme

Rgba = tuple[int, int, int, int]

CLUT_LEVEL = 8
NEAREST_NEIGHBOUR_BACKEND = "nn"

_CLUT_LOCK = threading.Lock()


def _premultiplied(color: Sequence[int]) -> tuple[int, int, int]:
    """8-bit RGB of a colour composed over black."""
    alpha = color[3] if len(color) > 3 else 255
    if alpha == 255:
        return color[0], color[1], color[2]
    r, g, b = ((c * 257 * alpha // 255) >> 8 for c in color[:3])
    return r, g, b


def nearest_color(color: Sequence[int], theme: Theme) -> Rgba:
    """The theme colour closest to color in RGB space; the first wins ties."""
    if not theme.colors:
        raise ValueError(f"theme {theme.name} has no colors")
    target = _premultiplied(color)
    best = theme.colors[0]
    best_distance = math.inf
    for candidate in theme.colors:
        distance = math.dist(_premultiplied(candidate), target)
        if distance < best_distance:
            best_distance = distance
            best = candidate
    return best


def nearest_neighbour(img: Image.Image, theme: Theme) -> Image.Image:
    """Replace every pixel with the nearest theme colour."""
    src = img.convert("RGBA")
    cache: dict[tuple[int, ...], Rgba] = {}
    pixels = []
    for pixel in src.getdata():
        mapped = cache.get(pixel)
        if mapped is None:
            mapped = cache[pixel] = nearest_color(pixel, theme)
        pixels.append(mapped)
    out = Image.new("RGBA", src.size)
    out.putdata(pixels)
    return out


def hash_palette(colors: Iterable[str]) -> str:
    """Short MD5 digest of the concatenated colour strings."""
    hasher = hashlib.md5()
    for color in colors:
        hasher.update(color.encode("utf-8"))
    return hasher.hexdigest()[:16]


@dataclass
class ThemeConverter:
    """Image processor mapping an image onto a theme.

    CLUTs are cached in the 'cluts' folder under output_folder; the 'nn'
    backend maps each pixel to its nearest theme colour instead.
    """

    output_folder: str = ""
    backend: str = ""

    def _clut_path(self, theme: str) -> str:
        name = f"{theme}_{hash_palette(get_theme_colors(theme))}.png"
        return os.path.join(self.output_folder, "cluts", name)

    def _ensure_clut(self, path: str, selected: Theme) -> None:
        with _CLUT_LOCK:
            if os.path.exists(path):
                return
            identity = generate_identity_clut(CLUT_LEVEL)
            palette = [tuple(color) for color in selected.colors]
            modified = interpolate_clut(identity, palette, CLUT_LEVEL, RBFMapper())
            try:
                os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
                save_hald_clut(modified, path)
            except OSError as exc:
                raise OSError(f"while saving the CLUT: {exc}") from exc

    def process(self, img: Image.Image, theme: str) -> Image.Image:
        try:
            selected = select_theme(theme)
        except UnknownThemeError as exc:
            raise UnknownThemeError(f"{exc} {theme}") from exc

        if self.backend == NEAREST_NEIGHBOUR_BACKEND:
            return nearest_neighbour(img, selected)

        clut_path = self._clut_path(theme)
        self._ensure_clut(clut_path, selected)
        try:
            clut = load_hald_clut(clut_path)
        except OSError as exc:
            raise OSError(f"while loading CLUT: {exc}") from exc

        rgba = img if img.mode == "RGBA" else img.convert("RGBA")
        premultiplied = Image.frombytes("RGBA", rgba.size, rgba.convert("RGBa").tobytes())
        return apply_clut(premultiplied, clut, CLUT_LEVEL)