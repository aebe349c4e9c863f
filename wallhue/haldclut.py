"""Hald colour lookup tables: generation, interpolation onto a palette and application."""

from __future__ import annotations

import math
import os
from collections.abc import Sequence
from dataclasses import dataclass
from typing import Protocol

from PIL import Image

Rgba = tuple[int, int, int, int]

DEFAULT_SIGMA = 50.0


class Mapper(Protocol):
    """Maps a colour onto a palette."""

    def map(self, original: Sequence[int], palette: Sequence[Sequence[int]]) -> Rgba: ...


def rbf_interpolation(
    target: Sequence[int], palette: Sequence[Sequence[int]], sigma: float
) -> Rgba:
    """Blend the palette colours with Gaussian weights by their distance to target."""
    num_r = num_g = num_b = denominator = 0.0
    tr, tg, tb = float(target[0]), float(target[1]), float(target[2])
    for color in palette:
        pr, pg, pb = float(color[0]), float(color[1]), float(color[2])
        distance = math.sqrt((tr - pr) ** 2 + (tg - pg) ** 2 + (tb - pb) ** 2)
        weight = math.exp(-distance * distance / (2 * sigma * sigma))
        num_r += pr * weight
        num_g += pg * weight
        num_b += pb * weight
        denominator += weight

    if denominator > 0:
        return (
            int(num_r / denominator) & 0xFF,
            int(num_g / denominator) & 0xFF,
            int(num_b / denominator) & 0xFF,
            255,
        )
    return (0, 0, 0, 255)


@dataclass
class RBFMapper:
    """Radial basis function mapper; a larger sigma widens the Gaussian."""

    sigma: float = DEFAULT_SIGMA

    def map(self, original: Sequence[int], palette: Sequence[Sequence[int]]) -> Rgba:
        return rbf_interpolation(original, palette, self.sigma)


def generate_identity_clut(level: int) -> Image.Image:
    """Return the identity Hald CLUT of the given level as an RGBA image."""
    if level < 2:
        raise ValueError("CLUT level must be at least 2")
    cube_size = level * level
    image_size = cube_size * level
    steps = [step * 255 // (cube_size - 1) for step in range(cube_size)]
    data = bytearray()
    for b in steps:
        for g in steps:
            for r in steps:
                data += bytes((r, g, b, 255))
    return Image.frombytes("RGBA", (image_size, image_size), bytes(data))


def save_hald_clut(clut: Image.Image, path: str | os.PathLike[str]) -> None:
    """Write a CLUT to a PNG file."""
    clut.save(path, format="PNG")


def load_hald_clut(path: str | os.PathLike[str]) -> Image.Image:
    """Read a CLUT from a PNG file as an RGBA image."""
    with Image.open(path, formats=["PNG"]) as img:
        img.load()
        return img.convert("RGBA")


def correct_pixel(original: Sequence[int], level: int) -> tuple[int, int]:
    """Coordinates in a Hald CLUT of the entry for a colour."""
    cube_size = level * level
    r = original[0] * (cube_size - 1) // 255
    g = original[1] * (cube_size - 1) // 255
    b = original[2] * (cube_size - 1) // 255
    x = (r % cube_size) + (g % level) * cube_size
    y = b * level + g // level
    return x, y


def apply_clut(img: Image.Image, clut: Image.Image, level: int) -> Image.Image:
    """Map every pixel of img through the CLUT; fully transparent pixels stay transparent."""
    src = img if img.mode == "RGBA" else img.convert("RGBA")
    table = clut if clut.mode == "RGBA" else clut.convert("RGBA")
    lut = table.tobytes()
    width, height = table.size

    def lookup(pixel: tuple[int, ...]) -> bytes:
        x, y = correct_pixel(pixel, level)
        if 0 <= x < width and 0 <= y < height:
            offset = (y * width + x) * 4
            mapped = bytearray(lut[offset : offset + 4])
        else:
            mapped = bytearray(4)
        if pixel[3] == 0:
            mapped[3] = 0
        return bytes(mapped)

    data = src.tobytes()
    cache: dict[tuple[int, ...], bytes] = {}
    out = bytearray()
    for pixel in zip(*[iter(data)] * 4):
        mapped = cache.get(pixel)
        if mapped is None:
            mapped = cache[pixel] = lookup(pixel)
        out += mapped
    return Image.frombytes("RGBA", src.size, bytes(out))


def interpolate_clut(
    identity: Image.Image,
    palette: Sequence[Sequence[int]],
    level: int,
    mapper: Mapper,
) -> Image.Image:
    """Return a CLUT in which every entry of identity is mapped onto the palette."""
    src = identity if identity.mode == "RGBA" else identity.convert("RGBA")
    data = src.tobytes()
    cache: dict[tuple[int, ...], bytes] = {}
    out = bytearray()
    for pixel in zip(*[iter(data)] * 4):
        mapped = cache.get(pixel)
        if mapped is None:
            mapped = cache[pixel] = bytes(mapper.map(pixel, palette))
        out += mapped
    return Image.frombytes("RGBA", src.size, bytes(out))