"""15-bit colour packing and the colour cube used by median cut."""

from __future__ import annotations

import enum
from collections.abc import Sequence
from dataclasses import dataclass, field

HISTOGRAM_SIZE = 32768


def rgb15(r: int, g: int, b: int) -> int:
    """Pack 8-bit channels into a 15-bit colour (5 bits per channel)."""
    return ((b & 0xF8) << 7) | ((g & 0xF8) << 2) | ((r & 0xFF) >> 3)


def red(color: int) -> int:
    """Red channel of a 15-bit colour, scaled back to 8 bits."""
    return (color & 0x1F) << 3


def green(color: int) -> int:
    """Green channel of a 15-bit colour, scaled back to 8 bits."""
    return (color & 0x3E0) >> 2


def blue(color: int) -> int:
    """Blue channel of a 15-bit colour, scaled back to 8 bits."""
    return (color & 0x7C00) >> 7


def split_rgb(color: int) -> tuple[int, int, int]:
    """Return the (r, g, b) channels of a 15-bit colour."""
    return red(color), green(color), blue(color)


class Axis(enum.IntEnum):
    """The channel along which a cube is longest."""

    RED = 1
    GREEN = 2
    BLUE = 3


_CHANNEL = {Axis.RED: red, Axis.GREEN: green, Axis.BLUE: blue}


@dataclass
class ColorCube:
    """A box in RGB space holding the distinct 15-bit colours that fall into it."""

    count: int = 0
    level: int = 0
    longest: Axis | None = None
    r_min: int = 0
    r_max: int = 0
    g_min: int = 0
    g_max: int = 0
    b_min: int = 0
    b_max: int = 0
    hist: list[int] = field(default_factory=list)

    def shrink(self) -> None:
        """Tighten the channel ranges to the colours held and find the longest edge."""
        if self.count == 0:
            return
        self.r_min = self.g_min = self.b_min = 255
        self.r_max = self.g_max = self.b_max = 0
        for color in self.hist:
            r, g, b = split_rgb(color)
            self.r_min, self.r_max = min(self.r_min, r), max(self.r_max, r)
            self.g_min, self.g_max = min(self.g_min, g), max(self.g_max, g)
            self.b_min, self.b_max = min(self.b_min, b), max(self.b_max, b)

        lr = (self.r_max - self.r_min) & 0xFF
        lg = (self.g_max - self.g_min) & 0xFF
        lb = (self.b_max - self.b_min) & 0xFF
        if lr >= lg and lr >= lb:
            self.longest = Axis.RED
        elif lg >= lr and lg >= lb:
            self.longest = Axis.GREEN
        else:
            self.longest = Axis.BLUE

    def average_color(self, hist: Sequence[int]) -> tuple[int, int, int, int]:
        """Pixel-weighted mean colour as an (r, g, b, a) tuple."""
        if self.count == 0:
            return (0, 0, 0, 0)
        r_sum = g_sum = b_sum = 0
        for color in self.hist:
            r, g, b = split_rgb(color)
            weight = hist[color]
            r_sum += r * weight
            g_sum += g * weight
            b_sum += b * weight
        return (
            (r_sum // self.count) & 0xFF,
            (g_sum // self.count) & 0xFF,
            (b_sum // self.count) & 0xFF,
            255,
        )

    def clone(self) -> ColorCube:
        """Copy of count, level and colours; the ranges are left unset."""
        return ColorCube(count=self.count, level=self.level, hist=self.hist)

    def volume(self) -> int:
        """Product of the channel ranges."""
        return (
            ((self.r_max - self.r_min) & 0xFF)
            * ((self.g_max - self.g_min) & 0xFF)
            * ((self.b_max - self.b_min) & 0xFF)
        )

    def rank(self) -> int:
        """Priority of the cube for splitting: pixel count times volume."""
        return self.count * self.volume()

    def sort_along_longest(self) -> None:
        """Sort the held colours in place by the channel of the longest edge."""
        channel = _CHANNEL.get(self.longest) if self.longest is not None else None
        if channel is not None:
            self.hist.sort(key=channel)