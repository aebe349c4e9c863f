"""Colour themes: the built-in set, user themes and hex colour conversion."""

from __future__ import annotations

import string
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from wallhue import logger
from wallhue.config import ThemeEntry
from wallhue.palettes import PALETTES
from wallhue.palettes_extra import PALETTES as EXTRA_PALETTES

Rgba = tuple[int, int, int, int]

_HEX_DIGITS = frozenset(string.hexdigits)


class UnknownThemeError(LookupError):
    """Raised when a theme name is not registered."""


@dataclass
class Theme:
    """A named list of opaque colours, each an (r, g, b, a) tuple."""

    name: str
    colors: list[Rgba] = field(default_factory=list)


def _builtin_themes() -> dict[str, Theme]:
    themes: dict[str, Theme] = {}
    for table in (PALETTES, EXTRA_PALETTES):
        for key, (name, colors) in table.items():
            themes[key] = Theme(name=name, colors=[(r, g, b, 255) for r, g, b in colors])
    return themes


_THEMES: dict[str, Theme] = _builtin_themes()


def hex_to_rgba(hex_str: str) -> Rgba:
    """Parse a '#RRGGBB' string into an opaque (r, g, b, a) tuple."""
    if len(hex_str) != 7 or hex_str[0] != "#":
        raise ValueError("invalid hex color format")
    digits = hex_str[1:]
    bad = next((char for char in digits if char not in _HEX_DIGITS), None)
    if bad is not None:
        raise ValueError(f"invalid hex byte: {bad!r}")
    r, g, b = bytes.fromhex(digits)
    return (r, g, b, 255)


def hex_to_rgba_list(hex_colors: Iterable[str]) -> list[Rgba]:
    """Parse every '#RRGGBB' string; the first invalid one raises ValueError."""
    return [hex_to_rgba(hex_color) for hex_color in hex_colors]


def rgb_to_hex(color: Sequence[int]) -> str:
    """Format the RGB channels of a colour as an upper-case '#RRGGBB' string."""
    return f"#{color[0]:02X}{color[1]:02X}{color[2]:02X}"


def list_themes() -> list[str]:
    """Names under which themes are registered."""
    return list(_THEMES)


def select_theme(name: str) -> Theme:
    """Look a theme up by name, ignoring case."""
    try:
        return _THEMES[name.lower()]
    except KeyError:
        raise UnknownThemeError("unknown theme") from None


def theme_exists(name: str) -> bool:
    """Whether a theme is registered under exactly this name."""
    return name in _THEMES


def register_theme(theme: Theme) -> None:
    """Register a theme under its lower-cased name, replacing any earlier one."""
    _THEMES[theme.name.lower()] = theme


def get_theme_colors(name: str) -> list[str]:
    """Colours of a theme as '#RRGGBB' strings."""
    return [rgb_to_hex(color) for color in select_theme(name).colors]


def load_custom_themes(entries: Iterable[ThemeEntry]) -> None:
    """Register user themes; invalid ones and names already taken are skipped."""
    for entry in entries:
        if not entry.name or not entry.colors:
            continue
        colors: list[Rgba] = []
        for hex_color in entry.colors:
            try:
                colors.append(hex_to_rgba(hex_color))
            except ValueError as exc:
                logger.error(f"invalid color {hex_color} in theme {entry.name}: {exc}")
                break
        else:
            if not theme_exists(entry.name):
                register_theme(Theme(name=entry.name, colors=colors))