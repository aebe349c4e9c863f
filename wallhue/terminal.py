"""Detection of the running terminal emulator and of image preview tools."""

from __future__ import annotations

import os
import shutil


def is_kitty() -> bool:
    """True when running inside the kitty terminal."""
    return "kitty" in os.environ.get("TERM", "") or os.environ.get("KITTY_WINDOW_ID", "") != ""


def is_konsole() -> bool:
    """True when running inside Konsole."""
    return (
        os.environ.get("TERM", "") == "xterm-256color"
        and os.environ.get("KONSOLE_VERSION", "") != ""
    )


def is_ghostty() -> bool:
    """True when running inside Ghostty."""
    return (
        os.environ.get("TERM", "") == "xterm-ghostty"
        and os.environ.get("TERM_PROGRAM", "") == "ghostty"
    )


def is_wezterm() -> bool:
    """True when running inside WezTerm."""
    return (
        os.environ.get("TERM", "") == "xterm-256color"
        and os.environ.get("TERM_PROGRAM", "") == "WezTerm"
    )


def has_icat() -> bool:
    """True when the 'kitten' program is on PATH."""
    return bool(shutil.which("kitten"))


def has_chafa() -> bool:
    """True when the 'chafa' program is on PATH."""
    return bool(shutil.which("chafa"))