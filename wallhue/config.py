"""Configuration: defaults, the YAML config file and the output directories."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from wallhue import logger

VERSION = "v0.2.1"
APP_NAME = "wallhue"
OUTPUT_FOLDER = "Pictures/wallhue"
CONFIG_FILE = "config.yml"
SUPPORTED_EXTENSIONS = frozenset({".png", ".jpeg", ".jpg", ".webp"})


class ConfigError(ValueError):
    """Raised when the configuration file has values of the wrong type."""


@dataclass
class GlobalFlags:
    """Input/output flags shared by the image subcommands."""

    output_destination: str = ""
    input_dir: str = ""
    input_files: list[str] = field(default_factory=list)
    format: str = ""


@dataclass
class ThemeEntry:
    """A user defined theme as written in the config file."""

    name: str = ""
    colors: list[str] = field(default_factory=list)


@dataclass
class Options:
    """Settings read from the config file."""

    enable_image_previewing: bool = True
    inline_image_preview: bool = False
    image_preview_backend: str = ""
    color_correction_backend: str = ""
    output_folder: str = ""
    themes: list[ThemeEntry] = field(default_factory=list)


_BOOL_KEYS = {
    "EnableImagePreviewing": "enable_image_previewing",
    "InlineImagePreview": "inline_image_preview",
}
_STR_KEYS = {
    "ImagePreviewBackend": "image_preview_backend",
    "ColorCorrectionBackend": "color_correction_backend",
    "OutputFolder": "output_folder",
}


def default_options() -> Options:
    """Return the built-in default settings."""
    return Options()


def _parse_theme(entry: Any) -> ThemeEntry:
    if entry is None:
        return ThemeEntry()
    if not isinstance(entry, dict):
        raise ConfigError(f"theme entry must be a mapping, got {entry!r}")
    name = entry.get("name")
    colors = entry.get("colors")
    if name is not None and not isinstance(name, str):
        raise ConfigError(f"theme name must be a string, got {name!r}")
    if colors is None:
        colors = []
    if not isinstance(colors, list) or not all(isinstance(c, str) for c in colors):
        raise ConfigError(f"theme colors must be a list of strings, got {colors!r}")
    return ThemeEntry(name=name or "", colors=list(colors))


def _apply(options: Options, data: dict[str, Any]) -> None:
    for key, attr in _BOOL_KEYS.items():
        value = data.get(key)
        if value is None:
            continue
        if not isinstance(value, bool):
            raise ConfigError(f"{key} must be a boolean, got {value!r}")
        setattr(options, attr, value)
    for key, attr in _STR_KEYS.items():
        value = data.get(key)
        if value is None:
            continue
        if not isinstance(value, str):
            raise ConfigError(f"{key} must be a string, got {value!r}")
        setattr(options, attr, value)
    themes = data.get("themes")
    if themes is not None:
        if not isinstance(themes, list):
            raise ConfigError(f"themes must be a list, got {themes!r}")
        options.themes = [_parse_theme(entry) for entry in themes]


def _join(base: str | os.PathLike[str], name: str) -> str:
    """Join name under base even when name starts with a separator."""
    return os.path.normpath(os.path.join(base, name.lstrip("/" + os.sep)))


def create_directory(options: Options, home: str | os.PathLike[str] | None = None) -> str:
    """Create the output folder with its 'cluts' and 'gifs' subfolders and return its path."""
    home_dir = Path(home) if home is not None else Path.home()
    folder = options.output_folder or OUTPUT_FOLDER
    dir_path = _join(home_dir, folder)

    pictures = os.environ.get("XDG_PICTURES_DIR", "")
    if pictures and not options.output_folder:
        dir_path = os.path.join(pictures, APP_NAME)

    for sub in ("cluts", "gifs"):
        sub_dir = os.path.join(dir_path, sub)
        try:
            os.makedirs(sub_dir, mode=0o755, exist_ok=True)
        except OSError as exc:
            raise OSError(f"while creating {sub_dir}: {exc}") from exc
    return dir_path


def load_config(home: str | os.PathLike[str] | None = None) -> Options:
    """Read the config file (creating it if missing) and prepare the output folder."""
    home_dir = Path(home) if home is not None else Path.home()
    config_path = home_dir / ".config" / APP_NAME / CONFIG_FILE
    config_path.parent.mkdir(mode=0o755, parents=True, exist_ok=True)

    options = default_options()
    try:
        config_path.touch(mode=0o644, exist_ok=True)
    except OSError as exc:
        logger.error(f"Error opening/creating config file: {exc}")
        return options

    text = config_path.read_text(encoding="utf-8")
    try:
        data = yaml.safe_load(text)
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError("config file must hold a mapping")
        _apply(options, data)
    except (yaml.YAMLError, ConfigError) as exc:
        logger.error(f"Error unmarshalling config file: {exc}")
        return options

    options.output_folder = create_directory(options, home_dir)
    return options