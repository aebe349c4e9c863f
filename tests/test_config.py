import os

import pytest

from wallhue import config
from wallhue.config import GlobalFlags, Options, ThemeEntry


@pytest.fixture(autouse=True)
def no_xdg(monkeypatch):
    monkeypatch.delenv("XDG_PICTURES_DIR", raising=False)


def test_default_options():
    options = config.default_options()
    assert options == Options(
        enable_image_previewing=True,
        inline_image_preview=False,
        image_preview_backend="",
        color_correction_backend="",
        output_folder="",
        themes=[],
    )


def test_global_flags_lists_are_independent():
    first, second = GlobalFlags(), GlobalFlags()
    first.input_files.append("a.png")
    assert second.input_files == []


def test_create_directory_default(tmp_path):
    path = config.create_directory(config.default_options(), tmp_path)
    expected = tmp_path / "Pictures" / "wallhue"
    assert path == str(expected)
    assert (expected / "cluts").is_dir()
    assert (expected / "gifs").is_dir()


def test_create_directory_uses_xdg_pictures(tmp_path, monkeypatch):
    pictures = tmp_path / "pics"
    monkeypatch.setenv("XDG_PICTURES_DIR", str(pictures))
    path = config.create_directory(config.default_options(), tmp_path)
    assert path == os.path.join(str(pictures), "wallhue")
    assert (pictures / "wallhue" / "cluts").is_dir()


def test_create_directory_prefers_configured_folder(tmp_path, monkeypatch):
    monkeypatch.setenv("XDG_PICTURES_DIR", str(tmp_path / "pics"))
    options = Options(output_folder="Walls/out")
    path = config.create_directory(options, tmp_path)
    assert path == str(tmp_path / "Walls" / "out")
    assert (tmp_path / "Walls" / "out" / "gifs").is_dir()


def test_load_config_creates_file_and_folders(tmp_path):
    options = config.load_config(tmp_path)
    assert (tmp_path / ".config" / "wallhue" / "config.yml").is_file()
    assert options.output_folder == str(tmp_path / "Pictures" / "wallhue")
    assert options.enable_image_previewing is True


def test_load_config_reads_values(tmp_path):
    cfg_dir = tmp_path / ".config" / "wallhue"
    cfg_dir.mkdir(parents=True)
    (cfg_dir / "config.yml").write_text(
        "EnableImagePreviewing: false\n"
        "ColorCorrectionBackend: nn\n"
        "themes:\n"
        "  - name: mine\n"
        "    colors: ['#000000', '#FFFFFF']\n",
        encoding="utf-8",
    )
    options = config.load_config(tmp_path)
    assert options.enable_image_previewing is False
    assert options.color_correction_backend == "nn"
    assert options.themes == [ThemeEntry("mine", ["#000000", "#FFFFFF"])]


def test_load_config_bad_yaml_keeps_defaults(tmp_path, capsys):
    cfg_dir = tmp_path / ".config" / "wallhue"
    cfg_dir.mkdir(parents=True)
    (cfg_dir / "config.yml").write_text("EnableImagePreviewing: [oops\n", encoding="utf-8")
    options = config.load_config(tmp_path)
    assert options == config.default_options()
    assert "Error unmarshalling config file" in capsys.readouterr().err


def test_load_config_wrong_type_is_reported(tmp_path, capsys):
    cfg_dir = tmp_path / ".config" / "wallhue"
    cfg_dir.mkdir(parents=True)
    (cfg_dir / "config.yml").write_text("InlineImagePreview: sometimes\n", encoding="utf-8")
    options = config.load_config(tmp_path)
    assert options.inline_image_preview is False
    assert options.output_folder == ""
    assert "InlineImagePreview" in capsys.readouterr().err