[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "wallhue"
version = "0.2.1"
description = "Recolour wallpapers and other images to a colour scheme, replace or invert colours and extract palettes"
requires-python = ">=3.10"
keywords = [
    "wallpaper",
    "color-scheme",
    "theme",
    "palette",
    "hald-clut",
    "median-cut",
    "image",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Graphics Conversion",
    "Topic :: Software Development :: Libraries :: Python Modules",
]
dependencies = [
    "pillow",
    "pyyaml",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["wallhue"]

[tool.hatch.build.targets.sdist]
include = [
    "wallhue",
    "tests",
    "README.md",
]

[tool.pytest.ini_options]
addopts = "-ra"
