# wallhue

`wallhue` is a Python library for recolouring images, most often wallpapers,
so that they fit a colour scheme such as Catppuccin, Nord, Gruvbox or
Dracula. It can also swap one colour for another, invert colours and find
the dominant palette of an image. Images are handled as Pillow
`Image.Image` objects.

## Installation

```
pip install .
```

Python 3.10 or newer is required. The library depends on Pillow and PyYAML.

## Themes

`wallhue.themes` holds about thirty built-in themes, registered under
lower-case keys such as `catppuccin`, `nord`, `gruvbox`, `dracula`,
`tokyo-storm`, `rose-pine` and `kanagawa`.

```python
from wallhue.themes import (
    Theme, list_themes, select_theme, get_theme_colors,
    hex_to_rgba, rgb_to_hex, register_theme,
)

list_themes()                 # names of all registered themes
select_theme("Nord")          # lookup ignores case; unknown names raise UnknownThemeError
get_theme_colors("nord")      # ["#2E3440", "#3B4252", ...]

hex_to_rgba("#5D3FD3")        # (93, 63, 211, 255); bad input raises ValueError
rgb_to_hex((93, 63, 211))     # "#5D3FD3"

register_theme(Theme("mytheme", [hex_to_rgba("#1E1E2E"), hex_to_rgba("#CBA6F7")]))
```

`load_custom_themes(entries)` registers a list of `config.ThemeEntry`
objects, skipping entries without a name or colours, entries with an invalid
colour (logged as an error) and names that are already taken.

## Recolouring to a theme

```python
from PIL import Image
from wallhue.convert import ThemeConverter

img = Image.open("wallpaper.png")
out = ThemeConverter(output_folder="/tmp/wallhue").process(img, "catppuccin")
out.save("wallpaper-catppuccin.png")
```

By default colours are mapped through a level 8 Hald CLUT whose entries are
blended onto the theme with Gaussian radial basis weights. The CLUT is made
once per theme and cached as a PNG in the `cluts` folder under
`output_folder`, its file name carrying a hash of the theme's colours so
that a changed theme gets a new table. With `backend="nn"` every pixel is
instead replaced by the nearest theme colour (`nearest_neighbour`,
`nearest_color`). The lower-level pieces are in `wallhue.haldclut`:
`generate_identity_clut`, `interpolate_clut`, `apply_clut`, `correct_pixel`,
`save_hald_clut`, `load_hald_clut` and `RBFMapper`.

## Replacing a colour

```python
from wallhue.replace import ReplaceProcessor

out = ReplaceProcessor("#FF0000", "#00FF00", threshold=20).process(img, "")
```

Every pixel whose Euclidean RGB distance to the first colour is at most the
threshold (8.5 by default) becomes the second colour. If no pixel matches,
`ColorNotFoundError` is raised.

## Inverting colours

```python
from wallhue.invert import Inverter, invert_color

out = Inverter().process(img, "")   # RGBA image, alpha kept
invert_color((10, 20, 30, 255))     # (245, 235, 225, 255)
```

## Extracting a palette

```python
from wallhue.mediancut import get_palette

get_palette(img, 6)   # six (r, g, b, a) tuples, most common first
```

Colours are found with median cut on a 15-bit histogram; pixels with alpha
below 125 are ignored. `wallhue.extract.ExtractProcessor(num_of_colors=6)`
prints the palette as hex codes through the logger.

## Configuration

`wallhue.config.load_config()` reads `~/.config/wallhue/config.yml`,
creating it empty if missing, and returns an `Options` object. It also
creates the output folder with `cluts` and `gifs` subfolders: `Pictures/wallhue`
under the home directory, `$XDG_PICTURES_DIR/wallhue` when that variable is
set, or the folder named by `OutputFolder`. Recognised keys:

```yaml
EnableImagePreviewing: true
InlineImagePreview: false
ImagePreviewBackend: ""
ColorCorrectionBackend: ""      # "nn" for nearest-neighbour mapping
OutputFolder: ""                # folder under your home for results
themes:
  - name: mytheme
    colors:
      - "#1E1E2E"
      - "#CBA6F7"
```

A file that is not valid YAML or has values of the wrong type is reported as
an error and the defaults are returned.

## Other modules

- `wallhue.logger`: a `Logger` writing to stdout unless quiet and red error
  messages to stderr; `fatal` raises `SystemExit(1)`. Module-level
  `info`, `error`, `fatal` and `set_quiet` use a shared instance.
- `wallhue.terminal`: `is_kitty`, `is_konsole`, `is_ghostty`, `is_wezterm`
  detect the terminal from environment variables; `has_icat` and
  `has_chafa` look for those programs on `PATH`.

## What the package does not do

There is no command-line program: nothing is installed to run from the
shell. The package also does not read or write image files for you, pick
output paths, process batches or directories, read from standard input or
write to standard output, or open results in a viewer. Load and save images
with Pillow and call the processors directly.

## Development

```
pip install -e ".[test]"
pytest
```