# cub3d

Reads a `.cub` scene description, checks that it describes a playable,
closed map, and prints what it found. It can also load XPM textures into
in-memory pixel images.

## Installing

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## The command

```
cub3d maps/map.cub
```

The command takes exactly one argument, a file name ending in `.cub`;
otherwise it prints `usage: cub3d <map.cub>` and exits with status 1.

Each non-blank line of the file is one of:

- a texture line: `NO`, `SO`, `WE` or `EA`, a space, then a path;
- a colour line: `F` (floor) or `C` (ceiling), a space, then `R,G,B`, each
  value from 0 to 255;
- a map line: any line holding at least one of `0`, `1`, `N`, `S`, `E`, `W`.

Other lines are reported as ignored. A malformed colour line is reported
and left out; the colour then stays at `-1`. Each line is echoed as it is
read.

Example:

```
NO textures/north.xpm
SO textures/south.xpm
WE textures/west.xpm
EA textures/east.xpm
F 220,100,0
C 225,30,0

111111
100001
1000N1
111111
```

After parsing, the map is checked in this order, and the first failure is
printed as `Error` followed by its message, with exit status 1:

1. only `0`, `1`, `N`, `S`, `E`, `W` and spaces appear
   (`Invalid characters in map`);
2. there is exactly one player start, which is then replaced by `0`
   (`No player or multiple players found`);
3. the first and last rows hold only walls and spaces, and every other
   row starts and ends (ignoring spaces) with a wall
   (`Map is not closed by walls`);
4. a space only touches walls, other spaces or the edge of the map
   (`Invalid space configuration`);
5. the area reachable from the player never touches the map's border
   (`Player area is not properly enclosed`);
6. all four texture files can be opened (`Texture files not found`).

When every check passes it prints `Carte valide !`, the configuration
(texture paths, floor and ceiling colours as integers) and the map with
its dimensions and the player's position, and exits with status 0. If the
file cannot be opened it reports the error and exits with status 1.

## As a library

```python
from cub3d.scene import Scene, parse_file
from cub3d.validate import MapError, check_map

scene = Scene()
parse_file("maps/map.cub", scene)
try:
    check_map(scene)
except MapError as err:
    print(err)
else:
    print(scene.player, scene.config.floor_color)
```

- `cub3d.scene`: `Scene`, `Config` and `Player` dataclasses, `parse_file`,
  `parse_lines` for lines already in memory, the line classifiers
  `is_texture_line`, `is_color_line`, `is_map_line`, `convert_rgb`
  (raises `ValueError` on a bad colour), and `check_file_extension`.
- `cub3d.validate`: the individual checks (`check_content`, `find_player`,
  `check_walls`, `check_spaces`, `check_path`, `check_files`), each
  returning a bool, and `check_map`, which raises `MapError`.
- `cub3d.cli`: `main`, plus `format_config` and `format_map`, which return
  the printed reports as strings.

### Textures

```python
from cub3d.xpm import xpm_file_to_image

image = xpm_file_to_image("textures/north.xpm")
print(image.width, image.height, hex(image.get_pixel(0, 0)))
```

`cub3d.xpm.xpm_file_to_image` strips C comments, takes the quoted strings
of the file and builds an image from them; `xpm_to_image` and `parse_xpm`
do the same from a list of strings (header, colour lines, pixel rows).
Malformed data raises `XpmError`. Colours are given as `#rrggbb` or an X11
colour name; the `None` colour is stored as `0xFF000000`, and pixels with
an unknown key are 0.

`cub3d.colors.text_to_rgb` resolves `#rrggbb` values and X11 colour names
(unknown names give 0, `none` gives -1); `lookup_color` returns `None` for
an unknown name.

`cub3d.image.Image` is a zero-filled byte buffer, 32 bits per pixel and
little-endian by default, with `put_pixel` and `get_pixel`.
`good_color` converts a `0xRRGGBB` colour to a pixel value for a display of
a given depth, using the channel shifts that `rgb_shifts` computes from
colour masks.

## What it does not do

The package only reads and checks scenes and builds images in memory. It
opens no window, draws nothing on screen and does not render or play the
scene.