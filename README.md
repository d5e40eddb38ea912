# cubmap

`cubmap` reads and checks `.cub` scene files for a grid-based raycasting
game. It also has a small reader for XPM textures and an in-memory image
buffer that the textures are loaded into.

## What a scene file holds

A `.cub` file has six element lines followed by a map:

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm
F 220,100,0
C 225,30,0

111111
100101
1010N1
111111
```

- The first six non-blank lines are the elements, in any order. Leading
  spaces and tabs are skipped, and an element that appears twice is rejected.
- `NO`, `SO`, `WE`, `EA` give the wall texture paths. Each path must end in
  `.xpm` and name an XPM file that can be read. Its image is loaded into the
  scene.
- `F` and `C` give the floor and ceiling colours as `R,G,B`. Each value is
  between 0 and 255.
- The map starts after any blank lines that follow the elements. It runs to
  the end of the file, has at least three rows and no blank lines inside it.
- The map uses only `0`, `1`, spaces and exactly one player mark: `N`, `E`,
  `S` or `W`. The player mark is replaced by `0` once it has been read.
- Short rows are padded with spaces to the width of the widest row. No floor
  cell (`0`) may touch a space, and that includes the padding.
- The file must have at least seven non-blank lines.

Loading a scene also reads the weapon sprite from `textures/gun.xpm`. The
path is relative to the current directory, and loading fails if that file
is missing.

## Command line

```
cubmap path/to/scene.cub
```

The command checks that the name ends in `.cub` and that the file can be
opened. It then reads and validates the scene and prints a progress line
for each stage. On success it prints the map size, the player position and
the floor and ceiling colours, and exits with status 0. On failure it writes
an error message to standard error and exits with status 1.

## Library use

```python
from cubmap.loader import load_scene
from cubmap.scene import ParseError

try:
    scene = load_scene("maps/level.cub")
except ParseError as err:
    print("invalid scene:", err)
else:
    print(scene.map_width, scene.map_height)
    print(scene.player.pos_x, scene.player.pos_y)
    print(hex(scene.floor.in_int), hex(scene.ceiling.in_int))
```

A loaded `Scene` (`cubmap.scene`) holds the four wall `Texture`s, each with
its `path` and `image`, the `gun` image, the `floor` and `ceiling` `Rgb`
colours, the padded `maplines`, and the `Player`. The player has a position
at the centre of its start cell, a direction vector and a camera plane.
`Scene.init_dir()` sets the player's view angle from the cell under it.

The lower-level pieces can be used on their own:

- `cubmap.loader`: `read_content`, `valid_content` and `load_scene`.
- `cubmap.lines`: `is_empty_line`, `skip_tab_spaces`, `get_index`,
  `valid_file` and `check_file_format`.
- `cubmap.colors`: `set_color_value`, `convert_rgb` and `validate_colors`.
- `cubmap.textures`: `is_valid_path`, `validate_textures` and
  `load_gun_texture`.
- `cubmap.mapgrid`: `parse_map` and the checks it runs (`get_map_size`,
  `store_map`, `check_chars`, `find_player`, `check_void`, `validate_map`).
- `cubmap.xpm`: `xpm_file_to_image` and `xpm_to_image`. Both return an
  `Image` and raise `XpmError` on bad data.
- `cubmap.image`: `Image` with `put_pixel`, `get_pixel` and
  `set_raw_pixel`, plus `new_image`, `rgb_shifts` and `get_color_value`.
- `cubmap.colornames`: `color_by_name`, which looks up a colour name such
  as `"dark orange"`, and `color_names`.

Every validation error is raised as `cubmap.scene.ParseError`, which is a
subclass of `ValueError`.

## What it does not do

`cubmap` only loads and checks scenes. It opens no window, does no
raycasting or drawing, and handles no keyboard input or player movement.
The images it builds stay in memory and are never shown on a screen.

## Running the tests

```
pip install -e .[test]
pytest
```