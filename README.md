# cubscene

Reads and checks `.cub` scene files, the small description format used by
grid-based raycasting games, and decodes the XPM images they use as wall
textures.

A scene file names four wall textures, a floor colour and a ceiling colour,
and ends with a map made of walls (`1`), open floor (`0`), blanks and a
single player spawn (`N`, `S`, `E` or `W`):

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

The rules that are checked:

- each texture path must be a file that can be opened for reading;
- each colour must be three comma-separated numbers of one to three digits,
  none above 255;
- every texture and colour appears only once, and all six come before the
  map;
- lines may only start (after spaces) with an identifier, `1` or be empty;
  there is only one map;
- the map holds only blanks, `0`, `1` and exactly one spawn, and no open
  cell or spawn touches a blank.

The first problem found is reported as a `cubscene.errors.SceneError`,
whose message says what is wrong (for example `The map is open` or
`Bad format of floor`).

## Command line

```
cubscene path/to/level.cub
```

On success it prints the texture paths, both colours as `0xRRGGBB` and the
spawn's direction and position in the padded grid, and exits with status 0.
On failure it writes `Error` and the reason to standard error and exits
with status 1.

## Library

```python
from cubscene.scene import read_scene, parse_scene
from cubscene.errors import SceneError

try:
    scene = read_scene("level.cub")
except SceneError as exc:
    print(exc)
else:
    print(hex(scene.floor.packed()), hex(scene.ceiling.packed()))
    print(scene.spawn)  # (row, column, direction)
```

`parse_scene(lines)` does the same on lines already read (each keeping its
newline) or on the whole text as one string. A `Scene` holds `north`,
`south`, `east`, `west`, `floor`, `ceiling`, `rows` (the padded map grid)
and `spawn`.

The pieces can also be used on their own:

- `cubscene.colors.parse_color(text, surface)` returns a `Color` with
  `red`, `green` and `blue`; `Color.packed()` gives `0xRRGGBB`.
- `cubscene.grid.split_map(text)` lays a map out on a rectangle padded with
  blanks, and `cubscene.grid.check_map(rows)` validates it and returns the
  spawn.
- `cubscene.rgbnames.lookup_color(name)` looks up an X11 colour name,
  ignoring ASCII case; `none` gives -1 and unknown names raise `KeyError`.
- `cubscene.xpm.read_xpm(path)` and `cubscene.xpm.parse_xpm(lines)` decode
  XPM images into an `XpmImage` with `width`, `height` and `pixels` (rows of
  `0xRRGGBB` values, with `0xFF000000` for the transparent colour);
  `to_bytes(big_endian=False)` packs them as 32-bit values.
  `strip_comments`, `split_words`, `text_to_rgb` and `convert_color` are the
  helpers behind it; colour names that are not known decode as black.

## What it does not do

This package only reads and checks scenes and textures. It does not open a
window, render the scene, cast rays or handle player input.

## Tests

```
pip install -e .[test]
pytest
```