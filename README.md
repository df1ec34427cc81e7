# raycub

`raycub` draws a textured, first-person view of a grid maze by ray
casting and lets you walk through it. A level is a plain-text `.cub`
scene file that names four wall textures (XPM images), the floor and
ceiling colours, and the map itself.

## Installing

```
pip install .
```

This installs the `raycub` command and its one runtime dependency,
pygame.

## Running

```
raycub path/to/level.cub
raycub --bonus path/to/level.cub
```

The argument must be a single file whose name ends in `.cub`. With
`--bonus` (given first) a minimap is drawn in the top-left corner and the
mouse turns the view: the pointer is hidden and put back to the centre of
the window every frame, and moving it left or right turns the player.

If the arguments are wrong, or the scene or one of its textures is
malformed, the program prints a line starting with `Error : ` to standard
error and exits with status 1.

Controls:

- `W` / `S` – walk forward / backward
- `A` / `D` – strafe left / right
- left / right arrow – turn
- `Esc` or closing the window – quit

The window is 1320 × 880 pixels and is redrawn up to 60 times a second.

## The `.cub` format

Each line is one of the following:

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm
F 220,100,0
C 225,30,0
```

- `NO`, `SO`, `WE`, `EA` give the wall textures as XPM files. The line
  must split on spaces into exactly two words. Textures are sampled as
  64 × 64 images.
- `F` and `C` give the floor and ceiling colours as three decimal
  components separated by commas. Only digits are allowed, and each
  component must lie between 0 and 256.
- Each identifier may appear only once, and a scene missing any of the
  six is rejected.

Every other line belongs to the map, in the order it appears, and may
hold only `0` (floor), `1` (wall), space (outside the map) and the
player's starting cell, one of `N`, `S`, `E`, `W`. An empty line counts
as a map row made of spaces. Rows are padded with spaces to the width of
the longest one.

```
        1111111111111
        1000000000001
        1011000001101
111111111000000000001
100000000011000000001
1000N0000000000000001
111111111111111111111
```

The map must hold exactly one starting cell, and the walkable area must
be closed: every floor cell must be away from the edge of the map and
must not touch a space.

Only lines that end with a newline are read, so the last line of the
file needs one too.

## Using it as a library

The pieces behind the command can be used on their own:

- `raycub.scene.load_scene(path, load_texture=None)` reads a `.cub` file
  and returns a `Scene` (`textures`, `floor`, `ceiling`, `grid`,
  `width`, `height`); `parse_scene(lines, load_texture=None)` does the
  same for lines already in memory. By default textures are read with
  `raycub.xpm.load_xpm`; pass another callable to load them differently.
- `raycub.mapcheck.check_map(grid, width, height, player)` places the
  `raycub.player.Player` at its starting cell, turns that cell into
  floor and checks that the map is closed.
- `raycub.xpm.load_xpm(path)` and `parse_xpm(lines)` decode XPM images
  into an `Image` whose `pixel(x, y)` returns a `0xRRGGBB` value
  (`0xFF000000` for the `none` colour);
  `raycub.colornames.lookup_color(name)` resolves the colour names an XPM
  palette may use.
- `raycub.render.render(frame, scene, player, minimap=False)` draws one
  view into a `Frame`, whose `to_bytes()` gives packed RGB data, three
  bytes per pixel; `cast_ray`, `draw_column`, `draw_walls`,
  `draw_background` and `draw_minimap` expose the individual steps.
- `raycub.player.move(player, keys, grid, mouse_dx=0)` advances the
  player by one frame from a `KeyState`; each axis of the move is blocked
  separately by wall cells, so the player slides along walls.
- `raycub.app.Game` ties these together without opening a window:
  `press(keycode)` and `release(keycode)` take the codes of
  `raycub.player.Key`, and `tick(mouse_x=None)` moves the player and
  returns the drawn `Frame`.

Errors in scene files are raised as `raycub.textparse.CubError` (a
texture that cannot be read becomes a `CubError` too), and errors in XPM
files as `raycub.xpm.XpmError`.

## What it does not do

There are walls, a floor and a ceiling only: no sprites, doors, enemies,
weapons or sound, and no way to save or load progress.

## Tests

```
pip install .[test]
pytest
```