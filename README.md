# cubecaster

A small first-person raycasting engine. It reads a `.cub` scene description,
checks it, and lets you walk through the maze in a window, with a minimap in
the top-left corner. The window is drawn with pygame.

## Installing

```
pip install .
```

To run the tests as well:

```
pip install .[test]
pytest
```

## Running

```
cubecaster path/to/scene.cub
```

The command takes exactly one argument, a file name ending in `.cub`. Any
problem with the arguments, the file or its textures is reported on standard
error and the command exits with a non-zero status.

## Controls

| Key / input         | Action              |
|---------------------|---------------------|
| `W` / `S`           | walk forward / back |
| `A` / `D`           | strafe left / right |
| Left / Right arrow  | turn                |
| Mouse movement      | turn                |
| `Esc` or closing    | quit                |

Movement stops at walls and at the edges of the map.

## The `.cub` format

A scene file holds four wall textures, two colours and a map, with the map
last:

```
NO ./textures/north.xpm
SO ./textures/south.xpm
WE ./textures/west.xpm
EA ./textures/east.xpm

F 220,100,0
C 225,30,0

111111
100101
101001
1100N1
111111
```

- `NO`, `SO`, `WE`, `EA` give the path of an XPM texture for each wall face,
  followed by a single space; each may appear once and every path must exist.
- `F` and `C` give the floor and ceiling colours as three comma-separated
  numbers, each 0 to 255; each may appear once.
- Empty lines between entries are skipped.
- The map starts at the first line beginning with a digit. It uses `1` for
  walls, `0` for floor and one of `N`, `S`, `E`, `W` for the single player
  start and facing. It must be enclosed by walls; spaces inside a row are
  treated as walls.
- Nothing but whitespace may follow the map.

North and east faces are drawn darker than south and west ones.

## Using it as a library

The pieces can be used without opening a window:

- `cubecaster.app.load_game(path)` reads and validates a scene, loads its
  textures and returns a `cubecaster.model.GameData`, raising
  `cubecaster.errors.CubError` (with `message` and `status`) on bad input.
- `cubecaster.app.handle_action(data, action)` applies an `Action`
  (`FORWARD`, `BACKWARD`, `STRAFE_LEFT`, `STRAFE_RIGHT`, `TURN_LEFT`,
  `TURN_RIGHT`, `QUIT`) and returns `False` for `QUIT`;
  `cubecaster.app.run(data)` opens the pygame window and plays.
- `cubecaster.parser` and `cubecaster.validation` hold the reading and
  checking steps (`file_to_variable`, `valid_map`, `valid_texture`,
  `rgb_to_hex`, ...).
- `cubecaster.engine` holds movement (`move`, `rotate`, `rotate_player`) and
  the DDA ray-casting steps.
- `cubecaster.render.render_frame(data)` draws one frame into a `Frame`,
  whose `pixels` are `0xRRGGBB` integers and whose `to_bytes()` gives packed
  RGB bytes.
- `cubecaster.xpm.parse_xpm(text)` and `load_xpm(path)` read XPM images into
  a width, a height and a list of pixels.
- `cubecaster.debug.format_debug(data)` returns a text dump of the texture,
  player and ray state; `debug(data)` prints it.

## Limitations

- Textures must be XPM files. Colours in them may be given as `#RGB`-style
  hex values, `None` (read as black), or one of a few basic names (black,
  white, red, green, blue, yellow, cyan, magenta, gray/grey); other colour
  names are rejected.
- Textures are sampled as 64 by 64 pixels; larger images are cropped and
  smaller ones padded with black.
- There are no sprites, doors, sound or saved state; the game is walking
  through the maze only.