# solong

A small tile-based puzzle game. You steer a player around a walled map. You pick up every collectible and then walk out through the exit. Each step the player takes is counted. The count is printed to standard output and shown in the window.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Playing

```
solong path/to/level.ber
```

The command takes exactly one argument. With any other number of arguments it exits with status 1 and prints nothing.

The tile images are read from a `srcs` directory in the current working directory. They must be XPM files with these names:

- `floor.xpm`
- `wall.xpm`
- `exit.xpm`
- `pokeball.xpm`
- `charizard_front.xpm`
- `charizard_back.xpm`
- `charizard_left.xpm`
- `charizard_right.xpm`

Each tile is drawn 64×64 pixels. The package does not ship any of these images. You have to provide them yourself.

Controls:

| Key | Action     |
|-----|------------|
| W   | move up    |
| A   | move left  |
| S   | move down  |
| D   | move right |
| Esc | quit       |

Closing the window also quits. Walking into a wall does nothing. Walking onto a collectible picks it up. The exit blocks the player until every collectible has been picked up. After that, stepping onto the exit wins, and the program ends.

The program prints `Error` to standard error and exits with status 1 in two cases:

- the map is invalid;
- an image cannot be read or parsed.

## Map files

Maps are plain text files with the `.ber` extension. They use these characters:

| Char | Meaning            |
|------|--------------------|
| `1`  | wall               |
| `0`  | floor              |
| `P`  | player start (one) |
| `E`  | exit (one)         |
| `C`  | collectible (≥ 1)  |

`solong.mapfile.load_map` checks, in order, that:

- the name ends in `.ber`;
- the file can be read and is not empty;
- the map is closed by walls on all four sides;
- every tile is one of the characters above;
- every line has the width of the first line;
- there is exactly one `P`, exactly one `E` and at least one `C`;
- every collectible can be reached from the start, and at least one tile next to the exit can be reached.

The player cannot pass through walls or the exit. Because of the width check, the last line must not end with a newline.

Example:

```
1111111
1P0C0E1
1111111
```

## Using it as a library

```python
from solong.mapfile import load_map
from solong.game import Game, Direction, MoveOutcome

game_map = load_map("level.ber")
game = Game.from_map(game_map)
outcome = game.move(Direction.RIGHT)   # MoveOutcome.MOVED, BLOCKED, WON or IGNORED
print(game.player, game.moves, game.collectibles.remaining())
```

Modules:

- `solong.mapfile`:
  - `GameMap`, `MapError`;
  - the individual checks: `check_extension`, `read_map`, `check_walls`, `check_letters`, `check_map`, `validate_path`;
  - `load_map`, which runs all of them.
- `solong.game`:
  - `Game`: `move` takes a `Direction`; `handle_key` takes key codes from `Key`;
  - `Collectibles`;
  - `MoveOutcome`.
  - Set `Game.log` to a text stream to have each move count written to it.
- `solong.app`:
  - `GameWindow`, the pygame window;
  - `load_surface`, which turns an XPM file into a pygame surface;
  - `main`, behind the `solong` command.
- `solong.xpm`: `load_xpm`, `parse_xpm` and `parse_xpm_lines` read XPM images into `XpmImage` objects. They raise `XpmError` on bad data.
- `solong.colors.lookup_color`: resolves X11 colour names, ignoring case.
- `solong.lines.read_lines`: yields the lines of a text or binary stream, reading it in fixed-size chunks.
- `solong.printf`: `format_printf` and `printf` are a small printf-style formatter with `%c %s %d %i %u %x %X %p %%`.