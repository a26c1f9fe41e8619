# solong

A small top-down puzzle game. You steer a cat around a walled map, catch
every mouse on it, and then walk out through the exit.

## Installing

```
pip install .
```

This pulls in `pygame`, which draws the window.

## Playing

```
solong maps/level1.ber
```

The command takes exactly one argument, a map file whose name ends in
`.ber`. Anything else prints `Error` and exits with status 1. A map that
cannot be read, or that fails validation, also ends the program with
status 1; validation failures print `Error` followed by a line naming
the problem.

Controls:

| Key                | Action     |
|--------------------|------------|
| `W` / Up arrow     | move up    |
| `A` / Left arrow   | move left  |
| `S` / Down arrow   | move down  |
| `D` / Right arrow  | move right |
| `Esc`              | quit       |

Every step that moves the player is counted, and the count is printed to
standard output as `Number of movment : N`. Walls and the edge of the map
block movement. Closing the window also quits. Stepping on the exit once
every collectible has been taken ends the game; until then the exit can
be walked over like floor.

Tile images are read from a `textures/` directory in the current working
directory: `wall.xpm`, `floor.xpm`, `cat.xpm`, `mouse.xpm` and
`exit.xpm`. Each tile is drawn 64 × 64 pixels. If any image is missing,
`Error loading textures` is written to standard error and the program
exits with status 1.

## Map format

A map is a plain text file, one row per line, using these characters:

| Char | Meaning                    |
|------|----------------------------|
| `1`  | wall                       |
| `0`  | floor                      |
| `P`  | player start (one only)    |
| `E`  | exit (one only)            |
| `C`  | collectible (at least one) |

Example:

```
1111111
1P0C0E1
1111111
```

A map is rejected, in this order of checks, when it:

- is not rectangular (`Map is not rectangular`),
- is not enclosed by walls on every side (`Map is not surrounded by walls`),
- lacks exactly one player, exactly one exit, or at least one collectible
  (`Missing or incorrect elements`),
- has a collectible or the exit the player cannot reach
  (`No valid path exists`).

## Using it as a library

The map checks are available on their own in `solong.mapfile`:

```python
from solong.mapfile import read_map, validate_map, MapError

grid = read_map("maps/level1.ber")
try:
    validate_map(grid)
except MapError as err:
    print(err)
```

`is_rectangular`, `is_walled`, `has_required_elements`, `has_valid_path`
and `has_map_extension` can also be called one by one.

`solong.game.Game` holds the game state and movement rules without any
display attached:

```python
from solong.game import Game

game = Game(["1111111", "1P0C0E1", "1111111"])
game.move(1, 0)          # True if the player moved or finished
game.handle_key(100)     # the same key codes the window uses ('d' here)
print(game.player_x, game.player_y, game.moves, game.remaining, game.finished)
```

`Game` raises `MapError` for an empty grid or one without a player.

`solong.display` holds the window side: `load_textures`, `tile_texture`,
`draw` and `main`, the function behind the `solong` command.

The package also carries small helper modules:

- `solong.printf` – `cformat` and `cprint` for `%d %i %s %c %u %x %X %p %%`
  formatting, and `put_char`, `put_str`, `put_endl`, `put_number`.
- `solong.lines` – `LineReader`, which reads a stream line by line through
  a fixed-size read buffer.
- `solong.strings`, `solong.chars`, `solong.memory` – string, character
  and byte-buffer routines with classic C edge-case behaviour.
- `solong.linkedlist` – `LinkedList`, a singly linked list.

## Running the tests

```
pip install .[test]
pytest
```