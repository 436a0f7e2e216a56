# solong

A small top-down puzzle game. You walk a player around a walled map,
pick up every coin, and then leave through the exit. Each step is
counted and printed.

## Installing

    pip install .

This pulls in `pygame`, which draws the window.

## Playing

    solong path/to/level.ber

The same entry point can be started with `python -m solong.app level.ber`.

The window is 64 pixels per tile. Textures are XPM files named
`wall.xpm`, `coin.xpm`, `exit.xpm`, `background.xpm` and `player.xpm`,
read from a `textures` directory in the current working directory.
Each tile is drawn over the background texture; floor tiles show the
background alone.

Controls (acted on when the key is released):

- `W` / Up arrow: move up
- `A` / Left arrow: move left
- `S` / Down arrow: move down
- `D` / Right arrow: move right
- `Esc` (prints "Quitting game by pressing ESC") or closing the window: quit

After every move that succeeds, the total number of moves is printed.
Walls block you. The exit also blocks you until every coin is collected;
stepping onto it after that ends the game, and that last step is not
counted.

If the command is not given exactly one argument, it prints
`Error` / `Invalid Map Name` and exits with status 0. A rejected map
prints `Error` and the reason, and exits with status 1; so does a
texture that cannot be read or parsed.

## Map format

A map is a text file whose name ends in `.ber`. Each line is one row
of tiles; a single trailing newline at the end of the file is allowed.

| Tile | Meaning      |
|------|--------------|
| `1`  | wall         |
| `0`  | floor        |
| `C`  | coin         |
| `E`  | exit         |
| `P`  | player start |

Example:

    1111111
    1P0C0E1
    1111111

A map is rejected, with the reason shown, when:

- the file name does not end in `.ber` or the file cannot be read
  (`Invalid Map Name`);
- it is empty or contains an empty line (`Empty Line in the map!!`);
- its rows are not all the same length (`Map is not rectangle!!`);
- it holds any character other than the five above (`Invalid Argument !!`);
- it has fewer than three rows (`Not enough line for the map!!`);
- it is not fully enclosed by walls (`Map is not surrounded wall!!`);
- it does not have exactly one player, exactly one exit and at least one
  coin (`Invalid Argument Count!!`);
- some coin cannot be reached from the player (who may not pass through
  the exit), or from the exit (`Invalid Coin or Exit Replacement!!`).

The checks run in that order and the first failure is reported.

## Using it as a library

    from solong.loader import load_map
    from solong.game import Game, Direction, MoveResult

    rows = load_map("level.ber")   # raises MapError on a bad map
    game = Game(rows)
    result = game.move(Direction.RIGHT)
    if result is MoveResult.FINISHED:
        print("done in", game.moves, "moves")

Modules:

- `solong.grid`: `validate(rows)` runs the structural checks and returns
  the counts of `C`, `E` and `P`; the individual checks are
  `check_rectangle`, `check_characters`, `check_walls` and
  `count_elements`. `locate(rows, tile)` finds a tile's `(x, y)`.
  Failures raise `MapError`, whose `kind` is an `ErrorKind` carrying a
  `code` and a `message`.
- `solong.reach`: `flood_fill(rows, start, blockers)` returns the set of
  reachable `(x, y)` cells; `check_reachable(rows)` applies the coin
  reachability rules above.
- `solong.loader`: `is_ber_filename`, `split_map_text`, `parse_map(text)`
  (split, validate and check reachability) and `load_map(path)`.
- `solong.game`: `Game(rows)` validates the rows structurally and keeps
  `player`, `exit`, `collectibles`, `moves`, `finished`, `width`,
  `height` and the current `rows`; `tile_at(x, y)` reads a tile.
  `move(direction)` returns `BLOCKED`, `MOVED`, `COLLECTED` or
  `FINISHED`, and raises `RuntimeError` once the game is finished.
- `solong.xpm`: `load_xpm(path)` and `parse_xpm(text)` read an XPM image
  into an `XpmImage` whose `pixel(x, y)` returns `0xRRGGBB`, or
  `TRANSPARENT` (`0xFF000000`) for the colour `None`. Bad data raises
  `XpmError`. Colours are given as `#RRGGBB` or by name; unknown names
  give black.
- `solong.colors`: `lookup_color(name)` returns the value of a named
  colour, case-insensitively; `"none"` gives `-1`.
- `solong.app`: `Renderer(game, texture_dir)` draws a game onto a pygame
  surface with `draw()`; `direction_for_key(key)` maps pygame key codes
  to directions; `run(game, texture_dir)` opens the window and plays;
  `main(argv=None)` is the command.

## What it does not do

There is one level per run and no level selection, saving, score
table, sound or animation. The coin count shown on screen is not drawn;
moves are only printed to standard output. Texture names and the
`textures` directory are fixed.