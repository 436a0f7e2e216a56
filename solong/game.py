"""Game state: the player walking a validated map and collecting items."""

from __future__ import annotations

from collections.abc import Iterable
from enum import Enum, auto

from solong.grid import locate, validate

FLOOR = "0"
WALL = "1"
COLLECTIBLE = "C"
EXIT = "E"
PLAYER = "P"


class Direction(Enum):
    """A step on the grid, as (dx, dy) with y growing downwards."""

    UP = (0, -1)
    LEFT = (-1, 0)
    DOWN = (0, 1)
    RIGHT = (1, 0)

    def __init__(self, dx: int, dy: int) -> None:
        self.dx = dx
        self.dy = dy


class MoveResult(Enum):
    """What happened when the player tried to move."""

    BLOCKED = auto()
    MOVED = auto()
    COLLECTED = auto()
    FINISHED = auto()


class Game:
    """A running game on a map that has passed the structural checks."""

    def __init__(self, rows: Iterable[str]) -> None:
        rows = list(rows)
        counts = validate(rows)
        self._grid = [list(row) for row in rows]
        self.player = locate(rows, PLAYER)
        self.exit = locate(rows, EXIT)
        self.collectibles = counts[COLLECTIBLE]
        self.moves = 0
        self.finished = False

    @property
    def width(self) -> int:
        return len(self._grid[0])

    @property
    def height(self) -> int:
        return len(self._grid)

    @property
    def rows(self) -> list[str]:
        """The current map, one string per row."""
        return ["".join(row) for row in self._grid]

    def tile_at(self, x: int, y: int) -> str:
        """Return the tile at column x, row y."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"tile ({x}, {y}) outside {self.width}x{self.height}")
        return self._grid[y][x]

    def move(self, direction: Direction) -> MoveResult:
        """Try to move the player one tile in the given direction.

        Walls block the move, and so does the exit while collectibles remain.
        Stepping onto the exit once everything is collected ends the game
        without counting as a move.
        """
        if self.finished:
            raise RuntimeError("the game is already finished")
        x, y = self.player
        nx, ny = x + direction.dx, y + direction.dy
        target = self.tile_at(nx, ny)
        if target == WALL:
            return MoveResult.BLOCKED
        if target == EXIT:
            if self.collectibles:
                return MoveResult.BLOCKED
            self.finished = True
            return MoveResult.FINISHED
        result = MoveResult.MOVED
        if target == COLLECTIBLE:
            self.collectibles -= 1
            result = MoveResult.COLLECTED
        self.moves += 1
        self._grid[y][x] = FLOOR
        self._grid[ny][nx] = PLAYER
        self.player = (nx, ny)
        return result