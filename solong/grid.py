"""Structural checks for a map given as a list of rows."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

ALLOWED_TILES = frozenset("10EPC")
WALL = "1"


class ErrorKind(Enum):
    """Every way a map can be rejected, with its exit code and message."""

    NOT_RECTANGLE = (0, "Map is not rectangle!!")
    NOT_ENOUGH_LINES = (1, "Not enough line for the map!!")
    NOT_SURROUNDED = (2, "Map is not surrounded wall!!")
    INVALID_CHARACTER = (3, "Invalid Argument !!")
    INVALID_COUNT = (4, "Invalid Argument Count!!")
    NOT_REACHABLE = (5, "Map is not reachable!!")
    EMPTY_LINE = (6, "Empty Line in the map!!")
    UNREACHABLE_ITEM = (7, "Invalid Coin or Exit Replacement!!")
    OUT_OF_MEMORY = (8, "Malloc Error")
    INVALID_NAME = (9, "Invalid Map Name")

    def __init__(self, code: int, message: str) -> None:
        self.code = code
        self.message = message


class MapError(Exception):
    """Raised when a map cannot be loaded or is not playable."""

    def __init__(self, kind: ErrorKind) -> None:
        super().__init__(kind.message)
        self.kind = kind


def check_rectangle(rows: Sequence[str]) -> None:
    """Every row must be as long as the first one."""
    width = len(rows[0]) if rows else 0
    if any(len(row) != width for row in rows):
        raise MapError(ErrorKind.NOT_RECTANGLE)


def check_characters(rows: Sequence[str]) -> None:
    """Only walls, floor, exit, player and collectibles are allowed."""
    if any(tile not in ALLOWED_TILES for row in rows for tile in row):
        raise MapError(ErrorKind.INVALID_CHARACTER)


def check_walls(rows: Sequence[str]) -> None:
    """The map needs at least three rows and a closed wall border."""
    if len(rows) < 3:
        raise MapError(ErrorKind.NOT_ENOUGH_LINES)
    top, *middle, bottom = rows
    if any(tile != WALL for tile in top):
        raise MapError(ErrorKind.NOT_SURROUNDED)
    for row in middle:
        if not row or row[0] != WALL or row[-1] != WALL:
            raise MapError(ErrorKind.NOT_SURROUNDED)
    if any(tile != WALL for tile in bottom):
        raise MapError(ErrorKind.NOT_SURROUNDED)


def count_elements(rows: Sequence[str]) -> dict[str, int]:
    """Count collectibles, exits and players; exactly one P and E, at least one C."""
    counts = {tile: sum(row.count(tile) for row in rows) for tile in "CEP"}
    if not (counts["P"] == 1 and counts["C"] >= 1 and counts["E"] == 1):
        raise MapError(ErrorKind.INVALID_COUNT)
    return counts


def locate(rows: Sequence[str], tile: str) -> tuple[int, int]:
    """Return (x, y) of the tile: the first one in the last row holding it."""
    found: tuple[int, int] | None = None
    for y, row in enumerate(rows):
        x = row.find(tile)
        if x >= 0:
            found = (x, y)
    if found is None:
        raise ValueError(f"no {tile!r} tile on the map")
    return found


def validate(rows: Sequence[str]) -> dict[str, int]:
    """Run every structural check in order and return the element counts."""
    if not rows:
        raise MapError(ErrorKind.EMPTY_LINE)
    check_rectangle(rows)
    check_characters(rows)
    check_walls(rows)
    return count_elements(rows)