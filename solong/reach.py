"""Reachability checks: every collectible must be reachable."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from solong.grid import ErrorKind, MapError, locate

_STEPS = ((1, 0), (-1, 0), (0, 1), (0, -1))


def flood_fill(
    rows: Sequence[str], start: tuple[int, int], blockers: Iterable[str]
) -> set[tuple[int, int]]:
    """Return every (x, y) reachable from start without entering a blocker tile."""
    blocked = frozenset(blockers)
    reached: set[tuple[int, int]] = set()
    pending = [start]
    while pending:
        x, y = pending.pop()
        if (x, y) in reached or not 0 <= y < len(rows) or not 0 <= x < len(rows[y]):
            continue
        if rows[y][x] in blocked:
            continue
        reached.add((x, y))
        pending.extend((x + dx, y + dy) for dx, dy in _STEPS)
    return reached


def _collectibles(rows: Sequence[str]) -> list[tuple[int, int]]:
    return [
        (x, y) for y, row in enumerate(rows) for x, tile in enumerate(row) if tile == "C"
    ]


def check_reachable(rows: Sequence[str]) -> set[tuple[int, int]]:
    """Check that the player and the exit both reach every collectible.

    The player may not walk through the exit. Returns the tiles the player reaches.
    """
    coins = _collectibles(rows)
    from_player = flood_fill(rows, locate(rows, "P"), {"1", "E"})
    if any(coin not in from_player for coin in coins):
        raise MapError(ErrorKind.UNREACHABLE_ITEM)
    from_exit = flood_fill(rows, locate(rows, "E"), {"1"})
    if any(coin not in from_exit for coin in coins):
        raise MapError(ErrorKind.UNREACHABLE_ITEM)
    return from_player