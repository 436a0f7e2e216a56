"""Reading map files and turning their text into validated rows."""

from __future__ import annotations

import os
from pathlib import Path

from solong.grid import ErrorKind, MapError, validate
from solong.reach import check_reachable

MAP_SUFFIX = ".ber"


def is_ber_filename(name: str) -> bool:
    """True if the name ends in '.ber'."""
    return len(name) >= len(MAP_SUFFIX) and name.endswith(MAP_SUFFIX)


def split_map_text(text: str) -> list[str]:
    """Split map text into rows, rejecting any empty line."""
    *lines, tail = text.split("\n")
    if any(line == "" for line in lines):
        raise MapError(ErrorKind.EMPTY_LINE)
    return lines + [tail] if tail else lines


def parse_map(text: str) -> list[str]:
    """Split, validate and check reachability; return the rows."""
    rows = split_map_text(text)
    validate(rows)
    check_reachable(rows)
    return rows


def load_map(path: str | os.PathLike[str]) -> list[str]:
    """Load a '.ber' map file and return its validated rows."""
    if not is_ber_filename(os.fspath(path)):
        raise MapError(ErrorKind.INVALID_NAME)
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise MapError(ErrorKind.INVALID_NAME) from exc
    return parse_map(data.decode("utf-8", errors="replace"))