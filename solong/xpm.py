"""Reading XPM images into plain grids of pixel values."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from solong.colors import lookup_color

TRANSPARENT = 0xFF000000
"""Pixel value stored for the colour "None"."""

_NAME_LIMIT = 63
_INT_RE = re.compile(r"\s*([+-]?\d+)")
_HEX_RE = re.compile(r"([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]+)")


class XpmError(ValueError):
    """Raised when XPM data cannot be read or parsed."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded image: rows of 32-bit pixel values, 0xRRGGBB or TRANSPARENT."""

    width: int
    height: int
    pixels: tuple[tuple[int, ...], ...]

    def pixel(self, x: int, y: int) -> int:
        """Return the pixel value at column x, row y."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height}")
        return self.pixels[y][x]


def _find_unquoted(text: str, token: str, start: int) -> int:
    quoted = False
    for pos in range(start, len(text) - len(token) + 1):
        if text[pos] == '"':
            quoted = not quoted
        elif not quoted and text.startswith(token, pos):
            return pos
    return -1


def _blank(text: str, begin: int, end: int) -> str:
    return text[:begin] + " " * (end - begin) + text[end:]


def strip_comments(text: str) -> str:
    """Replace C-style comments outside double quotes with spaces.

    Block comments are removed first, then line comments together with
    their terminating newline. The length of the text is preserved.
    """
    pos = 0
    while (begin := _find_unquoted(text, "/*", pos)) >= 0:
        close = text.find("*/", begin + 2)
        end = len(text) if close < 0 else close + 2
        text = _blank(text, begin, end)
        pos = begin
    pos = 0
    while (begin := _find_unquoted(text, "//", pos)) >= 0:
        close = text.find("\n", begin + 2)
        end = len(text) if close < 0 else close + 1
        text = _blank(text, begin, end)
        pos = begin
    return text


def split_words(line: str) -> list[str]:
    """Split a line into words separated by spaces and tabs."""
    return [word for word in re.split(r"[ \t]+", line) if word]


def _atoi(word: str) -> int:
    match = _INT_RE.match(word)
    return int(match.group(1)) if match else 0


def _to_int32(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= 1 << 31 else value


def color_from_spec(name: str, extra: str | None = None) -> int:
    """Turn an XPM colour word into a value.

    "#RRGGBB" is read as hexadecimal. Otherwise the name, joined with the
    following word when there is one, is looked up in the colour table;
    unknown names give 0 and "None" gives -1.
    """
    if name.startswith("#"):
        match = _HEX_RE.match(name[1:])
        if not match:
            return 0
        value = int(match.group(2), 16)
        return _to_int32(-value if match.group(1) == "-" else value)
    if extra is not None:
        name = f"{name} {extra}"[:_NAME_LIMIT]
    try:
        return lookup_color(name)
    except KeyError:
        return 0


def _quoted_strings(text: str) -> Iterator[str]:
    pos = 0
    while True:
        start = text.find('"', pos)
        if start < 0:
            return
        stop = text.find('"', start + 1)
        if stop < 0:
            return
        yield text[start + 1 : stop]
        pos = stop + 1


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"missing {what} line") from None


def _stored(value: int) -> int:
    return TRANSPARENT if value == -1 else value & 0xFFFFFFFF


def parse_xpm(text: str | Iterable[str]) -> XpmImage:
    """Parse XPM data.

    A string is treated as XPM file contents; any other iterable gives the
    image's strings directly, one per item.
    """
    if isinstance(text, str):
        lines: Iterator[str] = _quoted_strings(strip_comments(text))
    else:
        lines = iter(text)

    words = split_words(_next_line(lines, "header"))
    if len(words) < 4:
        raise XpmError("header needs width, height, colour count and chars per pixel")
    width, height, ncolors, cpp = (_atoi(word) for word in words[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError("header values must be positive integers")

    # With one or two characters per pixel a later definition overrides an
    # earlier one; with more, the first definition of a key is kept.
    keep_first = cpp > 2
    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = _next_line(lines, "colour")
        entry = split_words(line[cpp:])
        try:
            at = entry.index("c")
        except ValueError:
            raise XpmError(f"colour line without 'c' key: {line!r}") from None
        if at + 1 >= len(entry):
            raise XpmError(f"colour line without a colour: {line!r}")
        extra = entry[at + 2] if at + 2 < len(entry) else None
        value = color_from_spec(entry[at + 1], extra)
        key = line[:cpp]
        if keep_first:
            palette.setdefault(key, value)
        else:
            palette[key] = value

    rows = []
    for _ in range(height):
        line = _next_line(lines, "pixel")
        rows.append(
            tuple(
                _stored(palette.get(line[x * cpp : (x + 1) * cpp], 0))
                for x in range(width)
            )
        )
    return XpmImage(width, height, tuple(rows))


def load_xpm(path: str | os.PathLike[str]) -> XpmImage:
    """Read and parse an XPM file."""
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise XpmError(f"cannot read {os.fspath(path)!r}") from exc
    return parse_xpm(data.decode("latin-1"))