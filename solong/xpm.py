"""Reading of XPM pixmaps into rows of 32-bit pixel values."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from solong.chars import atoi
from solong.colors import lookup_color

TRANSPARENT = 0xFF000000
_NAME_BUFFER = 64
_HEX_PREFIX = re.compile(r"[ \t\n\v\f\r]*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]*)")
_QUOTED = re.compile(r'"([^"]*)"')


class XpmError(ValueError):
    """Raised when XPM data cannot be parsed."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded XPM image: its size and one row of pixel values per line."""

    width: int
    height: int
    pixels: tuple[tuple[int, ...], ...]

    def pixel(self, x: int, y: int) -> int:
        """Return the pixel value at column ``x`` of row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) is outside a {self.width}x{self.height} image")
        return self.pixels[y][x]


def split_words(text: str) -> list[str]:
    """Split ``text`` on spaces and tabs, dropping empty words."""
    return [word for word in re.split(r"[ \t]+", text) if word]


def find_unquoted(text: str, needle: str) -> int | None:
    """Return the index of the first ``needle`` outside double quotes, or None."""
    if not needle:
        raise ValueError("needle must not be empty")
    quoted = False
    for pos in range(len(text) - len(needle) + 1):
        if text[pos] == '"':
            quoted = not quoted
        if not quoted and text.startswith(needle, pos):
            return pos
    return None


def _blank(text: str, start: int, stop: int) -> str:
    return text[:start] + " " * (stop - start) + text[stop:]


def strip_comments(text: str) -> str:
    """Replace C comments outside quoted strings with spaces.

    The text keeps its length. A line comment is blanked together with the
    newline that ends it.
    """
    while (begin := find_unquoted(text, "/*")) is not None:
        end = text.find("*/", begin + 2)
        text = _blank(text, begin, len(text) if end < 0 else end + 2)
    while (begin := find_unquoted(text, "//")) is not None:
        end = text.find("\n", begin + 2)
        text = _blank(text, begin, len(text) if end < 0 else end + 1)
    return text


def _to_c_int(value: int) -> int:
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value >= 1 << 31 else value


def text_to_rgb(name: str, end: str | None = None) -> int:
    """Turn a colour given in an XPM colour line into a 0xRRGGBB value.

    '#RRGGBB' is read as hexadecimal. Otherwise ``name`` (joined with
    ``end`` by a space when given) is looked up among the named colours;
    "None" gives -1 and unknown names give 0.
    """
    if name.startswith("#"):
        match = _HEX_PREFIX.match(name, 1)
        digits = match.group(2) if match else ""
        if not digits:
            return 0
        value = int(digits, 16)
        return _to_c_int(-value if match.group(1) == "-" else value)
    if end is not None:
        name = f"{name} {end}"[: _NAME_BUFFER - 1]
    try:
        return lookup_color(name)
    except KeyError:
        return 0


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"XPM data ends before the {what}") from None


def _read_header(line: str) -> tuple[int, int, int, int]:
    words = split_words(line)
    if len(words) < 4:
        raise XpmError(f"XPM header needs four values: {line!r}")
    values = tuple(atoi(word) for word in words[:4])
    if any(value <= 0 for value in values):
        raise XpmError(f"XPM header values must be positive: {line!r}")
    width, height, ncolors, cpp = values
    return width, height, ncolors, cpp


def _read_color(line: str, cpp: int) -> tuple[str, int]:
    if len(line) < cpp:
        raise XpmError(f"colour line too short: {line!r}")
    words = split_words(line[cpp:])
    try:
        index = words.index("c") + 1
    except ValueError:
        raise XpmError(f"colour line has no 'c' key: {line!r}") from None
    if index >= len(words):
        raise XpmError(f"colour line has no colour after 'c': {line!r}")
    end = words[index + 1] if index + 1 < len(words) else None
    return line[:cpp], text_to_rgb(words[index], end)


def parse_xpm(lines: Iterable[str]) -> XpmImage:
    """Decode XPM data given as its sequence of strings.

    Pixels whose colour is "None" get the value 0xFF000000; pixels whose
    character code has no colour get 0.
    """
    source = iter(lines)
    width, height, ncolors, cpp = _read_header(_next_line(source, "header"))
    # Short codes overwrite earlier definitions; longer codes keep the first.
    direct = cpp <= 2
    palette: dict[str, int] = {}
    for _ in range(ncolors):
        key, rgb = _read_color(_next_line(source, "colour table"), cpp)
        if direct:
            palette[key] = rgb
        else:
            palette.setdefault(key, rgb)
    rows = []
    for _ in range(height):
        line = _next_line(source, "pixel rows")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row too short: {line!r}")
        row = []
        for x in range(width):
            value = palette.get(line[x * cpp : (x + 1) * cpp], 0)
            row.append(TRANSPARENT if value == -1 else value)
        rows.append(tuple(row))
    return XpmImage(width, height, tuple(rows))


def parse_xpm_text(text: str) -> XpmImage:
    """Decode the text of an XPM file: comments are dropped, quoted strings read."""
    return parse_xpm(_QUOTED.findall(strip_comments(text)))


def load_xpm(path: str | Path) -> XpmImage:
    """Read and decode an XPM file."""
    return parse_xpm_text(Path(path).read_text(encoding="latin-1"))