"""Loading and validation of .ber game maps."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from solong.lines import read_lines
from solong.strings import strtrim

OPEN_FAILED = "Error:\nFailed to open the map file\n"
INVALID_WALL = "Error:\nInvalid wall\n"
INVALID_CHARACTER = "Error:\nInvalid character in the map\n"
INVALID_ITEM_COUNT = "Error:\nInvalid number of items in the map\n"
UNREACHABLE_ITEM = "Error:\nInvalid item in the map\n"

VALID_TILES = frozenset("10CEP")
_ITEMS = frozenset("CPE")


class MapError(Exception):
    """A map that cannot be played; the message is the text to report."""


@dataclass(frozen=True)
class GameMap:
    """A validated map: its raw lines, trimmed rows and key positions."""

    lines: tuple[str, ...]
    rows: tuple[str, ...]
    width: int
    height: int
    player: tuple[int, int]
    exit: tuple[int, int]
    collectibles: int
    move_count: int = 0


def check_map_name(path: str | os.PathLike[str]) -> bool:
    """True when the file name ends in '.ber'."""
    return os.fspath(path).endswith(".ber")


def read_map_lines(path: str | Path) -> list[str]:
    """Return the lines of a map file, newlines included."""
    try:
        return read_lines(path)
    except OSError:
        raise MapError(OPEN_FAILED) from None
    except UnicodeDecodeError:
        raise MapError(INVALID_CHARACTER) from None


def _require_wall(row: str) -> None:
    if any(tile != "1" for tile in row):
        raise MapError(INVALID_WALL)


def check_walls(rows: list[str] | tuple[str, ...], width: int) -> None:
    """Check the frame and the tiles of a map.

    The first and last rows must be all walls. Every other row must be
    ``width`` long, begin and end with a wall and hold only 1, 0, C, E, P.
    """
    if not rows or width <= 0:
        raise MapError(INVALID_WALL)
    _require_wall(rows[0])
    for row in rows[:-1]:
        if (
            len(row) != width
            or row[0] != "1"
            or row[-1] != "1"
            or not VALID_TILES.issuperset(row)
        ):
            raise MapError(INVALID_CHARACTER)
    _require_wall(rows[-1])


def count_items(rows: list[str] | tuple[str, ...]) -> tuple[tuple[int, int], tuple[int, int], int]:
    """Return the player position, the exit position and the collectible count.

    Exactly one player and one exit and at least one collectible are needed.
    """
    players = exits = collectibles = 0
    player = exit_ = (0, 0)
    for y, row in enumerate(rows):
        for x, tile in enumerate(row):
            if tile == "P":
                player = (x, y)
                players += 1
            elif tile == "E":
                exit_ = (x, y)
                exits += 1
            elif tile == "C":
                collectibles += 1
    if players != 1 or exits != 1 or collectibles < 1:
        raise MapError(INVALID_ITEM_COUNT)
    return player, exit_, collectibles


def flood_fill(grid: list[list[str]], x: int, y: int) -> None:
    """Mark with 'x' every cell reachable from (x, y) without crossing a wall."""
    pending = [(x, y)]
    while pending:
        cx, cy = pending.pop()
        if not (0 <= cy < len(grid) and 0 <= cx < len(grid[cy])):
            continue
        if grid[cy][cx] in ("1", "x"):
            continue
        grid[cy][cx] = "x"
        pending.extend(((cx + 1, cy), (cx - 1, cy), (cx, cy + 1), (cx, cy - 1)))


def check_reachable(rows: list[str] | tuple[str, ...], start: tuple[int, int]) -> None:
    """Raise MapError unless every item can be reached from ``start``."""
    grid = [list(row) for row in rows]
    flood_fill(grid, *start)
    if any(tile in _ITEMS for row in grid for tile in row):
        raise MapError(UNREACHABLE_ITEM)


def load_map(path: str | Path) -> GameMap:
    """Read and validate a map file."""
    lines = read_map_lines(path)
    rows = [strtrim(line, "\n") for line in lines]
    width = len(rows[0]) if rows else 0
    check_walls(rows, width)
    player, exit_, collectibles = count_items(rows)
    check_reachable(rows, player)
    return GameMap(
        lines=tuple(lines),
        rows=tuple(rows),
        width=width,
        height=len(lines),
        player=player,
        exit=exit_,
        collectibles=collectibles,
    )