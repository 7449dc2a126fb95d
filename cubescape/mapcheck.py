"""Validation of the map block of a scene: characters, spawn, walls and connectivity."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, List, Sequence, Tuple

from .errors import CubError

MAP_CHARS = " 01NSWE"
SPAWN_CHARS = "NSWE"
WALL = "1"
FLOOR = "0"
VOID = " "

_BLANK_MAP_LINE = re.compile(r"\n *\n")


@dataclass
class GameMap:
    """A validated map, padded to a rectangle, with the player's spawn point."""

    grid: List[str]
    spawn_x: int
    spawn_y: int
    direction: str

    @property
    def height(self) -> int:
        return len(self.grid)

    @property
    def width(self) -> int:
        return max((len(row) for row in self.grid), default=0)


def has_only_map_chars(rows: Iterable[str]) -> bool:
    """Return True if every character of every row is a legal map character."""
    return all(ch in MAP_CHARS for row in rows for ch in row)


def find_spawn(rows: Sequence[str]) -> Tuple[int, int, str]:
    """Return ``(x, y, direction)`` of the single spawn character in ``rows``."""
    spawns = [
        (x, y, ch)
        for y, row in enumerate(rows)
        for x, ch in enumerate(row)
        if ch in SPAWN_CHARS
    ]
    if len(spawns) != 1:
        raise CubError("Incorrect counts of spawning characters!")
    return spawns[0]


def pad_map(rows: Iterable[str], width: int) -> List[str]:
    """Pad every row with spaces on the right up to ``width`` characters."""
    return [row.ljust(width, VOID) for row in rows]


def _width(grid: Sequence[str]) -> int:
    return max((len(row) for row in grid), default=0)


def _is_walled_in(cells: Sequence[str], x: int, y: int) -> bool:
    height = len(cells)
    width = _width(cells)
    for ny in range(y - 1, y + 2):
        for nx in range(x - 1, x + 2):
            if 0 <= ny < height and 0 <= nx < width:
                if cells[ny][nx] not in (VOID, WALL):
                    return False
    return True


def is_closed_map(grid: Sequence[str]) -> bool:
    """Return True if the map's border and every void cell are sealed by walls."""
    height = len(grid)
    width = _width(grid)
    cells = pad_map(grid, width)
    for y, row in enumerate(cells):
        for x, ch in enumerate(row):
            on_edge = x in (0, width - 1) or y in (0, height - 1)
            if on_edge and ch not in (WALL, VOID):
                return False
            if ch == VOID and not _is_walled_in(cells, x, y):
                return False
    return True


def is_connected_lines(text: str) -> bool:
    """Return False if the text holds a line made only of spaces (or nothing)."""
    return _BLANK_MAP_LINE.search(text) is None


def is_connected_grid(grid: Sequence[str], x: int, y: int) -> bool:
    """Return True if every floor and wall cell is reachable from ``(x, y)``.

    The fill moves in four directions through any cell that is not a space.
    """
    height = len(grid)
    width = _width(grid)
    cells = pad_map(grid, width)
    visited = set()
    stack = [(x, y)]
    while stack:
        cx, cy = stack.pop()
        if not (0 <= cy < height and 0 <= cx < width):
            continue
        if (cx, cy) in visited or cells[cy][cx] == VOID:
            continue
        visited.add((cx, cy))
        stack.extend(((cx + 1, cy), (cx - 1, cy), (cx, cy + 1), (cx, cy - 1)))
    return not any(
        ch in (FLOOR, WALL) and (cx, cy) not in visited
        for cy, row in enumerate(cells)
        for cx, ch in enumerate(row)
    )


def validate_map(rows: Iterable[str]) -> GameMap:
    """Check the map rows of a scene and return the padded :class:`GameMap`."""
    rows = list(rows)
    if not rows:
        raise CubError("There is no map in the .cub file!")
    if not has_only_map_chars(rows):
        raise CubError("The map must be composed of only possible characters!")
    x, y, direction = find_spawn(rows)
    grid = pad_map(rows, _width(rows))
    if not is_closed_map(grid):
        raise CubError("Map is not closed!")
    if not is_connected_grid(grid, x, y):
        raise CubError("Map is not connected!")
    return GameMap(grid=grid, spawn_x=x, spawn_y=y, direction=direction)