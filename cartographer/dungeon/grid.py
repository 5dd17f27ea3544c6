"""Occupancy grid for a single generation run.

Column-major storage (``cells[x][y]``) consistent with the rest of the
dungeon package. Every cell starts BLANK; the only legal transitions are
BLANK -> anything and WALL -> DOOR (WALL -> WALL rewrites are no-ops when a
new room shares a wall with an older one).
"""
from __future__ import annotations

from typing import Iterator, List, Sequence, Tuple

from .errors import GridInvariantError
from .tiles import BLANK, DOOR, ROOM_KIND, WALL, kind_char, kind_of

Coord = Tuple[int, int]


class Grid:
    __slots__ = ("width", "height", "cells")

    def __init__(self, width: int, height: int):
        self.width = width
        self.height = height
        self.cells: List[list] = [[BLANK for _ in range(height)] for _ in range(width)]

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_blank(self, x: int, y: int) -> bool:
        # Out of bounds counts as occupied so edge rooms respect the boundary.
        return self.in_bounds(x, y) and self.cells[x][y] == BLANK

    def cell_at(self, x: int, y: int):
        if not self.in_bounds(x, y):
            raise GridInvariantError(f"cell {(x, y)} outside {self.width}x{self.height} grid")
        return self.cells[x][y]

    def kind_at(self, x: int, y: int) -> str:
        return kind_of(self.cell_at(x, y))

    def set_cell(self, x: int, y: int, value) -> None:
        current = self.cell_at(x, y)
        if value == BLANK and current != BLANK:
            raise GridInvariantError(f"cannot reset {(x, y)} ({current!r}) to blank")
        if current == DOOR and value == WALL:
            raise GridInvariantError(f"cannot turn door at {(x, y)} back into wall")
        self.cells[x][y] = value

    def coords(self) -> Iterator[Coord]:
        for x in range(self.width):
            for y in range(self.height):
                yield x, y

    def snapshot(self) -> Tuple[tuple, ...]:
        """Immutable copy handed to callers once generation is done."""
        return tuple(tuple(col) for col in self.cells)

    def dump(self) -> List[str]:
        return dump_columns(self.cells)


def dump_columns(columns: Sequence[Sequence]) -> List[str]:
    """Row strings for debugging; room cells show the last digit of their number."""
    if not columns:
        return []
    rows = []
    for y in range(len(columns[0])):
        chars = []
        for col in columns:
            v = col[y]
            chars.append(str(v % 10) if kind_char(v) == ROOM_KIND else v)
        rows.append("".join(chars))
    return rows


__all__ = ["Grid", "Coord", "dump_columns"]
