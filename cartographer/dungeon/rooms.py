from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, List, Tuple

from .constants import ROOM, WALL_SIZE
from .grid import Coord, Grid
from .tiles import WALL


@dataclass
class PlacedRoom:
    number: int
    x: int
    y: int
    width: int
    height: int
    size: str = "medium"
    room_type: str = ROOM
    wall_cells: Tuple[Coord, ...] = ()
    # Appended to by this room's own connection step and by the next room's
    doors: list = field(default_factory=list)

    def cells(self):
        for ix in range(self.x, self.x + self.width):
            for iy in range(self.y, self.y + self.height):
                yield ix, iy

    @property
    def wall_set(self) -> FrozenSet[Coord]:
        return frozenset(self.wall_cells)

    @property
    def center(self) -> Tuple[int, int]:
        return (self.x + self.width // 2, self.y + self.height // 2)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'number': self.number,
            'x': self.x,
            'y': self.y,
            'width': self.width,
            'height': self.height,
            'size': self.size,
            'type': self.room_type,
            'doors': [d.to_dict() for d in self.doors],
        }


def carve_room(grid: Grid, x: int, y: int, width: int, height: int, number: int) -> List[Coord]:
    """Stamp a room and its wall ring onto the grid; return the ring cells.

    Walls are returned in stamping order (x outer, y inner) which the door
    step relies on for a stable shared-wall ordering. Overlap is not checked
    here; callers only carve coordinates returned by the placement search.
    """
    walls: List[Coord] = []
    for w in range(-WALL_SIZE, width + WALL_SIZE):
        for h in range(-WALL_SIZE, height + WALL_SIZE):
            cx, cy = x + w, y + h
            if not grid.in_bounds(cx, cy):
                continue
            is_wall = (
                w == -WALL_SIZE
                or w == width + WALL_SIZE - 1
                or h == -WALL_SIZE
                or h == height + WALL_SIZE - 1
            )
            if is_wall:
                walls.append((cx, cy))
                grid.set_cell(cx, cy, WALL)
            else:
                grid.set_cell(cx, cy, number)
    return walls


__all__ = ["PlacedRoom", "carve_room"]
