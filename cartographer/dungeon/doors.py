"""Door carving: turn part of a shared wall into a doorway.

The shared wall is the ordered intersection of the new room's wall ring with
a reference wall (the previous room's ring, or a grid edge for the first
room). Corner cells at both ends are trimmed, a contiguous slice of random
length and offset becomes the door, and its cells are stamped as DOOR.

An empty trimmed intersection is a legal outcome: the room simply has no
door. Nothing here raises for it.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

from cartographer.utils.roll import roll

from .constants import EAST, MAX_DOOR_WIDTH, NORTH, OPPOSITE, SOUTH, WEST
from .errors import GridInvariantError
from .grid import Coord, Grid
from .rooms import PlacedRoom
from .tiles import DOOR

ConnectionKey = Union[int, str]


@dataclass
class DoorRecord:
    x: int
    y: int
    width: int
    height: int
    direction: str
    type: str = "door"
    locked: bool = False
    connections: Dict[ConnectionKey, str] = field(default_factory=dict)

    @property
    def length(self) -> int:
        return max(self.width, self.height)

    def cells(self):
        for ix in range(self.x, self.x + self.width):
            for iy in range(self.y, self.y + self.height):
                yield ix, iy

    def to_dict(self) -> Dict[str, Any]:
        return {
            'x': self.x,
            'y': self.y,
            'width': self.width,
            'height': self.height,
            'direction': self.direction,
            'type': self.type,
            'locked': self.locked,
            'connections': {str(k): v for k, v in self.connections.items()},
        }


def shared_wall(room_walls: Sequence[Coord], reference_walls: Iterable[Coord]) -> List[Coord]:
    """Ordered intersection of the two walls with both corner cells trimmed."""
    reference = set(reference_walls)
    intersection = [c for c in room_walls if c in reference]
    return intersection[1:-1]


def max_door_length(shared_length: int) -> int:
    return min(MAX_DOOR_WIDTH, math.ceil(shared_length / 2))


def choose_door_cells(cells: Sequence[Coord], rng=None) -> List[Coord]:
    if not cells:
        return []
    size = roll(1, max_door_length(len(cells)), rng)
    start = roll(0, len(cells) - size, rng)
    return list(cells[start:start + size])


def door_direction(room: PlacedRoom, cell: Coord) -> str:
    x, y = cell
    if y == room.y - 1:
        return NORTH
    if x == room.x + room.width:
        return EAST
    if y == room.y + room.height:
        return SOUTH
    if x == room.x - 1:
        return WEST
    raise GridInvariantError(f"door cell {cell} is not on the wall of room {room.number}")


def carve_doors(
    grid: Grid,
    room: PlacedRoom,
    reference_walls: Iterable[Coord],
    rng=None,
    connect_to: Optional[ConnectionKey] = None,
) -> List[DoorRecord]:
    """Carve at most one door between ``room`` and the reference wall."""
    cells = shared_wall(room.wall_cells, reference_walls)
    door_cells = choose_door_cells(cells, rng)
    if not door_cells:
        return []

    x, y = door_cells[0]
    direction = door_direction(room, (x, y))
    width = height = 1
    grid.set_cell(x, y, DOOR)
    for cx, cy in door_cells[1:]:
        if cx > x:
            width += 1
        elif cy > y:
            height += 1
        grid.set_cell(cx, cy, DOOR)

    connections: Dict[ConnectionKey, str] = {room.number: direction}
    if connect_to is not None:
        connections[connect_to] = OPPOSITE[direction]
    return [DoorRecord(x, y, width, height, direction, connections=connections)]


def door_lookup(rooms: Iterable[PlacedRoom]) -> Dict[str, Any]:
    """Doors keyed by room number plus the keys needed for locked doors."""
    lookup: Dict[int, List[DoorRecord]] = {}
    keys: List[Dict[str, Any]] = []
    seen = set()
    for room in rooms:
        lookup.setdefault(room.number, [])
        for door in room.doors:
            lookup[room.number].append(door)
            if door.locked and id(door) not in seen:
                seen.add(id(door))
                keys.append({'type': door.type, 'connections': dict(door.connections)})
    return {'doors': lookup, 'keys': keys}


__all__ = [
    "DoorRecord",
    "shared_wall",
    "max_door_length",
    "choose_door_cells",
    "door_direction",
    "carve_doors",
    "door_lookup",
]
