"""Pipeline orchestration for map generation.

``DungeonAssembler`` walks the room requests in order. Each step sizes the
room, searches for a position beside the previously placed room, carves it,
and carves a door into the wall it shares with that room. A room with no
legal position is skipped and the previous room carries forward, so the
result is a single chain: room i only ever connects to room i-1.

One assembler owns one grid for one run; nothing is retained between runs.
"""
from __future__ import annotations

import random
import time
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from cartographer.logging_utils import get_logger

from .config import MapSettings, RoomRequest
from .constants import OUTSIDE
from .dimensions import room_dimensions
from .door_types import DOOR_TYPE_PICKERS, DoorTypePicker
from .doors import carve_doors, door_lookup
from .grid import Grid, dump_columns
from .metrics import init_metrics
from .placement import boundary_walls, find_placement
from .rooms import PlacedRoom, carve_room
from .tiles import kind_char, kind_of

_log = get_logger("cartographer.dungeon")


@dataclass
class DungeonLayout:
    grid_width: int
    grid_height: int
    seed: Optional[int]
    grid: Tuple[tuple, ...]
    rooms: List[PlacedRoom] = field(default_factory=list)
    metrics: Dict[str, Any] = field(default_factory=dict)

    def kind_at(self, x: int, y: int) -> str:
        return kind_of(self.grid[x][y])

    def door_lookup(self) -> Dict[str, Any]:
        return door_lookup(self.rooms)

    def dump(self) -> List[str]:
        return dump_columns(self.grid)

    def to_dict(self, include_grid: bool = True) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            'gridWidth': self.grid_width,
            'gridHeight': self.grid_height,
            'seed': self.seed,
            'rooms': [r.to_dict() for r in self.rooms],
            'metrics': self.metrics,
        }
        if include_grid:
            # Column-major, same indexing as the grid itself
            data['grid'] = [[kind_char(v) for v in col] for col in self.grid]
        return data


class DungeonAssembler:
    def __init__(
        self,
        settings: MapSettings,
        rng: Optional[random.Random] = None,
        door_type_picker: Optional[DoorTypePicker] = None,
    ):
        settings.validate()
        self.settings = settings
        if rng is None:
            # None => random seed, recorded so the layout can be reproduced
            self.seed = settings.seed if settings.seed is not None else random.randint(0, 2**31 - 1)
            rng = random.Random(self.seed)
        else:
            # An injected generator owns its own state; no seed describes it
            self.seed = None
        self._rng = rng
        self.log = _log.bind(seed=self.seed)
        self.door_type_picker = door_type_picker or DOOR_TYPE_PICKERS[settings.door_types]
        self.metrics: Dict[str, Any] = init_metrics() if settings.enable_metrics else {}
        self.grid: Optional[Grid] = None
        self.rooms: List[PlacedRoom] = []
        self.previous_room: Optional[PlacedRoom] = None

    def _phase(self, label, fn, *a, **k):
        if not self.metrics:
            return fn(*a, **k)
        ps = time.perf_counter()
        r = fn(*a, **k)
        elapsed = (time.perf_counter() - ps) * 1000
        self.metrics['phase_ms'][label] = self.metrics['phase_ms'].get(label, 0.0) + elapsed
        return r

    def run(self) -> DungeonLayout:
        start = time.perf_counter()
        s = self.settings
        self.grid = Grid(s.grid_width, s.grid_height)
        self.rooms = []
        self.previous_room = None
        for index, request in enumerate(s.rooms):
            self._place(index, request)

        if self.metrics:
            self.metrics['rooms_requested'] = len(s.rooms)
            self.metrics['rooms_placed'] = len(self.rooms)
            self.metrics['runtime_ms'] = (time.perf_counter() - start) * 1000
        self.log.info(
            event="map_generated",
            width=s.grid_width,
            height=s.grid_height,
            requested=len(s.rooms),
            placed=len(self.rooms),
        )
        if self.log.enabled("debug"):
            for row in self.grid.dump():
                self.log.debug(event="grid_row", row=row)
        return DungeonLayout(s.grid_width, s.grid_height, self.seed, self.grid.snapshot(), self.rooms, self.metrics)

    def _place(self, index: int, request: RoomRequest) -> Optional[PlacedRoom]:
        s, grid, rng, prev = self.settings, self.grid, self._rng, self.previous_room
        width, height = self._phase('size', room_dimensions, s.grid_width, s.grid_height, request, rng)
        placement = self._phase('search', find_placement, grid, prev, width, height, rng, self.metrics)
        if placement is None:
            if self.metrics:
                self.metrics['rooms_dropped'] += 1
            self.log.debug(event="room_dropped", request=index, size=request.size, type=request.room_type, w=width, h=height)
            return None

        number = len(self.rooms) + 1
        walls = self._phase('carve_room', carve_room, grid, placement.x, placement.y, width, height, number)
        room = PlacedRoom(
            number=number,
            x=placement.x,
            y=placement.y,
            width=width,
            height=height,
            size=request.size,
            room_type=request.room_type,
            wall_cells=tuple(walls),
        )
        if prev is None:
            reference = boundary_walls(s.grid_width, s.grid_height, placement.side)
            connect_to = OUTSIDE
        else:
            reference = prev.wall_cells
            connect_to = prev.number
        doors = self._phase('carve_doors', carve_doors, grid, room, reference, rng, connect_to)
        for door in doors:
            door.type, door.locked = self.door_type_picker(rng)
            room.doors.append(door)
            if prev is not None:
                prev.doors.append(door)
            if self.metrics:
                self.metrics['doors_created'] += 1
                self.metrics['door_cells'] += door.length
        if not doors:
            if self.metrics:
                self.metrics['degenerate_doors'] += 1
            self.log.debug(event="door_degenerate", room=number, previous=connect_to)

        self.log.debug(event="room_placed", room=number, x=room.x, y=room.y, w=width, h=height, doors=len(doors))
        self.rooms.append(room)
        self.previous_room = room
        return room


def generate_map(
    settings: MapSettings,
    rng: Optional[random.Random] = None,
    door_type_picker: Optional[DoorTypePicker] = None,
) -> DungeonLayout:
    return DungeonAssembler(settings, rng=rng, door_type_picker=door_type_picker).run()


__all__ = ["DungeonAssembler", "DungeonLayout", "generate_map"]
