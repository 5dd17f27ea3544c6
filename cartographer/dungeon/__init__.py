"""Public dungeon package interface.

Map layout engine: grid occupancy, room sizing, placement search, room and
door carving, and the assembler that chains them.
"""

from .config import MapSettings, RoomRequest
from .doors import DoorRecord
from .errors import GridInvariantError, MapConfigError, UnknownRoomTypeError, UnknownSizeClassError
from .pipeline import DungeonAssembler, DungeonLayout, generate_map
from .rooms import PlacedRoom
from .tiles import BLANK, DOOR, ROOM_KIND, WALL  # noqa: F401

__all__ = [
    "MapSettings",
    "RoomRequest",
    "DoorRecord",
    "PlacedRoom",
    "DungeonAssembler",
    "DungeonLayout",
    "generate_map",
    "MapConfigError",
    "UnknownSizeClassError",
    "UnknownRoomTypeError",
    "GridInvariantError",
    "BLANK",
    "WALL",
    "DOOR",
    "ROOM_KIND",
]
