"""Layout engine constants.

Size classes and room type catalogues are data, not behaviour: the sizer and
config validation read them, the HTTP config endpoint publishes them.
"""

from typing import Dict, List, Tuple

# Margin between room interiors (and thickness of the wall ring)
WALL_SIZE = 1
MAX_DOOR_WIDTH = 4

SIZES: List[str] = ["tiny", "small", "medium", "large", "massive"]

DIMENSION_RANGES: Dict[str, Tuple[int, int]] = {
    "tiny": (2, 3),
    "small": (2, 4),
    "medium": (2, 5),
    "large": (3, 10),
    "massive": (5, 15),
}

HALL_LENGTH_MIN = 3
HALL_WIDTH_MIN = 1
HALL_WIDTH_MAX = 1

ROOM = "room"
HALLWAY = "hallway"

ROOM_TYPES: List[str] = [
    ROOM,
    "armory",
    "atrium",
    "ballroom",
    "bathhouse",
    "bedroom",
    "chapel",
    "dining",
    "dormitory",
    "great_hall",
    HALLWAY,
    "kitchen",
    "laboratory",
    "library",
    "pantry",
    "parlour",
    "prison",
    "quarters",
    "shrine",
    "smithy",
    "storage",
    "study",
    "throne",
    "torture_chamber",
    "treasury",
]

# Room types limited to a subset of sizes; anything missing accepts all sizes.
_RESTRICTED_SIZES: Dict[str, List[str]] = {
    "ballroom": ["medium", "large", "massive"],
    "bathhouse": ["small", "medium", "large", "massive"],
    "dining": ["small", "medium", "large", "massive"],
    "dormitory": ["medium", "large", "massive"],
    "great_hall": ["large", "massive"],
    "pantry": ["tiny", "small", "medium"],
    "parlour": ["tiny", "small", "medium"],
    "study": ["tiny", "small", "medium"],
    "throne": ["medium", "large", "massive"],
    "torture_chamber": ["tiny", "small", "medium"],
}

ROOM_TYPE_SIZES: Dict[str, List[str]] = {t: _RESTRICTED_SIZES.get(t, SIZES) for t in ROOM_TYPES}

TOP = "top"
RIGHT = "right"
BOTTOM = "bottom"
LEFT = "left"
SIDES: List[str] = [TOP, RIGHT, BOTTOM, LEFT]

NORTH = "north"
EAST = "east"
SOUTH = "south"
WEST = "west"
DIRECTIONS: List[str] = [NORTH, EAST, SOUTH, WEST]

OPPOSITE = {NORTH: SOUTH, SOUTH: NORTH, EAST: WEST, WEST: EAST}

# Connection key used for the first room's boundary door
OUTSIDE = "outside"

__all__ = [
    "WALL_SIZE",
    "MAX_DOOR_WIDTH",
    "SIZES",
    "DIMENSION_RANGES",
    "HALL_LENGTH_MIN",
    "HALL_WIDTH_MIN",
    "HALL_WIDTH_MAX",
    "ROOM",
    "HALLWAY",
    "ROOM_TYPES",
    "ROOM_TYPE_SIZES",
    "SIDES",
    "DIRECTIONS",
    "OPPOSITE",
    "OUTSIDE",
]
