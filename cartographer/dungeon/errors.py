"""Error taxonomy for map generation.

Configuration problems are fatal to a single generation call and surface as
``MapConfigError`` (a ``ValueError`` so callers validating input can catch it
broadly). Placement exhaustion and degenerate doors are not errors at all.
"""


class MapConfigError(ValueError):
    """Invalid map settings or room request."""


class UnknownSizeClassError(MapConfigError):
    def __init__(self, size):
        super().__init__(f"unknown size class: {size!r}")
        self.size = size


class UnknownRoomTypeError(MapConfigError):
    def __init__(self, room_type):
        super().__init__(f"unknown room type: {room_type!r}")
        self.room_type = room_type


class GridInvariantError(RuntimeError):
    """Raised when a grid write would break the cell lifecycle."""


__all__ = ["MapConfigError", "UnknownSizeClassError", "UnknownRoomTypeError", "GridInvariantError"]
