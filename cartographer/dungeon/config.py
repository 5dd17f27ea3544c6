import os
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .constants import DIMENSION_RANGES, ROOM, ROOM_TYPE_SIZES
from .door_types import DOOR_TYPE_PICKERS
from .errors import MapConfigError, UnknownRoomTypeError, UnknownSizeClassError

MIN_GRID_SIZE = 3
DOOR_TYPE_MODES = tuple(DOOR_TYPE_PICKERS)


def _env_flag(name: str, default: bool) -> bool:
    if name not in os.environ:
        return default
    return os.environ.get(name, '').lower() not in {'0', 'false', 'no', ''}


def _metrics_default() -> bool:
    return _env_flag('CARTOGRAPHER_ENABLE_GENERATION_METRICS', True)


@dataclass(frozen=True)
class RoomRequest:
    size: str
    room_type: str = ROOM
    # Only consulted by room types with a custom dimension rule (hallways)
    is_horizontal: Optional[bool] = None

    def validate(self) -> None:
        if not isinstance(self.size, str) or self.size not in DIMENSION_RANGES:
            raise UnknownSizeClassError(self.size)
        if not isinstance(self.room_type, str) or self.room_type not in ROOM_TYPE_SIZES:
            raise UnknownRoomTypeError(self.room_type)
        if self.size not in ROOM_TYPE_SIZES[self.room_type]:
            raise MapConfigError(f"room type {self.room_type!r} cannot be {self.size!r}")
        if self.is_horizontal is not None and not isinstance(self.is_horizontal, bool):
            raise MapConfigError(f"is_horizontal must be a boolean, got {self.is_horizontal!r}")

    def to_dict(self) -> Dict[str, Any]:
        d: Dict[str, Any] = {'size': self.size, 'type': self.room_type}
        if self.is_horizontal is not None:
            d['isHorizontal'] = self.is_horizontal
        return d


@dataclass
class MapSettings:
    grid_width: int
    grid_height: int
    rooms: List[RoomRequest] = field(default_factory=list)
    seed: Optional[int] = None
    door_types: str = "placeholder"
    enable_metrics: bool = field(default_factory=_metrics_default)

    def validate(self) -> None:
        for name in ('grid_width', 'grid_height'):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool):
                raise MapConfigError(f"{name} must be an integer, got {value!r}")
            if value < MIN_GRID_SIZE:
                raise MapConfigError(f"{name} must be at least {MIN_GRID_SIZE}, got {value}")
        if self.seed is not None and (not isinstance(self.seed, int) or isinstance(self.seed, bool)):
            raise MapConfigError(f"seed must be an integer, got {self.seed!r}")
        if self.door_types not in DOOR_TYPE_MODES:
            raise MapConfigError(f"unknown door type mode: {self.door_types!r}")
        for request in self.rooms:
            if not isinstance(request, RoomRequest):
                raise MapConfigError(f"room requests must be RoomRequest instances, got {request!r}")
            request.validate()

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "MapSettings":
        """Build settings from the camelCase JSON shape used by the API and CLI."""
        if not isinstance(payload, dict):
            raise MapConfigError("map settings must be a JSON object")
        raw_rooms = payload.get('rooms', [])
        if not isinstance(raw_rooms, list):
            raise MapConfigError("rooms must be a list")
        rooms = []
        for i, raw in enumerate(raw_rooms):
            if not isinstance(raw, dict):
                raise MapConfigError(f"room {i} must be an object")
            if 'size' not in raw:
                raise MapConfigError(f"room {i} is missing a size")
            rooms.append(
                RoomRequest(
                    size=raw['size'],
                    room_type=raw.get('type', ROOM),
                    is_horizontal=raw.get('isHorizontal'),
                )
            )
        try:
            width = payload['gridWidth']
            height = payload['gridHeight']
        except KeyError as exc:
            raise MapConfigError(f"missing {exc.args[0]}") from exc
        settings = cls(
            grid_width=width,
            grid_height=height,
            rooms=rooms,
            seed=payload.get('seed'),
            door_types=payload.get('doorTypes', 'placeholder'),
        )
        settings.validate()
        return settings

    def to_dict(self) -> Dict[str, Any]:
        return {
            'gridWidth': self.grid_width,
            'gridHeight': self.grid_height,
            'rooms': [r.to_dict() for r in self.rooms],
            'seed': self.seed,
            'doorTypes': self.door_types,
        }


__all__ = ["RoomRequest", "MapSettings", "DOOR_TYPE_MODES", "MIN_GRID_SIZE"]
