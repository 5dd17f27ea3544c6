"""Room sizing: size class -> (width, height) in grid units."""
from __future__ import annotations

from typing import Callable, Dict, Optional, Tuple

from cartographer.utils.roll import roll

from .config import RoomRequest
from .constants import DIMENSION_RANGES, HALL_LENGTH_MIN, HALL_WIDTH_MAX, HALL_WIDTH_MIN, HALLWAY
from .errors import UnknownSizeClassError


def _range_for(size: str) -> Tuple[int, int]:
    try:
        return DIMENSION_RANGES[size]
    except KeyError:
        raise UnknownSizeClassError(size) from None


def hallway_dimensions(size: str, rng=None, is_horizontal: Optional[bool] = None) -> Tuple[int, int]:
    """Linear rooms: a long side drawn from the size range, a one-cell thickness."""
    lo, hi = _range_for(size)
    if is_horizontal is None:
        is_horizontal = bool(roll(0, 1, rng))
    length = roll(max(HALL_LENGTH_MIN, lo), hi, rng)
    thickness = roll(HALL_WIDTH_MIN, HALL_WIDTH_MAX, rng)
    if is_horizontal:
        return length, thickness
    return thickness, length


CUSTOM_DIMENSIONS: Dict[str, Callable[..., Tuple[int, int]]] = {
    HALLWAY: hallway_dimensions,
}


def room_dimensions(grid_width: int, grid_height: int, request: RoomRequest, rng=None) -> Tuple[int, int]:
    custom = CUSTOM_DIMENSIONS.get(request.room_type)
    if custom is not None:
        width, height = custom(request.size, rng, is_horizontal=request.is_horizontal)
    else:
        lo, hi = _range_for(request.size)
        width = roll(lo, hi, rng)
        height = roll(lo, hi, rng)
    # Leave room for the wall ring on both sides
    return min(width, grid_width - 2), min(height, grid_height - 2)


__all__ = ["room_dimensions", "hallway_dimensions", "CUSTOM_DIMENSIONS"]
