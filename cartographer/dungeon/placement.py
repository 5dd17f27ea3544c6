"""Placement search: where can the next room go?

The first room is pushed flush against a randomly chosen grid edge so the
edge itself can serve as its "previous wall" (the dungeon entrance). Every
later room must share wall cells with the room placed before it; candidate
positions are enumerated exhaustively inside the window where such sharing
is geometrically possible, then one is picked uniformly.

A room with no legal position is dropped by the caller; there is no retry
with a different size or strategy.
"""
from __future__ import annotations

from typing import FrozenSet, List, NamedTuple, Optional

from cartographer.utils.roll import roll, roll_array_item

from .constants import BOTTOM, LEFT, RIGHT, SIDES, TOP, WALL_SIZE
from .grid import Coord, Grid
from .rooms import PlacedRoom
from .tiles import BLANK, WALL


class Placement(NamedTuple):
    x: int
    y: int
    side: Optional[str] = None  # grid edge used by the first room only


def _fits_grid(grid_width: int, grid_height: int, width: int, height: int) -> bool:
    return width >= 1 and height >= 1 and width + 2 * WALL_SIZE <= grid_width and height + 2 * WALL_SIZE <= grid_height


def available_sides(grid_width: int, grid_height: int, width: int, height: int) -> List[str]:
    if not _fits_grid(grid_width, grid_height, width, height):
        return []
    return list(SIDES)


def starting_point(grid_width: int, grid_height: int, width: int, height: int, rng=None) -> Optional[Placement]:
    sides = available_sides(grid_width, grid_height, width, height)
    if not sides:
        return None
    side = roll_array_item(sides, rng)
    max_x = grid_width - WALL_SIZE - width
    max_y = grid_height - WALL_SIZE - height
    if side == TOP:
        return Placement(roll(WALL_SIZE, max_x, rng), WALL_SIZE, side)
    if side == RIGHT:
        return Placement(max_x, roll(WALL_SIZE, max_y, rng), side)
    if side == BOTTOM:
        return Placement(roll(WALL_SIZE, max_x, rng), max_y, side)
    return Placement(WALL_SIZE, roll(WALL_SIZE, max_y, rng), LEFT)


def boundary_walls(grid_width: int, grid_height: int, side: str) -> List[Coord]:
    """Every grid-edge cell along ``side``; the first room's reference wall."""
    if side == TOP:
        return [(i, 0) for i in range(grid_width)]
    if side == RIGHT:
        return [(grid_width - 1, i) for i in range(grid_height)]
    if side == BOTTOM:
        return [(i, grid_height - 1) for i in range(grid_width)]
    if side == LEFT:
        return [(0, i) for i in range(grid_height)]
    raise ValueError(f"unknown side: {side!r}")


def _placement_ok(grid: Grid, x: int, y: int, width: int, height: int, prev_walls: FrozenSet[Coord]) -> bool:
    touches = False
    for w in range(-WALL_SIZE, width + WALL_SIZE):
        for h in range(-WALL_SIZE, height + WALL_SIZE):
            cx, cy = x + w, y + h
            if not grid.in_bounds(cx, cy):
                return False
            interior = 0 <= w < width and 0 <= h < height
            if interior:
                if not grid.is_blank(cx, cy):
                    return False
                continue
            # Margin cells may reuse existing walls but never doors or interiors
            if grid.cells[cx][cy] not in (BLANK, WALL):
                return False
            if (cx, cy) in prev_walls:
                touches = True
    return touches


def valid_room_coords(grid: Grid, prev_room: PlacedRoom, width: int, height: int) -> List[Coord]:
    """All top-left coordinates where a ``width`` x ``height`` room fits beside ``prev_room``.

    The scan window is every position whose wall ring overlaps the previous
    room's ring; positions outside it cannot touch the previous walls.
    """
    if width < 1 or height < 1:
        return []
    prev_walls = prev_room.wall_set
    reach = 2 * WALL_SIZE - 1
    x_lo = max(WALL_SIZE, prev_room.x - width - reach)
    x_hi = min(grid.width - WALL_SIZE - width, prev_room.x + prev_room.width + reach)
    y_lo = max(WALL_SIZE, prev_room.y - height - reach)
    y_hi = min(grid.height - WALL_SIZE - height, prev_room.y + prev_room.height + reach)
    coords: List[Coord] = []
    for x in range(x_lo, x_hi + 1):
        for y in range(y_lo, y_hi + 1):
            if _placement_ok(grid, x, y, width, height, prev_walls):
                coords.append((x, y))
    return coords


def find_placement(
    grid: Grid,
    prev_room: Optional[PlacedRoom],
    width: int,
    height: int,
    rng=None,
    metrics: Optional[dict] = None,
) -> Optional[Placement]:
    if prev_room is None:
        return starting_point(grid.width, grid.height, width, height, rng)
    coords = valid_room_coords(grid, prev_room, width, height)
    if metrics:
        metrics['candidates_considered'] += len(coords)
    if not coords:
        return None
    x, y = roll_array_item(coords, rng)
    return Placement(x, y)


__all__ = [
    "Placement",
    "available_sides",
    "starting_point",
    "boundary_walls",
    "valid_room_coords",
    "find_placement",
]
