import random

import pytest

from cartographer.dungeon.constants import BOTTOM, LEFT, RIGHT, SIDES, TOP
from cartographer.dungeon.grid import Grid
from cartographer.dungeon.metrics import init_metrics
from cartographer.dungeon.placement import (
    available_sides,
    boundary_walls,
    find_placement,
    starting_point,
    valid_room_coords,
)
from cartographer.dungeon.rooms import PlacedRoom, carve_room
from cartographer.dungeon.tiles import BLANK, DOOR, WALL


def _carved(grid, number, x, y, w, h):
    walls = carve_room(grid, x, y, w, h, number)
    return PlacedRoom(number, x, y, w, h, wall_cells=tuple(walls))


def _brute_force_coords(grid, prev, w, h):
    """Independent full-grid scan used to cross-check the windowed search."""
    coords = []
    for x in range(grid.width):
        for y in range(grid.height):
            ring = [
                (cx, cy)
                for cx in range(x - 1, x + w + 1)
                for cy in range(y - 1, y + h + 1)
                if not (x <= cx < x + w and y <= cy < y + h)
            ]
            interior = [(cx, cy) for cx in range(x, x + w) for cy in range(y, y + h)]
            if not all(grid.in_bounds(cx, cy) for cx, cy in ring):
                continue
            if not all(grid.cells[cx][cy] == BLANK for cx, cy in interior):
                continue
            if not all(grid.cells[cx][cy] in (BLANK, WALL) for cx, cy in ring):
                continue
            if prev.wall_set.intersection(ring):
                coords.append((x, y))
    return coords


@pytest.mark.parametrize("seed", range(40))
def test_starting_point_is_flush_with_an_edge(seed):
    rng = random.Random(seed)
    W, H, w, h = 20, 14, 5, 3
    p = starting_point(W, H, w, h, rng)
    assert p.side in SIDES
    assert 1 <= p.x and p.x + w <= W - 1
    assert 1 <= p.y and p.y + h <= H - 1
    if p.side == TOP:
        assert p.y == 1
    elif p.side == RIGHT:
        assert p.x + w == W - 1
    elif p.side == BOTTOM:
        assert p.y + h == H - 1
    else:
        assert p.x == 1


def test_no_sides_when_room_cannot_fit():
    assert available_sides(6, 6, 5, 2) == []
    assert available_sides(6, 6, 4, 4) == list(SIDES)
    assert starting_point(6, 6, 5, 2, random.Random(1)) is None


def test_boundary_walls():
    assert boundary_walls(4, 3, TOP) == [(0, 0), (1, 0), (2, 0), (3, 0)]
    assert boundary_walls(4, 3, RIGHT) == [(3, 0), (3, 1), (3, 2)]
    assert boundary_walls(4, 3, BOTTOM) == [(0, 2), (1, 2), (2, 2), (3, 2)]
    assert boundary_walls(4, 3, LEFT) == [(0, 0), (0, 1), (0, 2)]
    with pytest.raises(ValueError):
        boundary_walls(4, 3, "up")


def test_valid_coords_share_wall_with_previous_room():
    g = Grid(20, 12)
    prev = _carved(g, 1, 1, 1, 4, 3)
    coords = valid_room_coords(g, prev, 3, 3)
    assert (6, 1) in coords  # shares the x=5 wall column
    assert (5, 1) not in coords  # interior would sit on that column
    assert (1, 5) in coords  # below, sharing the y=4 wall row
    for x, y in coords:
        ring = {(cx, cy) for cx in range(x - 1, x + 4) for cy in range(y - 1, y + 4)}
        assert ring & prev.wall_set


@pytest.mark.parametrize("seed", range(10))
def test_windowed_search_matches_full_scan(seed):
    rng = random.Random(seed)
    g = Grid(24, 18)
    first = _carved(g, 1, 8, 6, rng.randint(2, 6), rng.randint(2, 5))
    w, h = rng.randint(1, 5), rng.randint(1, 5)
    assert valid_room_coords(g, first, w, h) == _brute_force_coords(g, first, w, h)

    # Crowd the area with a second room and search beside it
    x, y = rng.choice(valid_room_coords(g, first, 3, 3))
    second = _carved(g, 2, x, y, 3, 3)
    assert valid_room_coords(g, second, w, h) == _brute_force_coords(g, second, w, h)


def test_candidates_never_overlap_doors_or_interiors():
    g = Grid(20, 12)
    prev = _carved(g, 1, 1, 1, 4, 3)
    g.set_cell(5, 2, DOOR)
    for x, y in valid_room_coords(g, prev, 3, 3):
        ring = {(cx, cy) for cx in range(x - 1, x + 4) for cy in range(y - 1, y + 4)}
        assert (5, 2) not in ring


def test_full_grid_has_no_candidates():
    g = Grid(6, 6)
    prev = _carved(g, 1, 1, 1, 4, 4)
    for w, h in [(3, 3), (4, 4), (3, 4), (1, 1)]:
        assert valid_room_coords(g, prev, w, h) == []


def test_find_placement_first_room_uses_starting_point():
    g = Grid(12, 12)
    p = find_placement(g, None, 3, 3, random.Random(2))
    assert p.side in SIDES


def test_find_placement_beside_previous_room_and_counts_candidates():
    g = Grid(20, 12)
    prev = _carved(g, 1, 1, 1, 4, 3)
    metrics = init_metrics()
    p = find_placement(g, prev, 3, 3, random.Random(3), metrics)
    assert p.side is None
    assert (p.x, p.y) in valid_room_coords(g, prev, 3, 3)
    assert metrics["candidates_considered"] == len(valid_room_coords(g, prev, 3, 3))


def test_find_placement_none_when_no_space():
    g = Grid(6, 6)
    prev = _carved(g, 1, 1, 1, 4, 4)
    assert find_placement(g, prev, 3, 3, random.Random(1)) is None
