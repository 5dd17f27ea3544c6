from cartographer.dungeon.grid import Grid
from cartographer.dungeon.rooms import PlacedRoom, carve_room
from cartographer.dungeon.tiles import WALL


def test_carve_room_interior_and_ring():
    g = Grid(8, 8)
    walls = carve_room(g, 2, 2, 3, 2, 1)
    assert len(walls) == 5 * 4 - 3 * 2
    assert all(g.cell_at(x, y) == WALL for x, y in walls)
    interior = [(x, y) for x in range(2, 5) for y in range(2, 4)]
    assert all(g.cell_at(x, y) == 1 for x, y in interior)
    assert set(walls).isdisjoint(interior)
    # Everything outside the ring is untouched
    touched = set(walls) | set(interior)
    assert all(g.is_blank(x, y) for x, y in g.coords() if (x, y) not in touched)


def test_walls_returned_in_stamping_order():
    g = Grid(10, 10)
    walls = carve_room(g, 3, 4, 2, 3, 5)
    assert walls == sorted(walls)
    assert walls[0] == (2, 3)
    assert walls[-1] == (5, 7)


def test_adjacent_rooms_share_wall_cells():
    g = Grid(12, 6)
    a = carve_room(g, 1, 1, 3, 3, 1)
    b = carve_room(g, 5, 1, 3, 3, 2)
    shared = set(a) & set(b)
    assert shared == {(4, y) for y in range(0, 5)}
    assert all(g.cell_at(x, y) == WALL for x, y in shared)


def test_ring_cells_outside_grid_are_skipped():
    g = Grid(5, 5)
    walls = carve_room(g, 0, 0, 2, 2, 1)
    assert all(g.in_bounds(x, y) for x, y in walls)
    assert set(walls) == {(2, 0), (2, 1), (2, 2), (0, 2), (1, 2)}


def test_placed_room_helpers():
    room = PlacedRoom(3, 4, 5, 3, 2, size="small", room_type="study", wall_cells=((3, 4), (4, 4)))
    assert sorted(room.cells()) == [(4, 5), (4, 6), (5, 5), (5, 6), (6, 5), (6, 6)]
    assert room.wall_set == frozenset({(3, 4), (4, 4)})
    assert room.center == (5, 6)
    d = room.to_dict()
    assert d["number"] == 3
    assert d["type"] == "study"
    assert (d["width"], d["height"]) == (3, 2)
    assert d["doors"] == []
