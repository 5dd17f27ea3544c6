import pytest

from cartographer.dungeon.errors import GridInvariantError
from cartographer.dungeon.grid import Grid, dump_columns
from cartographer.dungeon.tiles import BLANK, DOOR, WALL, kind_char, kind_of


def test_new_grid_is_blank():
    g = Grid(5, 3)
    assert len(g.cells) == 5
    assert all(len(col) == 3 for col in g.cells)
    assert all(g.is_blank(x, y) for x, y in g.coords())
    assert sum(1 for _ in g.coords()) == 15


@pytest.mark.parametrize("x,y", [(-1, 0), (0, -1), (5, 0), (0, 3), (9, 9)])
def test_out_of_bounds_is_not_blank(x, y):
    g = Grid(5, 3)
    assert not g.in_bounds(x, y)
    assert g.is_blank(x, y) is False
    with pytest.raises(GridInvariantError):
        g.cell_at(x, y)


def test_set_cell_and_read_back():
    g = Grid(4, 4)
    g.set_cell(1, 2, WALL)
    g.set_cell(2, 2, 3)
    assert g.cell_at(1, 2) == WALL
    assert g.kind_at(1, 2) == "wall"
    assert g.kind_at(2, 2) == "room"
    assert not g.is_blank(1, 2)


def test_wall_can_become_door_and_be_rewritten_as_wall():
    g = Grid(4, 4)
    g.set_cell(0, 0, WALL)
    g.set_cell(0, 0, WALL)  # shared wall rewrite is a no-op
    g.set_cell(0, 0, DOOR)
    assert g.kind_at(0, 0) == "door"


def test_blanking_a_used_cell_raises():
    g = Grid(4, 4)
    g.set_cell(1, 1, 2)
    with pytest.raises(GridInvariantError):
        g.set_cell(1, 1, BLANK)


def test_door_cannot_revert_to_wall():
    g = Grid(4, 4)
    g.set_cell(3, 3, DOOR)
    with pytest.raises(GridInvariantError):
        g.set_cell(3, 3, WALL)


def test_snapshot_is_detached_copy():
    g = Grid(3, 3)
    g.set_cell(1, 1, 1)
    snap = g.snapshot()
    g.set_cell(0, 0, WALL)
    assert isinstance(snap, tuple) and isinstance(snap[0], tuple)
    assert snap[1][1] == 1
    assert snap[0][0] == BLANK


def test_dump_rows_show_last_digit_of_room_number():
    g = Grid(3, 2)
    g.set_cell(0, 0, WALL)
    g.set_cell(1, 0, 12)
    g.set_cell(2, 1, DOOR)
    assert g.dump() == ["W2.", "..D"]
    assert dump_columns([]) == []


def test_kind_helpers():
    assert kind_of(BLANK) == "blank"
    assert kind_of(7) == "room"
    assert kind_char(7) == "R"
    assert kind_char(WALL) == WALL
    for bad in (0, -1, True, "x", None):
        with pytest.raises(ValueError):
            kind_of(bad)


def test_room_kind_marker_is_distinct_from_room_type_name():
    from cartographer.dungeon import ROOM_KIND
    from cartographer.dungeon.constants import ROOM

    assert ROOM_KIND == "R"
    assert ROOM == "room"
    assert kind_char(3) == ROOM_KIND
