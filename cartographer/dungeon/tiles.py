# Cell constants centralized for modular imports.
# Room interiors are stored as the owning room number (int >= 1).
BLANK = "."
WALL = "W"
DOOR = "D"
ROOM_KIND = "R"  # kind marker only; never written to the grid


def kind_of(value) -> str:
    """Classify a raw cell value as 'blank', 'wall', 'door' or 'room'."""
    if value == BLANK:
        return "blank"
    if value == WALL:
        return "wall"
    if value == DOOR:
        return "door"
    if isinstance(value, int) and not isinstance(value, bool) and value > 0:
        return "room"
    raise ValueError(f"unknown cell value {value!r}")


def kind_char(value) -> str:
    """Single-character kind marker used in JSON grids and debug dumps."""
    if isinstance(value, int) and not isinstance(value, bool):
        return ROOM_KIND
    return value


__all__ = ["BLANK", "WALL", "DOOR", "ROOM_KIND", "kind_of", "kind_char"]
