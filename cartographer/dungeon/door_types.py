"""Door type catalogue and the pluggable door-type step.

Generation tags every door with the placeholder type ``"door"`` unless the
map settings opt into one of the weighted pickers below.
"""
from __future__ import annotations

from typing import Callable, Dict, Tuple

from cartographer.utils.roll import Probability, roll_percentile

ARCHWAY = "archway"
BRASS = "brass"
CONCEALED = "concealed"
HOLE = "hole"
IRON = "iron"
MECHANICAL = "mechanical"
PASSAGEWAY = "passageway"
PORTAL = "portal"
PORTCULLIS = "portcullis"
SECRET = "secret"
STEEL = "steel"
STONE = "stone"
WOODEN = "wooden"

PLACEHOLDER = "door"

DOOR_TYPES = [
    ARCHWAY,
    BRASS,
    CONCEALED,
    HOLE,
    IRON,
    MECHANICAL,
    PASSAGEWAY,
    PORTAL,
    PORTCULLIS,
    SECRET,
    STEEL,
    STONE,
    WOODEN,
]

# Types rendered with a doorway frame
APPEND_DOORWAY = frozenset({BRASS, IRON, MECHANICAL, STEEL, STONE, WOODEN})

LOCKABLE = frozenset({BRASS, IRON, MECHANICAL, PORTCULLIS, STEEL, STONE, WOODEN})

DOOR_PROBABILITY = Probability([
    (20, PASSAGEWAY),
    (40, ARCHWAY),
    (55, HOLE),
    (60, MECHANICAL),
    (65, PORTCULLIS),
    (75, WOODEN),
    (80, STEEL),
    (85, IRON),
    (90, BRASS),
    (95, STONE),
    (100, PORTAL),
])

SECRET_PROBABILITY = Probability([
    (15, CONCEALED),
    (30, SECRET),
])

LOCKED_CHANCE = 25

DoorTypePicker = Callable[..., Tuple[str, bool]]


def placeholder_door_type(rng=None) -> Tuple[str, bool]:
    return PLACEHOLDER, False


def weighted_door_type(rng=None, allow_secret: bool = False) -> Tuple[str, bool]:
    """Roll a door type from the weighted table; lockable types may come out locked."""
    if allow_secret:
        secret = SECRET_PROBABILITY.roll(rng)
        if secret:
            return secret, False
    door_type = DOOR_PROBABILITY.roll(rng)
    locked = door_type in LOCKABLE and roll_percentile(LOCKED_CHANCE, rng)
    return door_type, locked


def weighted_secret_door_type(rng=None) -> Tuple[str, bool]:
    return weighted_door_type(rng, allow_secret=True)


DOOR_TYPE_PICKERS: Dict[str, DoorTypePicker] = {
    "placeholder": placeholder_door_type,
    "weighted": weighted_door_type,
    "weighted_secret": weighted_secret_door_type,
}


__all__ = [
    "DOOR_TYPES",
    "APPEND_DOORWAY",
    "LOCKABLE",
    "DOOR_PROBABILITY",
    "SECRET_PROBABILITY",
    "LOCKED_CHANCE",
    "PLACEHOLDER",
    "placeholder_door_type",
    "weighted_door_type",
    "weighted_secret_door_type",
    "DOOR_TYPE_PICKERS",
]
