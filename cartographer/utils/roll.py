"""Dice helpers shared by the dimension, placement and door steps.

Every helper accepts an optional ``rng`` (a ``random.Random``); when omitted
the module-level ``random`` functions are used. Arguments are validated
strictly: bad dice are programming errors, not something to clamp.
"""
from __future__ import annotations

import random
from typing import Any, List, Optional, Sequence, Tuple


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def roll(min: int = 0, max: int = 1, rng=None) -> int:  # noqa: A002 - mirrors dice notation
    """Return a random integer between ``min`` and ``max`` inclusive."""
    if not _is_int(min):
        raise TypeError(f"roll() min must be an integer, got {min!r}")
    if not _is_int(max):
        raise TypeError(f"roll() max must be an integer, got {max!r}")
    if min < 0:
        raise ValueError(f"roll() min cannot be negative, got {min}")
    if min > max:
        raise ValueError(f"roll() min {min} is greater than max {max}")
    return (rng or random).randint(min, max)


def roll_array_item(items: Sequence[Any], rng=None) -> Any:
    if items is None or not isinstance(items, (list, tuple)):
        raise TypeError("roll_array_item() requires a list or tuple")
    if not items:
        raise ValueError("roll_array_item() requires at least one item")
    return items[roll(0, len(items) - 1, rng)]


def roll_percentile(chance: int, rng=None) -> bool:
    """True with ``chance`` percent probability."""
    if not _is_int(chance):
        raise TypeError(f"roll_percentile() chance must be an integer, got {chance!r}")
    if chance < 1 or chance > 100:
        raise ValueError(f"roll_percentile() chance must be between 1 and 100, got {chance}")
    return roll(1, 100, rng) <= chance


class Probability:
    """Percentile table: ``[(upper_bound, value), ...]`` with ascending bounds.

    ``Probability([(23, 'boats'), (55, 'horses')])`` yields 'boats' on a d100
    roll of 1-23, 'horses' on 24-55 and None above 55.
    """

    def __init__(self, config: Sequence[Tuple[int, Any]]):
        if not isinstance(config, (list, tuple)) or not config:
            raise TypeError("Probability config must be a non-empty list of (upper, value) pairs")
        entries: List[Tuple[int, Any]] = []
        previous = 0
        for entry in config:
            if not isinstance(entry, (list, tuple)) or len(entry) != 2:
                raise TypeError(f"Probability entry must be an (upper, value) pair, got {entry!r}")
            upper, value = entry
            if not _is_int(upper):
                raise TypeError(f"Probability bound must be an integer, got {upper!r}")
            if upper <= previous or upper > 100:
                raise ValueError(f"Probability bounds must ascend within 1-100, got {upper} after {previous}")
            entries.append((upper, value))
            previous = upper
        self.entries = entries

    @property
    def description(self) -> str:
        parts = []
        lower = 1
        for upper, value in self.entries:
            parts.append(f"{lower}-{upper}% {value}")
            lower = upper + 1
        return ", ".join(parts)

    def roll(self, rng=None) -> Optional[Any]:
        result = roll(1, 100, rng)
        for upper, value in self.entries:
            if result <= upper:
                return value
        return None

    def __repr__(self) -> str:
        return f"Probability({self.description})"


__all__ = ["roll", "roll_array_item", "roll_percentile", "Probability"]
