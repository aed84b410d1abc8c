"""Half-up rounding shared by every percentage the engine hands out.

Python's ``round`` rounds halves to even; the presentation layer expects halves
to round up, so all public numbers go through these helpers.
"""

from __future__ import annotations

import math


def round_half_up(value: float, digits: int = 2) -> float:
    """Round *value* to *digits* decimals, halves towards +infinity."""
    scale = 10**digits
    return math.floor(value * scale + 0.5) / scale


def round_count(value: float) -> int:
    """Half-up rounding to a whole member count."""
    return int(math.floor(value + 0.5))


def percentage_of(count: int, total: int) -> float:
    """``count / total`` as a percentage with 2 decimals; ``0.0`` for an empty team."""
    if total <= 0:
        return 0.0
    return round_half_up(count / total * 100, 2)
