"""Numeric helpers shared by the analytics modules."""

import math
from collections.abc import Sequence


def round_half_up(value: float, digits: int = 0) -> float:
    """Round to ``digits`` decimals with halves rounded toward +infinity."""
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def round_half_away(value: float, digits: int = 0) -> float:
    """Round to ``digits`` decimals with halves rounded away from zero."""
    return math.copysign(round_half_up(abs(value), digits), value)


def round_to_int(value: float) -> int:
    """Round half up to the nearest integer."""
    return int(round_half_up(value))


def mean(values: Sequence[float]) -> float | None:
    """Arithmetic mean, or ``None`` for an empty sequence."""
    if not values:
        return None
    return sum(values) / len(values)


def clamp(value: float, lower: float, upper: float) -> float:
    return max(lower, min(upper, value))
