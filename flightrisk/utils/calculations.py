# flightrisk/utils/calculations.py
"""
Small numeric helpers shared by the scorers.
"""
import math
from typing import Any, Iterable, Tuple


def round_half_up(value: float) -> int:
    """Rounds .5 away from zero for positive values (2.5 -> 3), unlike round()."""
    return int(math.floor(value + 0.5))


def clamp(value: int, lower: int, upper: int) -> int:
    return max(lower, min(upper, value))


def bucket_score(value: float, buckets: Iterable[Tuple[float, int]], default: int) -> int:
    """Returns the score of the first bucket whose threshold `value` strictly exceeds."""
    for threshold, score in buckets:
        if value > threshold:
            return score
    return default


def is_number(value: Any) -> bool:
    """True for real, finite numbers. Booleans are rejected."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)
