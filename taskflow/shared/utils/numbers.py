"""Numeric helpers shared by lifecycle and analytics."""

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounded up (2.5 -> 3, -2.5 -> -2).

    Python's round() uses banker's rounding; client-facing minutes and
    percentages are expected to round .5 upward.
    """
    return math.floor(value + 0.5)


def percentage(part: int, total: int) -> int:
    """Return part/total as a whole percent, or 0 when total is 0."""
    if total <= 0:
        return 0
    return round_half_up(part / total * 100)
