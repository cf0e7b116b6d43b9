"""Shared utilities: datetime and numeric helpers."""

from taskflow.shared.utils.datetime import (
    ensure_utc,
    local_day_window,
    parse_timestamp,
    subtract_months,
    to_iso,
    utc_now,
)
from taskflow.shared.utils.numbers import percentage, round_half_up

__all__ = [
    "utc_now",
    "ensure_utc",
    "parse_timestamp",
    "to_iso",
    "local_day_window",
    "subtract_months",
    "round_half_up",
    "percentage",
]
