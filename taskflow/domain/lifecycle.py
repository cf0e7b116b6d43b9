"""Task lifecycle rules: completion side effects and date-window predicates.

Pure functions over task rows (mappings as returned by the datastore).
Status may be set to any value directly; only two transitions carry side
effects:

- entering ``completed`` from any other status stamps ``completed_at`` and
  derives ``tempo_real`` (whole minutes since ``created_at``);
- going from ``completed`` back to ``pending`` clears both fields.

A task is overdue when it is not completed and its expected end
(``start_date`` or else ``created_at``, plus ``estimated_time`` minutes) has
passed. Tasks without ``estimated_time`` are never overdue.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from datetime import datetime, timedelta
from typing import Any

from taskflow.domain.enums import Priority, TaskStatus
from taskflow.shared.utils.datetime import parse_timestamp, to_iso
from taskflow.shared.utils.numbers import round_half_up

logger = logging.getLogger(__name__)


def elapsed_minutes(created_at: str | datetime | None, now: datetime) -> int | None:
    """Return whole minutes from created_at to now, or None if unknown or unparsable."""
    if not created_at:
        return None
    try:
        started = parse_timestamp(created_at)
        return round_half_up((now - started).total_seconds() / 60)
    except (TypeError, ValueError) as e:
        logger.warning("Could not compute elapsed time from created_at=%r: %s", created_at, e)
        return None


def status_change_fields(
    current_status: str,
    new_status: str,
    created_at: str | datetime | None,
    now: datetime,
) -> dict[str, Any]:
    """Return the derived fields to write alongside a status change.

    Only completion and completed -> pending carry side effects; moving a
    completed task to in_progress or archived keeps completed_at and
    tempo_real as they were.
    """
    if new_status == TaskStatus.COMPLETED and current_status != TaskStatus.COMPLETED:
        fields: dict[str, Any] = {"completed_at": to_iso(now)}
        minutes = elapsed_minutes(created_at, now)
        if minutes is not None:
            fields["tempo_real"] = minutes
        return fields
    if new_status == TaskStatus.PENDING and current_status == TaskStatus.COMPLETED:
        return {"completed_at": None, "tempo_real": None}
    return {}


def toggled_status(current_status: str) -> TaskStatus:
    """Completed toggles back to pending; every other status toggles to completed."""
    if current_status == TaskStatus.COMPLETED:
        return TaskStatus.PENDING
    return TaskStatus.COMPLETED


def expected_end(task: Mapping[str, Any]) -> datetime | None:
    """Return (start_date or created_at) + estimated_time minutes, or None."""
    estimated = task.get("estimated_time")
    if estimated is None:
        return None
    anchor = parse_timestamp(task.get("start_date")) or parse_timestamp(task.get("created_at"))
    if anchor is None:
        return None
    return anchor + timedelta(minutes=int(estimated))


def is_overdue(task: Mapping[str, Any], now: datetime) -> bool:
    """True when the task is not completed and its expected end is before now."""
    if task.get("status") == TaskStatus.COMPLETED:
        return False
    end = expected_end(task)
    return end is not None and end < now


def priority_rank(value: str | None) -> int:
    """Rank for sorting by priority (urgent highest); unknown values sort last."""
    try:
        return Priority(value).rank
    except ValueError:
        return -1
