"""
UTC datetime utilities for consistent timezone handling.

All datetime values in the system should be timezone-aware UTC.
Use these helpers instead of datetime.now() or datetime.utcnow().
The datastore returns timestamps as ISO 8601 strings; parse them with
parse_timestamp() and write them back with to_iso().
"""

import calendar
from datetime import UTC, datetime, timedelta
from zoneinfo import ZoneInfo


def utc_now() -> datetime:
    """
    Return the current UTC datetime with timezone info.

    Use this instead of:
        - datetime.now() - naive, uses local timezone
        - datetime.utcnow() - naive, deprecated in Python 3.12
        - datetime.now(UTC) - correct but verbose

    Returns:
        Timezone-aware datetime in UTC
    """
    return datetime.now(UTC)


def ensure_utc(dt: datetime | None) -> datetime | None:
    """
    Ensure a datetime is UTC-aware.

    - If None, returns None
    - If naive, assumes UTC and attaches timezone
    - If aware, converts to UTC

    Args:
        dt: A datetime that may be naive or aware

    Returns:
        UTC-aware datetime or None
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        # Naive datetime - assume it's UTC and attach timezone
        return dt.replace(tzinfo=UTC)

    # Aware datetime - convert to UTC
    return dt.astimezone(UTC)


def parse_timestamp(value: str | datetime | None) -> datetime | None:
    """
    Parse a datastore timestamp into a UTC-aware datetime.

    Accepts ISO 8601 strings (with 'Z' or an offset; naive means UTC) or
    datetimes. Returns None for None or an empty string.

    Raises:
        ValueError: If the string is not a valid ISO 8601 timestamp.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return ensure_utc(value)
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    return ensure_utc(datetime.fromisoformat(text))


def to_iso(dt: datetime) -> str:
    """Serialize a datetime as a UTC ISO 8601 string for the datastore."""
    return ensure_utc(dt).isoformat()


def local_day_window(now: datetime, tz_name: str) -> tuple[datetime, datetime]:
    """
    Return [local midnight, next local midnight) for the day containing now.

    Boundaries are computed in tz_name and returned in UTC. Uses wall-clock
    midnight, so a DST transition day spans 23 or 25 hours.
    """
    tz = ZoneInfo(tz_name)
    local = ensure_utc(now).astimezone(tz)
    start = datetime(local.year, local.month, local.day, tzinfo=tz)
    next_day = local.date() + timedelta(days=1)
    end = datetime(next_day.year, next_day.month, next_day.day, tzinfo=tz)
    return start.astimezone(UTC), end.astimezone(UTC)


def subtract_months(dt: datetime, months: int) -> datetime:
    """
    Return dt moved back by calendar months, clamping the day to month length.

    Example: 2024-03-31 minus 1 month is 2024-02-29.
    """
    month_index = dt.year * 12 + (dt.month - 1) - months
    year, month = divmod(month_index, 12)
    month += 1
    day = min(dt.day, calendar.monthrange(year, month)[1])
    return dt.replace(year=year, month=month, day=day)
