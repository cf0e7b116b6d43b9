"""Domain enumerations for TaskFlow.

Enums represent fixed sets of domain values (priority, status, recurrence,
theme, statistics period). Values match the strings stored in the datastore.
"""

from enum import Enum


class Priority(str, Enum):
    """Task priority, declared from lowest to highest urgency."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"

    @property
    def rank(self) -> int:
        """Ordinal used for sorting (low=0 ... urgent=3)."""
        return _PRIORITY_RANK[self]


_PRIORITY_RANK: dict[Priority, int] = {p: i for i, p in enumerate(Priority)}


class TaskStatus(str, Enum):
    """Task lifecycle status.

    Any status can be set directly; only completion and reopening carry
    side effects (see taskflow.domain.lifecycle).
    """

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    ARCHIVED = "archived"


class RecurrencePattern(str, Enum):
    """How a recurring task repeats."""

    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    CUSTOM = "custom"


class ThemePreference(str, Enum):
    """Profile UI theme."""

    LIGHT = "light"
    DARK = "dark"
    AUTO = "auto"


class StatisticsPeriod(str, Enum):
    """Look-back window for task statistics."""

    DAY = "day"
    WEEK = "week"
    MONTH = "month"
    YEAR = "year"
