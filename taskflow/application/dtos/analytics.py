"""DTOs for analytics aggregates."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class TaskStatistics:
    """Counts and time totals over the tasks created in a period."""

    total_tasks: int
    completed_tasks: int
    pending_tasks: int
    in_progress_tasks: int
    overdue_tasks: int
    completion_rate: int
    total_time_spent: int
    average_completion_time: int


@dataclass
class ProductivityDay:
    """Tasks completed on one UTC calendar date."""

    date: str
    tasks_completed: int
    time_spent: int


@dataclass
class CategoryShare:
    """Task count for one category (or the uncategorized bucket)."""

    id: str
    name: str
    color: str
    count: int


@dataclass
class PriorityBreakdown:
    """Completion figures for one priority bucket."""

    priority: str
    total: int
    completed: int
    pending: int
    completion_rate: int
