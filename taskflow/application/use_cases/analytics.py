"""Analytics use cases: statistics, productivity, distributions, and activity feed."""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Callable
from dataclasses import asdict
from datetime import datetime, timedelta
from typing import TYPE_CHECKING, Any

from taskflow.application.dtos.analytics import (
    CategoryShare,
    PriorityBreakdown,
    ProductivityDay,
    TaskStatistics,
)
from taskflow.domain.enums import Priority, StatisticsPeriod, TaskStatus
from taskflow.domain.exceptions import StoreException
from taskflow.domain.lifecycle import is_overdue
from taskflow.shared.telemetry.tracing import add_span_attributes, traced
from taskflow.shared.utils.datetime import parse_timestamp, subtract_months, utc_now
from taskflow.shared.utils.numbers import percentage, round_half_up

if TYPE_CHECKING:
    from taskflow.application.interfaces.repositories import (
        IActivityLogRepository,
        IStatisticsRepository,
        ITaskRepository,
    )

logger = logging.getLogger(__name__)

Row = dict[str, Any]

PRODUCTIVITY_WINDOW_DAYS = 30
UNCATEGORIZED_ID = "uncategorized"
UNCATEGORIZED_NAME = "Uncategorized"
UNCATEGORIZED_COLOR = "#94A3B8"
PRIORITY_BUCKETS = (Priority.URGENT, Priority.HIGH, Priority.MEDIUM, Priority.LOW)


def period_start(period: StatisticsPeriod, now: datetime) -> datetime:
    """Start of the look-back window for a statistics period."""
    if period == StatisticsPeriod.DAY:
        return now - timedelta(days=1)
    if period == StatisticsPeriod.MONTH:
        return subtract_months(now, 1)
    if period == StatisticsPeriod.YEAR:
        return subtract_months(now, 12)
    return now - timedelta(days=7)


def fold_statistics(tasks: list[Row], now: datetime) -> TaskStatistics:
    """Count tasks by status and total the time of completed ones."""
    total = len(tasks)
    by_status: dict[str, int] = defaultdict(int)
    for task in tasks:
        by_status[task.get("status")] += 1
    completed = by_status[TaskStatus.COMPLETED.value]
    timed = [
        t["tempo_real"]
        for t in tasks
        if t.get("status") == TaskStatus.COMPLETED and t.get("tempo_real")
    ]
    time_spent = sum(timed)
    return TaskStatistics(
        total_tasks=total,
        completed_tasks=completed,
        pending_tasks=by_status[TaskStatus.PENDING.value],
        in_progress_tasks=by_status[TaskStatus.IN_PROGRESS.value],
        overdue_tasks=sum(1 for t in tasks if is_overdue(t, now)),
        completion_rate=percentage(completed, total),
        total_time_spent=time_spent,
        average_completion_time=round_half_up(time_spent / len(timed)) if timed else 0,
    )


class AnalyticsService:
    """Read-only aggregates over the caller's tasks."""

    def __init__(
        self,
        task_repo: ITaskRepository,
        statistics_repo: IStatisticsRepository,
        activity_repo: IActivityLogRepository,
        *,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.task_repo = task_repo
        self.statistics_repo = statistics_repo
        self.activity_repo = activity_repo
        self.clock = clock

    @traced("analytics.statistics")
    async def statistics(self, user_id: str, period: StatisticsPeriod = StatisticsPeriod.WEEK) -> Any:
        """Return the datastore aggregate verbatim, or a client-side fold when it fails or is empty."""
        try:
            result = await self.statistics_repo.task_statistics(user_id, period.value)
        except StoreException as e:
            logger.warning("Statistics function failed, computing in process: %s", e.message)
            result = None
        if result:
            return result
        add_span_attributes(statistics_fallback=True)
        now = self.clock()
        tasks = await self.task_repo.list_created_since(user_id, period_start(period, now))
        return asdict(fold_statistics(tasks, now))

    async def productivity(self, user_id: str) -> list[dict[str, Any]]:
        """Completed tasks per UTC date over the last 30 days, oldest date first."""
        since = self.clock() - timedelta(days=PRODUCTIVITY_WINDOW_DAYS)
        tasks = await self.task_repo.list_completed_since(user_id, since)
        days: dict[str, ProductivityDay] = {}
        for task in tasks:
            completed_at = parse_timestamp(task.get("completed_at"))
            if completed_at is None:
                continue
            key = completed_at.date().isoformat()
            day = days.setdefault(key, ProductivityDay(date=key, tasks_completed=0, time_spent=0))
            day.tasks_completed += 1
            day.time_spent += task.get("tempo_real") or 0
        return [asdict(days[key]) for key in sorted(days)]

    async def category_distribution(self, user_id: str) -> list[dict[str, Any]]:
        """Task count per category, in first-seen order, with an uncategorized bucket."""
        tasks = await self.task_repo.list_with_category(user_id)
        buckets: dict[str, CategoryShare] = {}
        for task in tasks:
            category = task.get("category") or {}
            key = task.get("category_id") or UNCATEGORIZED_ID
            share = buckets.get(key)
            if share is None:
                share = buckets[key] = CategoryShare(
                    id=key,
                    name=category.get("name") or UNCATEGORIZED_NAME,
                    color=category.get("color") or UNCATEGORIZED_COLOR,
                    count=0,
                )
            share.count += 1
        return [asdict(share) for share in buckets.values()]

    async def priority_distribution(self, user_id: str) -> list[dict[str, Any]]:
        """Fixed urgent/high/medium/low buckets with completion figures."""
        tasks = await self.task_repo.list_with_category(user_id)
        totals = {p.value: [0, 0] for p in PRIORITY_BUCKETS}
        for task in tasks:
            counts = totals.get(task.get("priority"))
            if counts is None:
                continue
            counts[0] += 1
            if task.get("status") == TaskStatus.COMPLETED:
                counts[1] += 1
        return [
            asdict(
                PriorityBreakdown(
                    priority=priority,
                    total=total,
                    completed=completed,
                    pending=total - completed,
                    completion_rate=percentage(completed, total),
                )
            )
            for priority, (total, completed) in totals.items()
        ]

    async def activity(self, user_id: str, limit: int = 50, offset: int = 0) -> list[Row]:
        return await self.activity_repo.list_page(user_id, limit, offset)
