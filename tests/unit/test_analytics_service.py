"""AnalyticsService unit tests: statistics fallback and distributions."""

from datetime import UTC, datetime

import pytest

from fakes import (
    USER_ID,
    FakeActivityLogRepository,
    FakeStatisticsRepository,
    FakeTaskRepository,
    InMemoryStore,
)
from taskflow.application.use_cases.analytics import (
    AnalyticsService,
    fold_statistics,
    period_start,
)
from taskflow.domain.enums import StatisticsPeriod
from taskflow.domain.exceptions import StoreException

NOW = datetime(2025, 3, 31, 12, 0, 0, tzinfo=UTC)


@pytest.fixture
def service(
    task_repo: FakeTaskRepository,
    statistics_repo: FakeStatisticsRepository,
    activity_repo: FakeActivityLogRepository,
) -> AnalyticsService:
    return AnalyticsService(task_repo, statistics_repo, activity_repo, clock=lambda: NOW)


def test_period_start() -> None:
    assert period_start(StatisticsPeriod.DAY, NOW) == datetime(2025, 3, 30, 12, tzinfo=UTC)
    assert period_start(StatisticsPeriod.WEEK, NOW) == datetime(2025, 3, 24, 12, tzinfo=UTC)
    assert period_start(StatisticsPeriod.MONTH, NOW) == datetime(2025, 2, 28, 12, tzinfo=UTC)
    assert period_start(StatisticsPeriod.YEAR, NOW) == datetime(2024, 3, 31, 12, tzinfo=UTC)


def test_fold_statistics() -> None:
    tasks = [
        {"status": "completed", "tempo_real": 30, "created_at": "2025-03-30T00:00:00Z"},
        {"status": "completed", "tempo_real": 45, "created_at": "2025-03-30T00:00:00Z"},
        {"status": "completed", "tempo_real": None, "created_at": "2025-03-30T00:00:00Z"},
        {"status": "pending", "estimated_time": 10, "created_at": "2025-03-31T00:00:00Z"},
        {"status": "in_progress", "created_at": "2025-03-31T00:00:00Z"},
        {"status": "archived", "created_at": "2025-03-31T00:00:00Z"},
    ]
    stats = fold_statistics(tasks, NOW)
    assert stats.total_tasks == 6
    assert stats.completed_tasks == 3
    assert stats.pending_tasks == 1
    assert stats.in_progress_tasks == 1
    assert stats.overdue_tasks == 1
    assert stats.completion_rate == 50
    assert stats.total_time_spent == 75
    assert stats.average_completion_time == 38


def test_fold_statistics_of_nothing_is_zero() -> None:
    stats = fold_statistics([], NOW)
    assert stats.total_tasks == 0
    assert stats.completion_rate == 0
    assert stats.average_completion_time == 0


async def test_statistics_returns_server_aggregate(
    service: AnalyticsService, store: InMemoryStore
) -> None:
    store.statistics = {"total_tasks": 4, "completed_tasks": 1}
    assert await service.statistics(USER_ID) == {"total_tasks": 4, "completed_tasks": 1}
    assert "tasks.list_created_since" not in store.calls


async def test_statistics_falls_back_when_function_fails(
    service: AnalyticsService, store: InMemoryStore
) -> None:
    store.statistics = StoreException("function get_task_statistics does not exist", 404)
    store.add_task(USER_ID, status="completed", tempo_real=20, created_at="2025-03-30T00:00:00Z")
    store.add_task(USER_ID, status="pending", created_at="2025-01-01T00:00:00Z")
    stats = await service.statistics(USER_ID, StatisticsPeriod.WEEK)
    assert stats["total_tasks"] == 1
    assert stats["completed_tasks"] == 1
    assert stats["completion_rate"] == 100


async def test_statistics_falls_back_on_empty_result(
    service: AnalyticsService, store: InMemoryStore
) -> None:
    store.statistics = None
    stats = await service.statistics(USER_ID, StatisticsPeriod.YEAR)
    assert stats["total_tasks"] == 0


async def test_priority_distribution(service: AnalyticsService, store: InMemoryStore) -> None:
    for status in ("completed", "completed", "pending"):
        store.add_task(USER_ID, priority="urgent", status=status)
    store.add_task(USER_ID, priority="high", status="pending")

    buckets = {b["priority"]: b for b in await service.priority_distribution(USER_ID)}

    assert list(buckets) == ["urgent", "high", "medium", "low"]
    assert buckets["urgent"] == {
        "priority": "urgent",
        "total": 3,
        "completed": 2,
        "pending": 1,
        "completion_rate": 67,
    }
    assert buckets["high"]["completion_rate"] == 0
    assert buckets["high"]["pending"] == 1
    assert buckets["medium"]["total"] == 0
    assert buckets["medium"]["completion_rate"] == 0


async def test_category_distribution_includes_uncategorized(
    service: AnalyticsService, store: InMemoryStore
) -> None:
    work = store.add_category(USER_ID, "Work", color="#FF0000")
    store.add_task(USER_ID, category_id=work["id"])
    store.add_task(USER_ID, category_id=None)
    store.add_task(USER_ID, category_id=work["id"])

    shares = await service.category_distribution(USER_ID)

    assert shares == [
        {"id": work["id"], "name": "Work", "color": "#FF0000", "count": 2},
        {"id": "uncategorized", "name": "Uncategorized", "color": "#94A3B8", "count": 1},
    ]


async def test_productivity_groups_by_utc_date(
    service: AnalyticsService, store: InMemoryStore
) -> None:
    store.add_task(
        USER_ID, status="completed", completed_at="2025-03-30T23:30:00+00:00", tempo_real=10
    )
    store.add_task(
        USER_ID, status="completed", completed_at="2025-03-29T08:00:00+00:00", tempo_real=5
    )
    store.add_task(
        USER_ID, status="completed", completed_at="2025-03-30T01:00:00+00:00", tempo_real=None
    )
    store.add_task(
        USER_ID, status="completed", completed_at="2025-01-01T00:00:00+00:00", tempo_real=99
    )

    days = await service.productivity(USER_ID)

    assert days == [
        {"date": "2025-03-29", "tasks_completed": 1, "time_spent": 5},
        {"date": "2025-03-30", "tasks_completed": 2, "time_spent": 10},
    ]


async def test_activity_pages_newest_first(service: AnalyticsService, store: InMemoryStore) -> None:
    for day in range(1, 6):
        store.activity_log.append(
            {"id": f"a{day}", "user_id": USER_ID, "created_at": f"2025-03-0{day}T00:00:00Z"}
        )
    page = await service.activity(USER_ID, limit=2, offset=1)
    assert [a["id"] for a in page] == ["a4", "a3"]
