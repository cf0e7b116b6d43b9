"""Analytics API: statistics, productivity, distributions, activity, and pomodoro sessions."""

from typing import Annotated, Any

from fastapi import APIRouter, Depends, Query, status

from taskflow.api.v1.dependencies import (
    CurrentUser,
    get_analytics_service,
    get_pomodoro_service,
)
from taskflow.application.use_cases.analytics import AnalyticsService
from taskflow.application.use_cases.pomodoro import PomodoroService
from taskflow.domain.enums import StatisticsPeriod
from taskflow.schemas.analytics import (
    CategoryShareResponse,
    PomodoroCreateRequest,
    PriorityBreakdownResponse,
    ProductivityDayResponse,
)
from taskflow.schemas.common import Envelope, Row, ok

router = APIRouter()

Analytics = Annotated[AnalyticsService, Depends(get_analytics_service)]
Pomodoro = Annotated[PomodoroService, Depends(get_pomodoro_service)]


@router.get("/statistics", response_model=Envelope[Any], response_model_exclude_unset=True)
async def get_statistics(
    user: CurrentUser,
    service: Analytics,
    period: Annotated[StatisticsPeriod, Query()] = StatisticsPeriod.WEEK,
) -> Any:
    """Task counts and time totals for the period (server aggregate, with in-process fallback)."""
    return ok(await service.statistics(user.id, period))


@router.get(
    "/productivity",
    response_model=Envelope[list[ProductivityDayResponse]],
    response_model_exclude_unset=True,
)
async def get_productivity(user: CurrentUser, service: Analytics) -> Any:
    return ok(await service.productivity(user.id))


@router.get(
    "/categories",
    response_model=Envelope[list[CategoryShareResponse]],
    response_model_exclude_unset=True,
)
async def get_category_distribution(user: CurrentUser, service: Analytics) -> Any:
    return ok(await service.category_distribution(user.id))


@router.get(
    "/priorities",
    response_model=Envelope[list[PriorityBreakdownResponse]],
    response_model_exclude_unset=True,
)
async def get_priority_distribution(user: CurrentUser, service: Analytics) -> Any:
    return ok(await service.priority_distribution(user.id))


@router.get("/activity", response_model=Envelope[list[Row]], response_model_exclude_unset=True)
async def get_activity(
    user: CurrentUser,
    service: Analytics,
    limit: Annotated[int, Query(ge=1, le=500)] = 50,
    offset: Annotated[int, Query(ge=0)] = 0,
) -> Any:
    return ok(await service.activity(user.id, limit=limit, offset=offset))


@router.get("/pomodoro", response_model=Envelope[list[Row]], response_model_exclude_unset=True)
async def list_pomodoro_sessions(
    user: CurrentUser,
    service: Pomodoro,
    limit: Annotated[int, Query(ge=1, le=500)] = 20,
) -> Any:
    return ok(await service.list_sessions(user.id, limit=limit))


@router.post(
    "/pomodoro",
    status_code=status.HTTP_201_CREATED,
    response_model=Envelope[Row],
    response_model_exclude_unset=True,
)
async def start_pomodoro_session(
    user: CurrentUser, service: Pomodoro, body: PomodoroCreateRequest
) -> Any:
    task_id = str(body.task_id) if body.task_id else None
    session = await service.start_session(user.id, body.duration, task_id=task_id)
    return ok(session, "Pomodoro session started")


@router.patch(
    "/pomodoro/{session_id}/complete",
    response_model=Envelope[Row],
    response_model_exclude_unset=True,
)
async def complete_pomodoro_session(session_id: str, user: CurrentUser, service: Pomodoro) -> Any:
    session = await service.complete_session(user.id, session_id)
    return ok(session, "Pomodoro session completed")
