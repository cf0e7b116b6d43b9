"""Use-case dependencies (composition root). Routes depend on these, not on infrastructure."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends

from taskflow.api.v1.dependencies.store import (
    get_activity_repo,
    get_category_repo,
    get_identity_provider,
    get_pomodoro_repo,
    get_profile_repo,
    get_statistics_repo,
    get_subtask_repo,
    get_task_repo,
)
from taskflow.application.interfaces.repositories import (
    IActivityLogRepository,
    ICategoryRepository,
    IIdentityProvider,
    IPomodoroRepository,
    IProfileRepository,
    IStatisticsRepository,
    ISubtaskRepository,
    ITaskRepository,
)
from taskflow.application.use_cases import (
    AnalyticsService,
    CategoryService,
    PomodoroService,
    ProfileService,
    SubtaskService,
    TaskService,
)
from taskflow.core.config import get_settings


def get_task_service(
    task_repo: Annotated[ITaskRepository, Depends(get_task_repo)],
) -> TaskService:
    return TaskService(task_repo, timezone=get_settings().timezone)


def get_subtask_service(
    task_repo: Annotated[ITaskRepository, Depends(get_task_repo)],
    subtask_repo: Annotated[ISubtaskRepository, Depends(get_subtask_repo)],
) -> SubtaskService:
    return SubtaskService(task_repo, subtask_repo)


def get_category_service(
    category_repo: Annotated[ICategoryRepository, Depends(get_category_repo)],
    task_repo: Annotated[ITaskRepository, Depends(get_task_repo)],
) -> CategoryService:
    return CategoryService(category_repo, task_repo)


def get_profile_service(
    profile_repo: Annotated[IProfileRepository, Depends(get_profile_repo)],
    identity: Annotated[IIdentityProvider, Depends(get_identity_provider)],
) -> ProfileService:
    return ProfileService(profile_repo, identity)


def get_analytics_service(
    task_repo: Annotated[ITaskRepository, Depends(get_task_repo)],
    statistics_repo: Annotated[IStatisticsRepository, Depends(get_statistics_repo)],
    activity_repo: Annotated[IActivityLogRepository, Depends(get_activity_repo)],
) -> AnalyticsService:
    return AnalyticsService(task_repo, statistics_repo, activity_repo)


def get_pomodoro_service(
    pomodoro_repo: Annotated[IPomodoroRepository, Depends(get_pomodoro_repo)],
) -> PomodoroService:
    return PomodoroService(pomodoro_repo)
