"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for the authenticated caller, repositories, and
use-case services. Tests swap implementations through
``app.dependency_overrides`` keyed by these functions.
"""

from taskflow.api.v1.dependencies.auth import CurrentUser, get_current_user
from taskflow.api.v1.dependencies.services import (
    get_analytics_service,
    get_category_service,
    get_pomodoro_service,
    get_profile_service,
    get_subtask_service,
    get_task_service,
)
from taskflow.api.v1.dependencies.store import (
    get_activity_repo,
    get_category_repo,
    get_identity_provider,
    get_pomodoro_repo,
    get_profile_repo,
    get_record_store,
    get_statistics_repo,
    get_subtask_repo,
    get_task_repo,
)

__all__ = [
    "CurrentUser",
    "get_activity_repo",
    "get_analytics_service",
    "get_category_repo",
    "get_category_service",
    "get_current_user",
    "get_identity_provider",
    "get_pomodoro_repo",
    "get_pomodoro_service",
    "get_profile_repo",
    "get_profile_service",
    "get_record_store",
    "get_statistics_repo",
    "get_subtask_repo",
    "get_subtask_service",
    "get_task_repo",
    "get_task_service",
]
