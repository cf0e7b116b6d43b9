"""Datastore and identity client dependencies (composition root).

The clients are built once by the application lifespan and read from
``app.state``; repositories are cheap wrappers built per request.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends, Request

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
from taskflow.infrastructure.supabase import SupabaseRESTClient
from taskflow.infrastructure.supabase.repositories import (
    SupabaseActivityLogRepository,
    SupabaseCategoryRepository,
    SupabasePomodoroRepository,
    SupabaseProfileRepository,
    SupabaseStatisticsRepository,
    SupabaseSubtaskRepository,
    SupabaseTaskRepository,
)


def get_record_store(request: Request) -> SupabaseRESTClient:
    """PostgREST client created in the lifespan."""
    return request.app.state.record_store


def get_identity_provider(request: Request) -> IIdentityProvider:
    """Identity client created in the lifespan."""
    return request.app.state.identity_provider


RecordStore = Annotated[SupabaseRESTClient, Depends(get_record_store)]


def get_task_repo(store: RecordStore) -> ITaskRepository:
    return SupabaseTaskRepository(store)


def get_subtask_repo(store: RecordStore) -> ISubtaskRepository:
    return SupabaseSubtaskRepository(store)


def get_category_repo(store: RecordStore) -> ICategoryRepository:
    return SupabaseCategoryRepository(store)


def get_profile_repo(store: RecordStore) -> IProfileRepository:
    return SupabaseProfileRepository(store)


def get_pomodoro_repo(store: RecordStore) -> IPomodoroRepository:
    return SupabasePomodoroRepository(store)


def get_activity_repo(store: RecordStore) -> IActivityLogRepository:
    return SupabaseActivityLogRepository(store)


def get_statistics_repo(store: RecordStore) -> IStatisticsRepository:
    return SupabaseStatisticsRepository(store)
