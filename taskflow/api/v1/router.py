"""API router aggregation.

Includes all endpoint modules with consistent prefix and tags. Every router
except health requires a bearer token (get_current_user as a router
dependency), so unauthenticated calls fail before any datastore access.
"""

from typing import Any

from fastapi import APIRouter, Depends

from taskflow.api.v1.dependencies import get_current_user
from taskflow.api.v1.endpoints import (
    analytics,
    categories,
    health,
    profile,
    subtasks,
    tasks,
)
from taskflow.schemas.common import ErrorResponse

api_router = APIRouter()

_authenticated = [Depends(get_current_user)]

# Failure envelopes every authenticated route can return, for the OpenAPI docs.
_error_responses: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorResponse, "description": "Invalid request or conflict"},
    401: {"model": ErrorResponse, "description": "Missing or invalid bearer token"},
    404: {"model": ErrorResponse, "description": "Resource not found"},
    500: {"model": ErrorResponse, "description": "Datastore or identity provider failure"},
}

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(
    subtasks.router,
    prefix="/tasks/{task_id}/subtasks",
    tags=["subtasks"],
    dependencies=_authenticated,
    responses=_error_responses,
)
api_router.include_router(
    tasks.router,
    prefix="/tasks",
    tags=["tasks"],
    dependencies=_authenticated,
    responses=_error_responses,
)
api_router.include_router(
    categories.router,
    prefix="/categories",
    tags=["categories"],
    dependencies=_authenticated,
    responses=_error_responses,
)
api_router.include_router(
    analytics.router,
    prefix="/analytics",
    tags=["analytics"],
    dependencies=_authenticated,
    responses=_error_responses,
)
api_router.include_router(
    profile.router,
    prefix="/profile",
    tags=["profile"],
    dependencies=_authenticated,
    responses=_error_responses,
)
