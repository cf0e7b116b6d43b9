"""Pydantic request/response schemas for the API."""

from taskflow.schemas.analytics import PomodoroCreateRequest
from taskflow.schemas.category import CategoryCreateRequest, CategoryUpdateRequest
from taskflow.schemas.common import Envelope, ErrorResponse, FieldError, ok
from taskflow.schemas.health import HealthResponse
from taskflow.schemas.profile import ProfileUpdateRequest
from taskflow.schemas.subtask import SubtaskCreateRequest, SubtaskUpdateRequest
from taskflow.schemas.task import TaskCreateRequest, TaskReorderRequest, TaskUpdateRequest

__all__ = [
    "CategoryCreateRequest",
    "CategoryUpdateRequest",
    "Envelope",
    "ErrorResponse",
    "FieldError",
    "HealthResponse",
    "PomodoroCreateRequest",
    "ProfileUpdateRequest",
    "SubtaskCreateRequest",
    "SubtaskUpdateRequest",
    "TaskCreateRequest",
    "TaskReorderRequest",
    "TaskUpdateRequest",
    "ok",
]
