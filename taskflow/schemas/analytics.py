"""Analytics and pomodoro API schemas."""

from uuid import UUID

from pydantic import BaseModel, Field

from taskflow.schemas.common import StrictModel


class PomodoroCreateRequest(StrictModel):
    """Request body for POST /analytics/pomodoro."""

    task_id: UUID | None = None
    duration: int = Field(..., ge=1, le=120, description="Minutes")


class ProductivityDayResponse(BaseModel):
    date: str
    tasks_completed: int
    time_spent: int


class CategoryShareResponse(BaseModel):
    id: str
    name: str
    color: str
    count: int


class PriorityBreakdownResponse(BaseModel):
    priority: str
    total: int
    completed: int
    pending: int
    completion_rate: int
