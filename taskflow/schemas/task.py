"""Task API schemas."""

from datetime import datetime
from typing import Annotated, ClassVar
from uuid import UUID

from pydantic import AliasChoices, Field

from taskflow.domain.enums import Priority, RecurrencePattern, TaskStatus
from taskflow.schemas.common import PartialUpdateModel, StrictModel, UrlStr

Tag = Annotated[str, Field(max_length=50)]


class Attachment(StrictModel):
    """File linked to a task."""

    name: str = Field(..., min_length=1)
    url: UrlStr
    type: str = Field(..., min_length=1)
    size: int | None = None


class TaskCreateRequest(StrictModel):
    """Request body for POST /tasks. Status always starts as pending."""

    title: str = Field(..., min_length=1, max_length=255)
    description: str | None = Field(default=None, max_length=5000)
    category_id: UUID | None = None
    priority: Priority = Priority.MEDIUM
    start_date: datetime | None = None
    reminder_date: datetime | None = None
    is_recurring: bool = False
    recurrence_pattern: RecurrencePattern | None = None
    recurrence_interval: int | None = Field(default=None, ge=1)
    estimated_time: int | None = Field(default=None, ge=0, description="Minutes")
    tags: list[Tag] = Field(default_factory=list)
    attachments: list[Attachment] = Field(default_factory=list)


class TaskUpdateRequest(PartialUpdateModel):
    """Request body for PUT /tasks/{id} (partial)."""

    non_nullable: ClassVar[tuple[str, ...]] = (
        "title",
        "priority",
        "status",
        "is_recurring",
        "tags",
        "attachments",
        "position",
    )

    title: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = Field(default=None, max_length=5000)
    category_id: UUID | None = None
    priority: Priority | None = None
    status: TaskStatus | None = None
    start_date: datetime | None = None
    reminder_date: datetime | None = None
    is_recurring: bool | None = None
    recurrence_pattern: RecurrencePattern | None = None
    recurrence_interval: int | None = Field(default=None, ge=1)
    estimated_time: int | None = Field(default=None, ge=0)
    tempo_real: int | None = Field(default=None, ge=0)
    tags: list[Tag] | None = None
    attachments: list[Attachment] | None = None
    position: int | None = Field(default=None, ge=0)


class TaskReorderRequest(StrictModel):
    """Request body for PUT /tasks/reorder: ids in their new display order."""

    task_ids: list[str] = Field(
        ...,
        min_length=1,
        validation_alias=AliasChoices("task_ids", "taskIds"),
    )
