"""Subtask API schemas."""

from typing import ClassVar

from pydantic import Field

from taskflow.schemas.common import PartialUpdateModel, StrictModel


class SubtaskCreateRequest(StrictModel):
    """Request body for POST /tasks/{task_id}/subtasks.

    ``position`` is accepted for compatibility; the server appends at the end.
    """

    title: str = Field(..., min_length=1, max_length=255)
    position: int = Field(default=0, ge=0)


class SubtaskUpdateRequest(PartialUpdateModel):
    non_nullable: ClassVar[tuple[str, ...]] = ("title", "completed", "position")

    title: str | None = Field(default=None, min_length=1, max_length=255)
    completed: bool | None = None
    position: int | None = Field(default=None, ge=0)
