"""Category API schemas."""

from typing import ClassVar

from pydantic import Field

from taskflow.schemas.common import HEX_COLOR_PATTERN, PartialUpdateModel, StrictModel


class CategoryCreateRequest(StrictModel):
    """Request body for POST /categories."""

    name: str = Field(..., min_length=1, max_length=100)
    color: str = Field(default="#3B82F6", pattern=HEX_COLOR_PATTERN)
    icon: str = Field(default="📁", max_length=10)


class CategoryUpdateRequest(PartialUpdateModel):
    """Request body for PUT /categories/{id} (partial)."""

    non_nullable: ClassVar[tuple[str, ...]] = ("name", "color", "icon")

    name: str | None = Field(default=None, min_length=1, max_length=100)
    color: str | None = Field(default=None, pattern=HEX_COLOR_PATTERN)
    icon: str | None = Field(default=None, max_length=10)
