"""DTOs for task queries."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class TaskFilters:
    """Optional list filters; unset fields do not constrain the result."""

    status: str | None = None
    priority: str | None = None
    category_id: str | None = None
    search: str | None = None
    tags: tuple[str, ...] = field(default_factory=tuple)
