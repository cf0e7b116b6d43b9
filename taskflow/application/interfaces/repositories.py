"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
Rows are plain dicts shaped as the datastore returns them; every method that
touches owned data takes the owner id and filters by it.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from taskflow.application.dtos.task import TaskFilters
    from taskflow.application.dtos.user import AuthenticatedUser

Row = dict[str, Any]


class ITaskRepository(Protocol):
    """Protocol for task persistence."""

    async def list_filtered(self, user_id: str, filters: TaskFilters) -> list[Row]:
        """Return the owner's tasks matching filters with category and subtasks, by position."""

    async def get(self, user_id: str, task_id: str) -> Row | None:
        """Return one owned task with category and subtasks."""

    async def exists(self, user_id: str, task_id: str) -> bool:
        """True when the task exists and belongs to the owner."""

    async def last_position(self, user_id: str) -> int | None:
        """Return the owner's highest task position, or None if they have no tasks."""

    async def create(self, values: Row) -> Row:
        """Insert a task row and return it."""

    async def update(self, user_id: str, task_id: str, values: Row) -> Row | None:
        """Update an owned task; return it with relations, or None if nothing matched."""

    async def set_position(self, user_id: str, task_id: str, position: int) -> None:
        """Write one task's position (no-op for ids the owner does not have)."""

    async def delete(self, user_id: str, task_id: str) -> None:
        """Delete an owned task."""

    async def list_unfinished_with_estimate(self, user_id: str) -> list[Row]:
        """Return non-completed tasks that have estimated_time, with category."""

    async def list_in_window(self, user_id: str, start: datetime, end: datetime) -> list[Row]:
        """Return tasks whose created_at or start_date lies in [start, end)."""

    async def list_created_since(self, user_id: str, since: datetime) -> list[Row]:
        """Return tasks created at or after since."""

    async def list_completed_since(self, user_id: str, since: datetime) -> list[Row]:
        """Return completed tasks with completed_at at or after since, oldest first."""

    async def list_with_category(self, user_id: str) -> list[Row]:
        """Return every owned task with its category name and color."""

    async def any_in_category(self, category_id: str) -> bool:
        """True when at least one task references the category."""


class ISubtaskRepository(Protocol):
    """Protocol for subtask persistence. Callers check parent ownership first."""

    async def list_for_task(self, task_id: str) -> list[Row]:
        """Return the task's subtasks by position."""

    async def get(self, task_id: str, subtask_id: str) -> Row | None:
        """Return one subtask of the task."""

    async def last_position(self, task_id: str) -> int | None:
        """Return the task's highest subtask position, or None."""

    async def create(self, values: Row) -> Row:
        """Insert a subtask and return it."""

    async def update(self, task_id: str, subtask_id: str, values: Row) -> Row | None:
        """Update a subtask of the task; None if nothing matched."""

    async def delete(self, task_id: str, subtask_id: str) -> None:
        """Delete a subtask of the task."""


class ICategoryRepository(Protocol):
    """Protocol for category persistence."""

    async def list_for_owner(self, user_id: str) -> list[Row]:
        """Return the owner's categories, oldest first."""

    async def get(self, user_id: str, category_id: str) -> Row | None:
        """Return one owned category."""

    async def find_by_name(
        self, user_id: str, name: str, exclude_id: str | None = None
    ) -> Row | None:
        """Return an owned category with this exact name, skipping exclude_id."""

    async def create(self, values: Row) -> Row:
        """Insert a category and return it."""

    async def update(self, user_id: str, category_id: str, values: Row) -> Row | None:
        """Update an owned category; None if nothing matched."""

    async def delete(self, user_id: str, category_id: str) -> None:
        """Delete an owned category."""


class IProfileRepository(Protocol):
    """Protocol for profile persistence. Profile id equals the identity id."""

    async def get(self, user_id: str) -> Row | None:
        """Return the caller's profile."""

    async def update(self, user_id: str, values: Row) -> Row | None:
        """Update the caller's profile; None if it does not exist."""


class IPomodoroRepository(Protocol):
    """Protocol for pomodoro session persistence."""

    async def list_recent(self, user_id: str, limit: int) -> list[Row]:
        """Return the newest sessions with the task title."""

    async def create(self, values: Row) -> Row:
        """Insert a session and return it."""

    async def complete(self, user_id: str, session_id: str, completed_at: datetime) -> Row | None:
        """Mark an owned session completed; None if nothing matched."""


class IActivityLogRepository(Protocol):
    """Protocol for reading the append-only activity log."""

    async def list_page(self, user_id: str, limit: int, offset: int) -> list[Row]:
        """Return one newest-first page with the task title."""


class IStatisticsRepository(Protocol):
    """Protocol for the server-side statistics aggregate."""

    async def task_statistics(self, user_id: str, period: str) -> Any:
        """Return the datastore's aggregate for the period (shape defined by the datastore)."""


class IIdentityProvider(Protocol):
    """Protocol for the external identity provider."""

    async def get_user(self, token: str) -> AuthenticatedUser | None:
        """Resolve a bearer token to an identity; None when rejected."""

    async def delete_user(self, user_id: str) -> None:
        """Delete the identity account."""
