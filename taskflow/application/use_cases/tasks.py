"""Task use cases: CRUD, completion side effects, reorder, overdue and today views."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from datetime import datetime
from typing import TYPE_CHECKING, Any

from taskflow.application.dtos.task import TaskFilters
from taskflow.domain.enums import Priority, TaskStatus
from taskflow.domain.exceptions import ResourceNotFoundException, ValidationException
from taskflow.domain.lifecycle import (
    expected_end,
    is_overdue,
    priority_rank,
    status_change_fields,
    toggled_status,
)
from taskflow.shared.telemetry.tracing import traced
from taskflow.shared.utils.datetime import local_day_window, utc_now

if TYPE_CHECKING:
    from taskflow.application.interfaces.repositories import ITaskRepository

logger = logging.getLogger(__name__)

Row = dict[str, Any]


class TaskService:
    """Owner-scoped task operations.

    Status may be set to anything through update; completion and reopening
    stamp or clear ``completed_at``/``tempo_real`` (see taskflow.domain.lifecycle).
    """

    def __init__(
        self,
        task_repo: ITaskRepository,
        *,
        timezone: str = "UTC",
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        self.task_repo = task_repo
        self.timezone = timezone
        self.clock = clock

    async def list_tasks(self, user_id: str, filters: TaskFilters | None = None) -> list[Row]:
        return await self.task_repo.list_filtered(user_id, filters or TaskFilters())

    async def get_task(self, user_id: str, task_id: str) -> Row:
        task = await self.task_repo.get(user_id, task_id)
        if task is None:
            raise ResourceNotFoundException("task", task_id)
        return task

    @traced("tasks.create")
    async def create_task(self, user_id: str, data: Row) -> Row:
        """Insert a pending task at the end of the owner's list."""
        last = await self.task_repo.last_position(user_id)
        position = 0 if last is None else last + 1
        row = {
            "title": data["title"],
            "description": data.get("description") or None,
            "category_id": data.get("category_id"),
            "priority": data.get("priority") or Priority.MEDIUM.value,
            "status": TaskStatus.PENDING.value,
            "start_date": data.get("start_date"),
            "reminder_date": data.get("reminder_date"),
            "is_recurring": bool(data.get("is_recurring", False)),
            "recurrence_pattern": data.get("recurrence_pattern"),
            "recurrence_interval": data.get("recurrence_interval"),
            "estimated_time": data.get("estimated_time"),
            "tags": list(data.get("tags") or []),
            "attachments": list(data.get("attachments") or []),
            "user_id": user_id,
            "position": position,
        }
        task = await self.task_repo.create(row)
        logger.info("Created task %s at position %s", task.get("id"), position)
        return task

    @traced("tasks.update")
    async def update_task(self, user_id: str, task_id: str, changes: Row) -> Row:
        """Apply a partial update, adding completion side effects when status changes."""
        existing = await self.get_task(user_id, task_id)
        values = dict(changes)
        if "status" in changes:
            derived = status_change_fields(
                existing.get("status"), changes["status"], existing.get("created_at"), self.clock()
            )
            if "tempo_real" in derived and derived["tempo_real"] is not None:
                logger.info("Task %s completed after %s minutes", task_id, derived["tempo_real"])
            values.update(derived)
        return await self._write(user_id, task_id, values)

    @traced("tasks.toggle")
    async def toggle_task(self, user_id: str, task_id: str) -> Row:
        """Flip between completed and pending."""
        existing = await self.get_task(user_id, task_id)
        new_status = toggled_status(existing.get("status"))
        values: Row = {"status": new_status.value}
        values.update(
            status_change_fields(
                existing.get("status"), new_status, existing.get("created_at"), self.clock()
            )
        )
        return await self._write(user_id, task_id, values)

    async def _write(self, user_id: str, task_id: str, values: Row) -> Row:
        task = await self.task_repo.update(user_id, task_id, values)
        if task is None:
            raise ResourceNotFoundException("task", task_id)
        return task

    @traced("tasks.reorder")
    async def reorder_tasks(self, user_id: str, task_ids: list[str]) -> None:
        """Set position = index for each id, as independent concurrent row updates.

        Not atomic: if one update fails the others may already be applied.
        """
        if not task_ids:
            raise ValidationException("task_ids must contain at least one id", field="task_ids")
        results = await asyncio.gather(
            *(
                self.task_repo.set_position(user_id, task_id, index)
                for index, task_id in enumerate(task_ids)
            ),
            return_exceptions=True,
        )
        failures = [r for r in results if isinstance(r, BaseException)]
        if failures:
            logger.error(
                "Reorder partially failed: %d of %d updates raised", len(failures), len(task_ids)
            )
            raise failures[0]

    async def delete_task(self, user_id: str, task_id: str) -> None:
        await self.task_repo.delete(user_id, task_id)

    async def overdue_tasks(self, user_id: str) -> list[Row]:
        """Unfinished tasks whose start (or creation) plus estimate is in the past, soonest first."""
        now = self.clock()
        candidates = await self.task_repo.list_unfinished_with_estimate(user_id)
        overdue = [t for t in candidates if is_overdue(t, now)]
        overdue.sort(key=expected_end)
        return overdue

    async def today_tasks(self, user_id: str) -> list[Row]:
        """Tasks created or starting during the current local day, most urgent first."""
        start, end = local_day_window(self.clock(), self.timezone)
        tasks = await self.task_repo.list_in_window(user_id, start, end)
        return sorted(
            tasks,
            key=lambda t: (-priority_rank(t.get("priority")), t.get("position") or 0),
        )
