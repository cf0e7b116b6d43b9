"""Subtask use cases. Every operation first checks the parent task belongs to the caller."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from taskflow.domain.exceptions import ResourceNotFoundException

if TYPE_CHECKING:
    from taskflow.application.interfaces.repositories import (
        ISubtaskRepository,
        ITaskRepository,
    )

Row = dict[str, Any]


class SubtaskService:
    """Checklist items under a task."""

    def __init__(self, task_repo: ITaskRepository, subtask_repo: ISubtaskRepository) -> None:
        self.task_repo = task_repo
        self.subtask_repo = subtask_repo

    async def _require_task(self, user_id: str, task_id: str) -> None:
        if not await self.task_repo.exists(user_id, task_id):
            raise ResourceNotFoundException("task", task_id)

    async def list_subtasks(self, user_id: str, task_id: str) -> list[Row]:
        await self._require_task(user_id, task_id)
        return await self.subtask_repo.list_for_task(task_id)

    async def create_subtask(self, user_id: str, task_id: str, data: Row) -> Row:
        """Append a subtask; any client-supplied position is replaced by last + 1."""
        await self._require_task(user_id, task_id)
        last = await self.subtask_repo.last_position(task_id)
        return await self.subtask_repo.create(
            {
                "title": data["title"],
                "task_id": task_id,
                "position": 0 if last is None else last + 1,
            }
        )

    async def update_subtask(
        self, user_id: str, task_id: str, subtask_id: str, changes: Row
    ) -> Row:
        await self._require_task(user_id, task_id)
        subtask = await self.subtask_repo.update(task_id, subtask_id, changes)
        if subtask is None:
            raise ResourceNotFoundException("subtask", subtask_id)
        return subtask

    async def toggle_subtask(self, user_id: str, task_id: str, subtask_id: str) -> Row:
        await self._require_task(user_id, task_id)
        current = await self.subtask_repo.get(task_id, subtask_id)
        if current is None:
            raise ResourceNotFoundException("subtask", subtask_id)
        subtask = await self.subtask_repo.update(
            task_id, subtask_id, {"completed": not current.get("completed", False)}
        )
        if subtask is None:
            raise ResourceNotFoundException("subtask", subtask_id)
        return subtask

    async def delete_subtask(self, user_id: str, task_id: str, subtask_id: str) -> None:
        await self._require_task(user_id, task_id)
        await self.subtask_repo.delete(task_id, subtask_id)
