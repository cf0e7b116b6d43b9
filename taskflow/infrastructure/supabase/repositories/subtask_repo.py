"""Supabase-backed subtask repository (implements ISubtaskRepository)."""

from __future__ import annotations

from taskflow.infrastructure.supabase._rest_client import Row, SupabaseRESTClient
from taskflow.infrastructure.supabase.tables import TABLE_SUBTASKS


class SupabaseSubtaskRepository:
    """Subtask rows scoped by ``task_id``. Parent ownership is checked by the caller."""

    def __init__(self, client: SupabaseRESTClient) -> None:
        self._client = client

    def _of_task(self, task_id: str, columns: str = "*"):
        return self._client.table(TABLE_SUBTASKS).select(columns).eq("task_id", task_id)

    async def list_for_task(self, task_id: str) -> list[Row]:
        return await self._of_task(task_id).order("position").execute()

    async def get(self, task_id: str, subtask_id: str) -> Row | None:
        return await self._of_task(task_id).eq("id", subtask_id).maybe_single()

    async def last_position(self, task_id: str) -> int | None:
        row = await (
            self._of_task(task_id, "position").order("position", ascending=False).maybe_single()
        )
        if row is None or row.get("position") is None:
            return None
        return int(row["position"])

    async def create(self, values: Row) -> Row:
        rows = await self._client.table(TABLE_SUBTASKS).insert(values)
        return rows[0]

    async def update(self, task_id: str, subtask_id: str, values: Row) -> Row | None:
        rows = await self._of_task(task_id).eq("id", subtask_id).update(values)
        return rows[0] if rows else None

    async def delete(self, task_id: str, subtask_id: str) -> None:
        await self._of_task(task_id, "id").eq("id", subtask_id).delete()
