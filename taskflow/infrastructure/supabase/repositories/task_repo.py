"""Supabase-backed task repository (implements ITaskRepository)."""

from __future__ import annotations

from datetime import datetime

from taskflow.application.dtos.task import TaskFilters
from taskflow.domain.enums import TaskStatus
from taskflow.infrastructure.supabase._rest_client import (
    Row,
    SupabaseRESTClient,
    all_of,
    condition,
)
from taskflow.infrastructure.supabase.tables import (
    TABLE_TASKS,
    TASK_WITH_CATEGORY,
    TASK_WITH_RELATIONS,
)
from taskflow.shared.utils.datetime import to_iso


class SupabaseTaskRepository:
    """Task rows in the ``tasks`` table, always filtered by ``user_id``."""

    def __init__(self, client: SupabaseRESTClient) -> None:
        self._client = client

    def _owned(self, user_id: str, columns: str = TASK_WITH_RELATIONS):
        return self._client.table(TABLE_TASKS).select(columns).eq("user_id", user_id)

    async def list_filtered(self, user_id: str, filters: TaskFilters) -> list[Row]:
        q = self._owned(user_id)
        if filters.status:
            q = q.eq("status", filters.status)
        if filters.priority:
            q = q.eq("priority", filters.priority)
        if filters.category_id:
            q = q.eq("category_id", filters.category_id)
        if filters.search:
            q = q.ilike_any(("title", "description"), filters.search)
        if filters.tags:
            q = q.contains("tags", filters.tags)
        return await q.order("position").execute()

    async def get(self, user_id: str, task_id: str) -> Row | None:
        return await self._owned(user_id).eq("id", task_id).maybe_single()

    async def exists(self, user_id: str, task_id: str) -> bool:
        return await self._owned(user_id, "id").eq("id", task_id).maybe_single() is not None

    async def last_position(self, user_id: str) -> int | None:
        row = await (
            self._owned(user_id, "position")
            .order("position", ascending=False)
            .maybe_single()
        )
        if row is None or row.get("position") is None:
            return None
        return int(row["position"])

    async def create(self, values: Row) -> Row:
        rows = await self._client.table(TABLE_TASKS).select(TASK_WITH_RELATIONS).insert(values)
        return rows[0]

    async def update(self, user_id: str, task_id: str, values: Row) -> Row | None:
        rows = await self._owned(user_id).eq("id", task_id).update(values)
        return rows[0] if rows else None

    async def set_position(self, user_id: str, task_id: str, position: int) -> None:
        await self._owned(user_id, "id").eq("id", task_id).update({"position": position})

    async def delete(self, user_id: str, task_id: str) -> None:
        await self._owned(user_id, "id").eq("id", task_id).delete()

    async def list_unfinished_with_estimate(self, user_id: str) -> list[Row]:
        return await (
            self._owned(user_id, TASK_WITH_CATEGORY)
            .neq("status", TaskStatus.COMPLETED.value)
            .not_null("estimated_time")
            .execute()
        )

    async def list_in_window(self, user_id: str, start: datetime, end: datetime) -> list[Row]:
        lo, hi = to_iso(start), to_iso(end)
        return await (
            self._owned(user_id)
            .or_(
                all_of(condition("created_at", "gte", lo), condition("created_at", "lt", hi)),
                all_of(condition("start_date", "gte", lo), condition("start_date", "lt", hi)),
            )
            .order("position")
            .execute()
        )

    async def list_created_since(self, user_id: str, since: datetime) -> list[Row]:
        return await (
            self._owned(user_id, "status, start_date, estimated_time, tempo_real, created_at")
            .gte("created_at", to_iso(since))
            .execute()
        )

    async def list_completed_since(self, user_id: str, since: datetime) -> list[Row]:
        return await (
            self._owned(user_id, "completed_at, tempo_real")
            .eq("status", TaskStatus.COMPLETED.value)
            .gte("completed_at", to_iso(since))
            .order("completed_at")
            .execute()
        )

    async def list_with_category(self, user_id: str) -> list[Row]:
        return await self._owned(
            user_id, "category_id, priority, status, category:categories(name, color)"
        ).execute()

    async def any_in_category(self, category_id: str) -> bool:
        rows = await (
            self._client.table(TABLE_TASKS)
            .select("id")
            .eq("category_id", category_id)
            .limit(1)
            .execute()
        )
        return bool(rows)
