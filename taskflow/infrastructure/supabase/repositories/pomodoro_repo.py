"""Supabase-backed pomodoro and activity-log repositories."""

from __future__ import annotations

from datetime import datetime

from taskflow.infrastructure.supabase._rest_client import Row, SupabaseRESTClient
from taskflow.infrastructure.supabase.tables import (
    TABLE_ACTIVITY_LOG,
    TABLE_POMODORO_SESSIONS,
    WITH_TASK_TITLE,
)
from taskflow.shared.utils.datetime import to_iso


class SupabasePomodoroRepository:
    """Pomodoro sessions, always filtered by ``user_id``."""

    def __init__(self, client: SupabaseRESTClient) -> None:
        self._client = client

    async def list_recent(self, user_id: str, limit: int) -> list[Row]:
        return await (
            self._client.table(TABLE_POMODORO_SESSIONS)
            .select(WITH_TASK_TITLE)
            .eq("user_id", user_id)
            .order("started_at", ascending=False)
            .limit(limit)
            .execute()
        )

    async def create(self, values: Row) -> Row:
        rows = await self._client.table(TABLE_POMODORO_SESSIONS).insert(values)
        return rows[0]

    async def complete(self, user_id: str, session_id: str, completed_at: datetime) -> Row | None:
        rows = await (
            self._client.table(TABLE_POMODORO_SESSIONS)
            .eq("id", session_id)
            .eq("user_id", user_id)
            .update({"completed": True, "completed_at": to_iso(completed_at)})
        )
        return rows[0] if rows else None


class SupabaseActivityLogRepository:
    """Read-only access to the owner's activity log."""

    def __init__(self, client: SupabaseRESTClient) -> None:
        self._client = client

    async def list_page(self, user_id: str, limit: int, offset: int) -> list[Row]:
        return await (
            self._client.table(TABLE_ACTIVITY_LOG)
            .select(WITH_TASK_TITLE)
            .eq("user_id", user_id)
            .order("created_at", ascending=False)
            .range(offset, offset + limit - 1)
            .execute()
        )
