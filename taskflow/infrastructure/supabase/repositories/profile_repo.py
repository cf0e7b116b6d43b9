"""Supabase-backed profile repository (implements IProfileRepository)."""

from __future__ import annotations

from taskflow.infrastructure.supabase._rest_client import Row, SupabaseRESTClient
from taskflow.infrastructure.supabase.tables import TABLE_PROFILES


class SupabaseProfileRepository:
    """Profile rows keyed by the identity id."""

    def __init__(self, client: SupabaseRESTClient) -> None:
        self._client = client

    async def get(self, user_id: str) -> Row | None:
        return await self._client.table(TABLE_PROFILES).eq("id", user_id).maybe_single()

    async def update(self, user_id: str, values: Row) -> Row | None:
        rows = await self._client.table(TABLE_PROFILES).eq("id", user_id).update(values)
        return rows[0] if rows else None
