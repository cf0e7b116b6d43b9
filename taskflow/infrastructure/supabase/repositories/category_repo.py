"""Supabase-backed category repository (implements ICategoryRepository)."""

from __future__ import annotations

from taskflow.infrastructure.supabase._rest_client import Row, SupabaseRESTClient
from taskflow.infrastructure.supabase.tables import TABLE_CATEGORIES


class SupabaseCategoryRepository:
    """Category rows in the ``categories`` table, always filtered by ``user_id``."""

    def __init__(self, client: SupabaseRESTClient) -> None:
        self._client = client

    def _owned(self, user_id: str, columns: str = "*"):
        return self._client.table(TABLE_CATEGORIES).select(columns).eq("user_id", user_id)

    async def list_for_owner(self, user_id: str) -> list[Row]:
        return await self._owned(user_id).order("created_at").execute()

    async def get(self, user_id: str, category_id: str) -> Row | None:
        return await self._owned(user_id).eq("id", category_id).maybe_single()

    async def find_by_name(
        self, user_id: str, name: str, exclude_id: str | None = None
    ) -> Row | None:
        q = self._owned(user_id, "id, name").eq("name", name)
        if exclude_id:
            q = q.neq("id", exclude_id)
        return await q.maybe_single()

    async def create(self, values: Row) -> Row:
        rows = await self._client.table(TABLE_CATEGORIES).insert(values)
        return rows[0]

    async def update(self, user_id: str, category_id: str, values: Row) -> Row | None:
        rows = await self._owned(user_id).eq("id", category_id).update(values)
        return rows[0] if rows else None

    async def delete(self, user_id: str, category_id: str) -> None:
        await self._owned(user_id, "id").eq("id", category_id).delete()
