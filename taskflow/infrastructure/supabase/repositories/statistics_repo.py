"""Server-side statistics aggregate (implements IStatisticsRepository)."""

from __future__ import annotations

from typing import Any

from taskflow.infrastructure.supabase._rest_client import SupabaseRESTClient
from taskflow.infrastructure.supabase.tables import RPC_TASK_STATISTICS


class SupabaseStatisticsRepository:
    """Calls ``get_task_statistics(user_uuid, time_period)``."""

    def __init__(self, client: SupabaseRESTClient) -> None:
        self._client = client

    async def task_statistics(self, user_id: str, period: str) -> Any:
        return await self._client.rpc(
            RPC_TASK_STATISTICS, {"user_uuid": user_id, "time_period": period}
        )
