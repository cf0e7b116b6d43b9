"""Application lifespan: startup and shutdown.

Single place for all startup/shutdown logic. Builds the shared HTTP client
and the datastore and identity clients, and stores them on ``app.state``
for the dependency factories. No business logic here.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx
from fastapi import FastAPI

from taskflow.core.config import get_settings
from taskflow.infrastructure.supabase import SupabaseAuthClient, SupabaseRESTClient
from taskflow.shared.telemetry.telemetry import get_telemetry, set_telemetry

logger = logging.getLogger(__name__)


@asynccontextmanager
async def create_lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Run startup then yield; on exit run shutdown.

    Startup: shared HTTP client, datastore client, identity client.
    Shutdown: HTTP client close, telemetry flush (set up in create_app).
    """
    settings = get_settings()

    # ---- Startup ----
    http_client = httpx.AsyncClient(timeout=settings.supabase_timeout_seconds)
    service_key = settings.supabase_service_key.get_secret_value()
    app.state.http_client = http_client
    app.state.record_store = SupabaseRESTClient(
        settings.supabase_url,
        service_key,
        schema=settings.supabase_schema,
        http_client=http_client,
    )
    app.state.identity_provider = SupabaseAuthClient(
        settings.supabase_url, service_key, http_client=http_client
    )
    logger.info(
        "Datastore clients ready: url=%s environment=%s",
        settings.supabase_url,
        settings.environment,
    )

    yield

    # ---- Shutdown ----
    await http_client.aclose()
    app.state.http_client = None
    logger.info("HTTP client closed")

    telemetry_instance = get_telemetry()
    if telemetry_instance is not None:
        telemetry_instance.shutdown()
        set_telemetry(None)
