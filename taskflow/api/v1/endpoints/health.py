"""Health check endpoint. No auth and no datastore call; used for liveness probes."""

from fastapi import APIRouter

from taskflow.core.config import get_settings
from taskflow.schemas.health import HealthResponse
from taskflow.shared.utils.datetime import to_iso, utc_now

router = APIRouter()


@router.get("", response_model=HealthResponse)
def health_check() -> HealthResponse:
    """Return ok status with server time."""
    settings = get_settings()
    return HealthResponse(
        timestamp=to_iso(utc_now()),
        environment=settings.environment,
        version=settings.app_version,
    )
