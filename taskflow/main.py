"""FastAPI application entry point.

Wiring only: logging, telemetry, lifespan, exception handlers, middleware,
routers. No business logic here. See taskflow.core.lifespan and
taskflow.core.exception_handlers.

Settings are loaded inside create_app() so that tests can set env (and optionally
clear get_settings cache) before importing or calling create_app().
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from slowapi.middleware import SlowAPIMiddleware

from taskflow.api.v1 import api_router
from taskflow.core.config import get_settings
from taskflow.core.exception_handlers import register_exception_handlers
from taskflow.core.lifespan import create_lifespan
from taskflow.core.limiter import limiter
from taskflow.middleware import RequestIDMiddleware, SecurityHeadersMiddleware
from taskflow.schemas.health import RootResponse
from taskflow.shared.telemetry import setup_logging
from taskflow.shared.telemetry.telemetry import TelemetryConfig, set_telemetry


def create_app() -> FastAPI:
    """Build and return the FastAPI application. Settings are resolved here (deferred from import)."""
    settings = get_settings()
    setup_logging()

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        debug=settings.debug,
        lifespan=create_lifespan,
    )

    app.state.limiter = limiter
    limiter.enabled = settings.rate_limit_enabled

    register_exception_handlers(app)

    # Middleware: last added = outermost. Order: request ID → security → CORS → gzip → rate limit.
    app.add_middleware(SlowAPIMiddleware)
    app.add_middleware(GZipMiddleware, minimum_size=1000)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[o.strip() for o in settings.allowed_origins.split(",") if o.strip()],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(SecurityHeadersMiddleware, hsts=settings.is_production)
    app.add_middleware(RequestIDMiddleware, header_name=settings.request_id_header)

    if settings.telemetry_enabled:
        telemetry = TelemetryConfig.from_settings(settings)
        telemetry.setup_telemetry(
            exporter_type=settings.telemetry_exporter,
            otlp_endpoint=settings.telemetry_otlp_endpoint,
            sample_rate=settings.telemetry_sample_rate,
        )
        set_telemetry(telemetry)
        telemetry.instrument_fastapi(app)

    app.include_router(api_router, prefix="/api")

    @app.get("/", response_model=RootResponse)
    def root() -> RootResponse:
        """Banner pointing at the health endpoint."""
        return RootResponse(
            message=f"Welcome to {settings.app_name} API",
            version=settings.app_version,
        )

    return app


app = create_app()
