"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. Required fields (SUPABASE_URL, SUPABASE_SERVICE_KEY) are
validated at load time.
"""

from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import SecretStr, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    All settings are optional with defaults except the Supabase project URL
    and service key, validated in validate_required.
    """

    # App
    app_name: str = "TaskFlow"
    app_version: str = "1.0.0"
    debug: bool = False
    # "production" hides upstream and unhandled error messages from clients.
    environment: str = "development"

    # Supabase (PostgREST rows + RPC, GoTrue identity)
    supabase_url: str = ""
    supabase_service_key: SecretStr = SecretStr("")
    supabase_schema: str = "public"
    supabase_timeout_seconds: float = 30.0

    # CORS
    allowed_origins: str = "http://localhost:5173"

    # Rate limiting (global, per client address)
    rate_limit_enabled: bool = True
    rate_limit_window_seconds: int = 15 * 60
    rate_limit_max_requests: int = 100

    # Date windows ("today") are computed in this IANA timezone.
    timezone: str = "UTC"

    # Request / middleware
    request_id_header: str = "X-Request-ID"

    # OpenTelemetry
    telemetry_enabled: bool = False
    telemetry_exporter: str = "console"
    telemetry_otlp_endpoint: str | None = None
    telemetry_sample_rate: float = 1.0

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @property
    def is_production(self) -> bool:
        """True when running with ENVIRONMENT=production."""
        return self.environment.strip().lower() == "production"

    @property
    def rate_limit(self) -> str:
        """Limit string for slowapi, e.g. '100 per 900 seconds'."""
        return f"{self.rate_limit_max_requests} per {self.rate_limit_window_seconds} seconds"

    @model_validator(mode="after")
    def validate_required(self) -> "Settings":
        """Validate Supabase credentials and timezone."""
        if not self.supabase_url:
            raise ValueError(
                "SUPABASE_URL is required. Set it to the project URL "
                "(e.g. https://<project>.supabase.co) in environment or .env file."
            )
        if not self.supabase_service_key.get_secret_value():
            raise ValueError(
                "SUPABASE_SERVICE_KEY is required (service role key). "
                "Set in environment or .env file."
            )
        try:
            ZoneInfo(self.timezone)
        except (ZoneInfoNotFoundError, ValueError) as e:
            raise ValueError(f"Unknown TIMEZONE: {self.timezone!r}") from e
        if self.rate_limit_window_seconds < 1 or self.rate_limit_max_requests < 1:
            raise ValueError("Rate limit window and max requests must be positive")
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.
    """
    return Settings()
