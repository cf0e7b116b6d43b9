"""Health check API schemas."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response for GET /health (liveness)."""

    success: bool = True
    message: str = Field(default="TaskFlow API is running", description="Service status")
    timestamp: str = Field(..., description="Server time (UTC, ISO 8601)")
    environment: str
    version: str


class RootResponse(BaseModel):
    """Response for GET / (banner)."""

    success: bool = True
    message: str
    version: str
    documentation: str = "/api/health"
