"""Centralized exception handlers for the FastAPI app.

Register with register_exception_handlers(app). Maps domain and framework
exceptions to the failure envelope ``{"success": false, "error", "details"?}``.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from taskflow.core.config import get_settings
from taskflow.domain.exceptions import TaskflowException, UpstreamException
from taskflow.schemas.common import ErrorResponse
from taskflow.shared.telemetry.tracing import get_trace_id

logger = logging.getLogger(__name__)

# Map domain error_code to HTTP status when applicable
_ERROR_CODE_STATUS: dict[str, int] = {
    "AUTHENTICATION_ERROR": 401,
    "VALIDATION_ERROR": 400,
    "RESOURCE_NOT_FOUND": 404,
    "CONFLICT": 400,
    "UPSTREAM_ERROR": 500,
}

INTERNAL_ERROR_MESSAGE = "Internal server error"
VALIDATION_ERROR_MESSAGE = "Invalid request data"
RATE_LIMIT_MESSAGE = "Too many requests from this IP, please try again later."
_REQUEST_PARTS = ("body", "query", "path", "header", "cookie")


def error_body(message: str, details: list[dict[str, str]] | None = None) -> dict[str, Any]:
    """Failure envelope; ``details`` is left out when empty."""
    return ErrorResponse(error=message, details=details or None).model_dump(exclude_none=True)


def _taskflow_exception_handler(request: Request, exc: TaskflowException) -> JSONResponse:
    """Return the failure envelope with the status mapped from error_code."""
    status = _ERROR_CODE_STATUS.get(exc.error_code, 400)
    message = exc.message
    if isinstance(exc, UpstreamException):
        logger.error(
            "Upstream failure on %s %s: %s (status=%s)",
            request.method,
            request.url.path,
            exc.message,
            exc.status_code,
        )
        if get_settings().is_production:
            message = INTERNAL_ERROR_MESSAGE
    elif status >= 400:
        logger.info("%s on %s %s: %s", exc.error_code, request.method, request.url.path, message)
    return JSONResponse(status_code=status, content=error_body(message))


def _field_name(loc: tuple[Any, ...]) -> str:
    parts = [str(p) for p in loc]
    if parts and parts[0] in _REQUEST_PARTS:
        parts = parts[1:] or parts
    return ".".join(parts)


def field_errors(exc: RequestValidationError) -> list[dict[str, str]]:
    """Flatten pydantic errors into ``[{"field": "title", "message": "..."}]``."""
    return [
        {"field": _field_name(tuple(err.get("loc", ()))), "message": err.get("msg", "")}
        for err in exc.errors()
    ]


def _validation_exception_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    """Return 400 with one entry per invalid field."""
    return JSONResponse(
        status_code=400,
        content=error_body(VALIDATION_ERROR_MESSAGE, field_errors(exc)),
    )


def _http_exception_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    """Return the envelope for framework HTTP errors (unknown route, bad method)."""
    if exc.status_code == 404:
        message = f"Route not found: {request.method} {request.url.path}"
    else:
        message = str(exc.detail)
    return JSONResponse(
        status_code=exc.status_code,
        content=error_body(message),
        headers=getattr(exc, "headers", None),
    )


def _rate_limit_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    """Return 429. Sync: SlowAPIMiddleware calls it without awaiting."""
    logger.warning("Rate limit exceeded on %s: %s", request.url.path, exc.detail)
    return JSONResponse(status_code=429, content=error_body(RATE_LIMIT_MESSAGE))


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return 500; include the message only outside production."""
    logger.exception(
        "Unhandled exception on %s %s (trace_id=%s): %s",
        request.method,
        request.url.path,
        get_trace_id() or "-",
        exc,
    )
    settings = get_settings()
    message = INTERNAL_ERROR_MESSAGE if settings.is_production else str(exc) or INTERNAL_ERROR_MESSAGE
    return JSONResponse(status_code=500, content=error_body(message))


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app.

    Call once after creating the app. Handlers: TaskflowException (and
    subclasses), RequestValidationError, StarletteHTTPException,
    RateLimitExceeded, generic Exception.
    """
    app.add_exception_handler(TaskflowException, _taskflow_exception_handler)
    app.add_exception_handler(RequestValidationError, _validation_exception_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(RateLimitExceeded, _rate_limit_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
