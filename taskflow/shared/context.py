"""Request context management using contextvars.

Provides async-safe storage for request-scoped data (request id and the
authenticated user). Read by the logging filter so every log line emitted
while handling a request carries both.

Usage:
    set_request_id("3f2c...")
    set_current_user(user_id="8a1e...", email="ana@example.com")
    user_id = get_current_user_id()
"""

from contextvars import ContextVar
from dataclasses import dataclass

_request_id: ContextVar[str | None] = ContextVar("request_id", default=None)
_current_user_id: ContextVar[str | None] = ContextVar("current_user_id", default=None)
_current_user_email: ContextVar[str | None] = ContextVar(
    "current_user_email", default=None
)


@dataclass(frozen=True)
class RequestContext:
    """Immutable snapshot of the current request context."""

    request_id: str | None
    user_id: str | None
    email: str | None = None


def set_request_id(request_id: str | None) -> None:
    """Set the id of the request being handled in this task."""
    _request_id.set(request_id)


def get_request_id() -> str | None:
    """Return the current request id, or None outside a request."""
    return _request_id.get()


def set_current_user(user_id: str, email: str | None = None) -> None:
    """Set the authenticated user for this request.

    Call from the auth dependency after the token is verified.

    Raises:
        ValueError: If user_id is empty.
    """
    if not user_id:
        raise ValueError("user_id is required")
    _current_user_id.set(user_id)
    _current_user_email.set(email)


def clear_current_user() -> None:
    """Clear the current user context."""
    _current_user_id.set(None)
    _current_user_email.set(None)


def get_current_user_id() -> str | None:
    """Return the current user ID, or None if not authenticated."""
    return _current_user_id.get()


def get_request_context() -> RequestContext:
    """Return a snapshot of the current request context."""
    return RequestContext(
        request_id=_request_id.get(),
        user_id=_current_user_id.get(),
        email=_current_user_email.get(),
    )
