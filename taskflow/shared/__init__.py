"""Shared utilities: request context, telemetry, and cross-cutting helpers.

Used by domain, application, and infrastructure. No business logic.
"""

from taskflow.shared.context import (
    RequestContext,
    clear_current_user,
    get_current_user_id,
    get_request_context,
    get_request_id,
    set_current_user,
    set_request_id,
)
from taskflow.shared.utils import ensure_utc, parse_timestamp, to_iso, utc_now

__all__ = [
    "RequestContext",
    "set_request_id",
    "get_request_id",
    "set_current_user",
    "clear_current_user",
    "get_current_user_id",
    "get_request_context",
    "utc_now",
    "ensure_utc",
    "parse_timestamp",
    "to_iso",
]
