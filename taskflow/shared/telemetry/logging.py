"""Logging configuration for the application."""

import logging
import sys

from taskflow.core.config import get_settings
from taskflow.shared.context import get_request_context

LOG_FORMAT = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "[request_id=%(request_id)s user_id=%(user_id)s] %(message)s"
)


class RequestContextFilter(logging.Filter):
    """Stamp request_id and user_id from contextvars onto every record."""

    def filter(self, record: logging.LogRecord) -> bool:
        ctx = get_request_context()
        record.request_id = ctx.request_id or "-"
        record.user_id = ctx.user_id or "-"
        return True


def setup_logging() -> None:
    """Configure application-wide logging.

    Level is DEBUG when settings.debug is True, otherwise INFO.
    Output goes to stdout. Safe to call more than once.
    """
    settings = get_settings()
    log_level = logging.DEBUG if settings.debug else logging.INFO
    handler = logging.StreamHandler(sys.stdout)
    handler.addFilter(RequestContextFilter())
    logging.basicConfig(
        level=log_level,
        format=LOG_FORMAT,
        handlers=[handler],
        force=True,
    )
    # httpx logs every outbound request at INFO; keep it for debug only.
    logging.getLogger("httpx").setLevel(log_level if settings.debug else logging.WARNING)
