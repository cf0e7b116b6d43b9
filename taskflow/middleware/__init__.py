"""ASGI middleware: request id / access log and security headers."""

from taskflow.middleware.request_id import RequestIDMiddleware
from taskflow.middleware.security_headers import SecurityHeadersMiddleware

__all__ = ["RequestIDMiddleware", "SecurityHeadersMiddleware"]
