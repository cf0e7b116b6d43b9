"""Security headers middleware.

Hardening headers for a JSON API. HSTS is added only when ``hsts=True``
(production).
Raw ASGI, no BaseHTTPMiddleware.
"""

from typing import Callable

API_HEADERS = {
    "Content-Security-Policy": "default-src 'none'; frame-ancestors 'none'",
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "SAMEORIGIN",
    "X-DNS-Prefetch-Control": "off",
    "X-Download-Options": "noopen",
    "X-Permitted-Cross-Domain-Policies": "none",
    "Referrer-Policy": "no-referrer",
    "Cross-Origin-Opener-Policy": "same-origin",
    "Cross-Origin-Resource-Policy": "same-origin",
}
HSTS_HEADER = ("Strict-Transport-Security", "max-age=15552000; includeSubDomains")


def _encoded(headers: dict[str, str], hsts: bool) -> list[tuple[bytes, bytes]]:
    items = list(headers.items())
    if hsts:
        items.append(HSTS_HEADER)
    return [(name.lower().encode("latin-1"), value.encode("latin-1")) for name, value in items]


def SecurityHeadersMiddleware(
    app: Callable, headers: dict[str, str] | None = None, hsts: bool = False
) -> Callable:
    """Add security headers to every HTTP response; headers the route already set win."""
    extra = _encoded(API_HEADERS if headers is None else headers, hsts)

    async def asgi_app(scope: dict, receive: Callable, send: Callable) -> None:
        if scope["type"] != "http":
            await app(scope, receive, send)
            return

        async def send_with_headers(message: dict) -> None:
            if message["type"] == "http.response.start":
                present = {name.lower() for name, _ in message.get("headers", [])}
                message["headers"] = list(message.get("headers", [])) + [
                    (name, value) for name, value in extra if name not in present
                ]
            await send(message)

        await app(scope, receive, send_with_headers)

    return asgi_app
