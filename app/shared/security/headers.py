"""
Secure HTTP headers middleware.

Adds security-related headers to every response, and forbids caching
of anything served under the auth routes, since those responses carry
credentials or identity details.

No business logic. Pure cross-cutting concern.
"""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

SECURE_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Referrer-Policy": "no-referrer",
    "Content-Security-Policy": "default-src 'none'; frame-ancestors 'none'",
    "Cross-Origin-Resource-Policy": "same-origin",
}
HSTS_HEADER = ("Strict-Transport-Security", "max-age=31536000; includeSubDomains")
NO_STORE_PREFIXES = ("/api/v1/auth",)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Middleware that adds secure HTTP headers to every response.

    HSTS is only sent when `enable_hsts` is set, which is the case
    outside debug mode.
    """

    def __init__(self, app: ASGIApp, enable_hsts: bool = True) -> None:
        super().__init__(app)
        self._enable_hsts = enable_hsts

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        """Process request and add security headers to response."""
        response = await call_next(request)
        for header_name, header_value in SECURE_HEADERS.items():
            response.headers[header_name] = header_value
        if self._enable_hsts:
            response.headers[HSTS_HEADER[0]] = HSTS_HEADER[1]
        if request.url.path.startswith(NO_STORE_PREFIXES):
            response.headers["Cache-Control"] = "no-store"
        return response
