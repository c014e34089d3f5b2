"""
Rate limiting configuration and setup.

Uses slowapi to enforce per-caller rate limits.
Authenticated callers are keyed by wallet and limited by the
requests-per-minute snapshot embedded in their credential, so the limit
follows the identity tier. Anonymous callers are keyed by remote address
and get the default limit. Storage is in-memory, per process.
"""

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import JSONResponse

from app.core.config import settings

ANONYMOUS = "anonymous"
_KEY_SEPARATOR = "|"


def credential_rate_key(request: Request) -> str:
    """Build the rate-limit key for a request.

    The credential is placed on `request.state` by the authentication
    dependency, which FastAPI resolves before the limit is checked.
    """
    credential = getattr(request.state, "credential", None)
    if credential is None:
        return f"{get_remote_address(request)}{_KEY_SEPARATOR}{ANONYMOUS}"
    return (
        f"{credential.subject}{_KEY_SEPARATOR}"
        f"{credential.limits.requests_per_minute}"
    )


def credential_rate_limit(key: str) -> str:
    """Return the slowapi limit string for a key built by credential_rate_key."""
    _, _, quota = key.rpartition(_KEY_SEPARATOR)
    if quota == ANONYMOUS or not quota.isdigit():
        return settings.rate_limit_default
    return f"{quota}/minute"


limiter = Limiter(key_func=credential_rate_key, default_limits=[settings.rate_limit_default])


async def rate_limit_exceeded_handler(
    _request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Handle rate limit exceeded errors with a clean JSON response.

    Args:
        _request: The incoming HTTP request.
        exc: The rate limit exceeded exception.

    Returns:
        A 429 JSON response with a clear error message.
    """
    return JSONResponse(
        status_code=429,
        content={"error": "Rate limit exceeded", "detail": str(exc.detail)},
    )
