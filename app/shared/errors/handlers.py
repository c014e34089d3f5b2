"""
Centralized error handlers for FastAPI.

Maps domain errors to HTTP responses.
No stack traces or internal details are exposed to clients outside
debug mode. All error responses use the ErrorResponse schema.
"""

import logging

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.core.config import settings
from app.domain.errors import (
    ConfigurationError,
    ForbiddenError,
    GatewayDomainError,
    InvalidCredentialError,
    NotFoundError,
    UpstreamUnavailableError,
    ValidationError,
)

logger = logging.getLogger(__name__)

HTTP_400 = 400
HTTP_401 = 401
HTTP_403 = 403
HTTP_404 = 404
HTTP_500 = 500
HTTP_503 = 503


def _error_response(
    status_code: int,
    error: str,
    detail: str | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Build a consistent JSON error response."""
    body: dict[str, str | None] = {"error": error}
    if detail:
        body["detail"] = detail
    return JSONResponse(status_code=status_code, content=body, headers=headers)


def register_error_handlers(app: FastAPI) -> None:
    """Register all domain error handlers on the FastAPI application.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(ValidationError)
    async def handle_validation(_request: Request, exc: ValidationError) -> JSONResponse:
        """Handle malformed caller input."""
        logger.warning("Validation failed: field=%s", exc.field)
        return _error_response(HTTP_400, "Validation error", exc.message)

    @app.exception_handler(InvalidCredentialError)
    async def handle_invalid_credential(
        _request: Request, exc: InvalidCredentialError
    ) -> JSONResponse:
        """Handle expired, malformed or badly signed credentials."""
        return _error_response(
            HTTP_401, exc.message, headers={"WWW-Authenticate": "Bearer"}
        )

    @app.exception_handler(ForbiddenError)
    async def handle_forbidden(_request: Request, exc: ForbiddenError) -> JSONResponse:
        """Handle valid identities without the required permission."""
        logger.warning("Forbidden: %s", exc.permission)
        return _error_response(HTTP_403, "Forbidden", exc.message)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(_request: Request, exc: NotFoundError) -> JSONResponse:
        """Handle references to missing entities."""
        logger.warning("%s not found", exc.entity)
        return _error_response(HTTP_404, f"{exc.entity} not found")

    @app.exception_handler(UpstreamUnavailableError)
    async def handle_upstream(
        _request: Request, exc: UpstreamUnavailableError
    ) -> JSONResponse:
        """Handle failing or slow external collaborators."""
        logger.error("Upstream unavailable: %s (%s)", exc.service, exc.reason)
        return _error_response(
            HTTP_503, "Upstream service unavailable", headers={"Retry-After": "5"}
        )

    @app.exception_handler(ConfigurationError)
    async def handle_configuration(
        _request: Request, exc: ConfigurationError
    ) -> JSONResponse:
        """Handle fatal configuration problems. Logged loudly, never hidden."""
        logger.critical("Configuration error: %s", exc.reason)
        return _error_response(HTTP_500, "Server configuration error")

    @app.exception_handler(GatewayDomainError)
    async def handle_gateway_domain(
        _request: Request, exc: GatewayDomainError
    ) -> JSONResponse:
        """Catch-all for unhandled gateway domain errors."""
        logger.error("Unhandled domain error: %s", exc.message)
        return _error_response(HTTP_500, "Internal server error")

    @app.exception_handler(Exception)
    async def handle_unexpected(_request: Request, exc: Exception) -> JSONResponse:
        """Catch-all for unexpected errors. Never exposes internals in production."""
        logger.exception("Unexpected error: %s", type(exc).__name__)
        detail = f"{type(exc).__name__}: {exc}" if settings.debug else None
        return _error_response(HTTP_500, "Internal server error", detail)
