"""
Application entry point.

Creates the FastAPI application and wires together:
- Routers (one per bounded context)
- Error handlers (centralized domain-to-HTTP mapping)
- Security middleware (headers, rate limiting)
- Logging configuration
- Startup checks (signing secret, tier catalog)

No business logic belongs here.
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from slowapi.errors import RateLimitExceeded

from app.core.config import settings
from app.domain.errors import ConfigurationError
from app.interfaces.health import router as health_router
from app.interfaces.identity.dependencies import get_tier_catalog
from app.interfaces.identity.router import router as identity_router
from app.interfaces.markets.router import router as markets_router
from app.interfaces.social.router import router as social_router
from app.shared.errors.handlers import register_error_handlers
from app.shared.logging import configure_logging
from app.shared.security.headers import SecurityHeadersMiddleware
from app.shared.security.rate_limiting import limiter, rate_limit_exceeded_handler

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: refuse to start with a broken configuration."""
    if not settings.jwt_secret:
        logger.critical("JWT_SECRET is not set; refusing to start")
        raise ConfigurationError("JWT_SECRET is not set")

    catalog = get_tier_catalog()
    logger.info("Tier catalog loaded: %s", ", ".join(d.tier.value for d in catalog.all_tiers()))

    yield


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Registers routers, error handlers, and security middleware.
    This is the composition root of the application.

    Returns:
        A fully configured FastAPI application instance.
    """
    configure_logging(level=settings.log_level)

    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        lifespan=lifespan,
    )

    # --- Rate Limiting ---
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    # --- Security Middleware ---
    app.add_middleware(SecurityHeadersMiddleware, enable_hsts=not settings.debug)

    # --- Error Handlers ---
    register_error_handlers(app)

    # --- Routers ---
    app.include_router(health_router, prefix="/api/v1")
    app.include_router(identity_router, prefix="/api/v1")
    app.include_router(social_router, prefix="/api/v1")
    app.include_router(markets_router, prefix="/api/v1")

    return app


app = create_app()
