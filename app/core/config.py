"""
Application configuration.

Loads gateway settings (credential signing, upstream endpoints, cache
and rate-limit defaults) from environment variables and a .env file.
"""

from typing import Any, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment.

    Attributes:
        project_name: Display name for the API.
        version: Current API version string.
        debug: Enable debug mode. Must be False in production.
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR).
        rate_limit_default: Rate limit for unauthenticated endpoints.
        jwt_secret: HMAC secret for signing credentials. Required.
        jwt_algorithm: JWT signing algorithm.
        credential_ttl_hours: Lifetime of an issued credential.
        upstream_timeout_seconds: Timeout for holder registry and
            market-data calls.
        market_data_base_url: Injective LCD REST endpoint.
        market_cache_ttl_seconds: Lifetime of cached market data.
        market_cache_max_entries: Upper bound on cached market-data
            entries.
        holder_registry_overrides: Extra holders, as a JSON object of
            wallet -> {"tier": ..., "points": ...}.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    project_name: str = "Blade Dance API"
    version: str = "1.0.0"
    debug: bool = False
    log_level: str = "INFO"
    rate_limit_default: str = "60/minute"

    jwt_secret: Optional[str] = None
    jwt_algorithm: str = "HS256"
    credential_ttl_hours: int = 24

    upstream_timeout_seconds: float = 5.0
    market_data_base_url: str = "https://sentry.lcd.injective.network"
    market_cache_ttl_seconds: int = 300
    market_cache_max_entries: int = 1024

    holder_registry_overrides: dict[str, dict[str, Any]] = {}


settings = Settings()
