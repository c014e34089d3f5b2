"""
Dependency injection for the identity bounded context.

Provides FastAPI dependency functions that wire infrastructure
adapters into domain services and use cases via constructor injection.
Domain services that hold no request state are built once per process.
These are the composition root for the identity context, and the
credential dependencies are reused by every authenticated router.
"""

from collections.abc import Callable
from datetime import timedelta
from functools import lru_cache
from typing import Optional

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.application.identity.get_personalized_feed import GetPersonalizedFeedUseCase
from app.application.identity.get_profile import GetProfileUseCase
from app.application.identity.login import LoginUseCase
from app.application.identity.verify_credential import VerifyCredentialUseCase
from app.core.config import settings
from app.domain.errors import InvalidCredentialError
from app.domain.identity.access_guard import AccessGuard
from app.domain.identity.entities import Credential, Permission
from app.domain.identity.feed_composer import FeedComposer
from app.domain.identity.identity_resolver import IdentityResolver
from app.domain.identity.tier_catalog import TierCatalog
from app.domain.identity.token_issuer import TokenIssuer
from app.infrastructure.identity.jwt_credential_signer import JwtCredentialSigner
from app.infrastructure.identity.static_holder_registry import (
    StaticHolderRegistryAdapter,
)

bearer_scheme = HTTPBearer(auto_error=False)


@lru_cache(maxsize=1)
def get_tier_catalog() -> TierCatalog:
    """Build the tier catalog once; it validates itself on construction."""
    return TierCatalog()


@lru_cache(maxsize=1)
def get_credential_signer() -> JwtCredentialSigner:
    """Build the JWT signer from settings."""
    return JwtCredentialSigner(settings.jwt_secret, settings.jwt_algorithm)


@lru_cache(maxsize=1)
def get_identity_resolver() -> IdentityResolver:
    """Build IdentityResolver over the configured holder registry."""
    return IdentityResolver(
        registry=StaticHolderRegistryAdapter(settings.holder_registry_overrides),
        catalog=get_tier_catalog(),
        timeout_seconds=settings.upstream_timeout_seconds,
    )


@lru_cache(maxsize=1)
def get_token_issuer() -> TokenIssuer:
    """Build TokenIssuer with the configured credential lifetime."""
    return TokenIssuer(
        catalog=get_tier_catalog(),
        signer=get_credential_signer(),
        ttl=timedelta(hours=settings.credential_ttl_hours),
    )


@lru_cache(maxsize=1)
def get_access_guard() -> AccessGuard:
    """Build AccessGuard over the configured signer."""
    return AccessGuard(signer=get_credential_signer())


def get_current_credential(
    request: Request,
    authorization: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    guard: AccessGuard = Depends(get_access_guard),
) -> Credential:
    """Verify the bearer credential and expose it to the rate limiter."""
    if authorization is None:
        raise InvalidCredentialError()
    credential = guard.verify(authorization.credentials)
    request.state.credential = credential
    return credential


def require_permission(permission: Permission) -> Callable[..., Credential]:
    """Build a dependency that rejects credentials lacking `permission`."""

    def dependency(
        credential: Credential = Depends(get_current_credential),
        guard: AccessGuard = Depends(get_access_guard),
    ) -> Credential:
        guard.require_permission(credential, permission)
        return credential

    return dependency


def get_login_use_case(
    resolver: IdentityResolver = Depends(get_identity_resolver),
    issuer: TokenIssuer = Depends(get_token_issuer),
    catalog: TierCatalog = Depends(get_tier_catalog),
) -> LoginUseCase:
    """Build LoginUseCase with its dependencies."""
    return LoginUseCase(resolver=resolver, issuer=issuer, catalog=catalog)


def get_verify_credential_use_case(
    guard: AccessGuard = Depends(get_access_guard),
    catalog: TierCatalog = Depends(get_tier_catalog),
) -> VerifyCredentialUseCase:
    """Build VerifyCredentialUseCase with its dependencies."""
    return VerifyCredentialUseCase(guard=guard, catalog=catalog)


def get_profile_use_case(
    resolver: IdentityResolver = Depends(get_identity_resolver),
    catalog: TierCatalog = Depends(get_tier_catalog),
) -> GetProfileUseCase:
    """Build GetProfileUseCase with its dependencies."""
    return GetProfileUseCase(resolver=resolver, catalog=catalog)


def get_personalized_feed_use_case(
    catalog: TierCatalog = Depends(get_tier_catalog),
) -> GetPersonalizedFeedUseCase:
    """Build GetPersonalizedFeedUseCase with its dependencies."""
    return GetPersonalizedFeedUseCase(composer=FeedComposer(catalog))
