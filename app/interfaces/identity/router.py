"""
FastAPI router for the identity bounded context.

All routes delegate to use cases. No business logic here.
Input validation is handled by Pydantic schemas and use cases.
Error mapping is handled by centralized error handlers.
"""

from fastapi import APIRouter, Depends, Path, Request

from app.application.identity.dtos import (
    GetPersonalizedFeedQuery,
    LoginCommand,
    VerifyCredentialQuery,
)
from app.application.identity.get_personalized_feed import GetPersonalizedFeedUseCase
from app.application.identity.get_profile import GetProfileUseCase
from app.application.identity.login import LoginUseCase
from app.application.identity.verify_credential import VerifyCredentialUseCase
from app.domain.identity.entities import Credential
from app.interfaces.identity.dependencies import (
    get_current_credential,
    get_login_use_case,
    get_personalized_feed_use_case,
    get_profile_use_case,
    get_verify_credential_use_case,
)
from app.interfaces.identity.schemas import (
    IdentityResponse,
    IdentitySchema,
    LoginRequest,
    LoginResponse,
    PersonalizedFeedResponse,
    VerifyCredentialRequest,
)
from app.interfaces.schemas import ErrorResponse
from app.shared.security.rate_limiting import credential_rate_limit, limiter

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post(
    "/login",
    response_model=LoginResponse,
    responses={400: {"model": ErrorResponse}, 503: {"model": ErrorResponse}},
    summary="Log in with a wallet",
    description="Resolve the wallet's N1NJ4 tier and issue a signed credential.",
)
@limiter.limit(credential_rate_limit)
def login(
    request: Request,
    body: LoginRequest,
    use_case: LoginUseCase = Depends(get_login_use_case),
) -> LoginResponse:
    """Issue a credential for a wallet."""
    result = use_case.execute(LoginCommand(wallet_address=body.wallet_address))
    return LoginResponse(
        token=result.token,
        expires_at=result.expires_at,
        user=IdentitySchema.from_summary(result.identity),
    )


@router.post(
    "/verify",
    response_model=IdentityResponse,
    responses={401: {"model": ErrorResponse}},
    summary="Verify a credential",
    description="Check a credential passed in the body and describe its identity.",
)
@limiter.limit(credential_rate_limit)
def verify_credential(
    request: Request,
    body: VerifyCredentialRequest,
    use_case: VerifyCredentialUseCase = Depends(get_verify_credential_use_case),
) -> IdentityResponse:
    """Verify a raw credential token."""
    summary = use_case.execute(VerifyCredentialQuery(token=body.token))
    return IdentityResponse(user=IdentitySchema.from_summary(summary))


@router.get(
    "/profile",
    response_model=IdentityResponse,
    responses={401: {"model": ErrorResponse}, 503: {"model": ErrorResponse}},
    summary="Current profile",
    description="Re-resolve the caller's tier and points from the holder registry.",
)
@limiter.limit(credential_rate_limit)
def get_profile(
    request: Request,
    credential: Credential = Depends(get_current_credential),
    use_case: GetProfileUseCase = Depends(get_profile_use_case),
) -> IdentityResponse:
    """Return the caller's current identity."""
    summary = use_case.execute(credential)
    return IdentityResponse(user=IdentitySchema.from_summary(summary))


@router.get(
    "/feed/{feed_type}",
    response_model=PersonalizedFeedResponse,
    responses={401: {"model": ErrorResponse}},
    summary="Personalized feed",
    description="Markets or analytics feed shaped by the caller's tier.",
)
@limiter.limit(credential_rate_limit)
def get_personalized_feed(
    request: Request,
    feed_type: str = Path(..., min_length=1, max_length=32),
    credential: Credential = Depends(get_current_credential),
    use_case: GetPersonalizedFeedUseCase = Depends(get_personalized_feed_use_case),
) -> PersonalizedFeedResponse:
    """Return the feed matching the caller's tier."""
    result = use_case.execute(credential, GetPersonalizedFeedQuery(feed_type=feed_type))
    return PersonalizedFeedResponse(
        feed_type=result.feed_type,
        identity_tier=result.identity_tier,
        tier_name=result.tier_name,
        data=result.data,
    )
