"""
Pydantic schemas for identity API request/response validation.

Wallet address presence and format are checked by the login use case,
so a missing or malformed address is reported as a 400 like every
other domain validation error.
No business logic belongs here.
"""

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, Field

from app.application.identity.dtos import IdentitySummary


class LoginRequest(BaseModel):
    """Request schema for wallet login.

    Attributes:
        wallet_address: Injective wallet address (inj1...).
    """

    wallet_address: Optional[str] = Field(
        None, max_length=128, description="Injective wallet address (inj1...)"
    )


class VerifyCredentialRequest(BaseModel):
    """Request schema for verifying a credential passed in the body."""

    token: str = Field(..., min_length=1, max_length=4096)


class TierLimitsSchema(BaseModel):
    """Rate limits granted by a tier."""

    requests_per_minute: int
    concurrent_connections: int


class IdentitySchema(BaseModel):
    """An identity and what its tier grants."""

    wallet_address: str
    is_holder: bool
    tier: str
    tier_name: str
    points: int
    permissions: list[str]
    limits: TierLimitsSchema

    @classmethod
    def from_summary(cls, summary: IdentitySummary) -> "IdentitySchema":
        return cls(
            wallet_address=summary.wallet_address,
            is_holder=summary.is_holder,
            tier=summary.tier,
            tier_name=summary.tier_name,
            points=summary.points,
            permissions=list(summary.permissions),
            limits=TierLimitsSchema(
                requests_per_minute=summary.requests_per_minute,
                concurrent_connections=summary.concurrent_connections,
            ),
        )


class LoginResponse(BaseModel):
    """Response schema for a successful login."""

    success: bool = True
    token: str
    token_type: str = "bearer"
    expires_at: datetime
    user: IdentitySchema


class IdentityResponse(BaseModel):
    """Response schema for credential verification and profile lookups."""

    valid: bool = True
    user: IdentitySchema


class PersonalizedFeedResponse(BaseModel):
    """Response schema for a personalized feed."""

    feed_type: str
    identity_tier: str
    tier_name: str
    data: list[dict[str, Any]]
