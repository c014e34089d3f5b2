"""
Data Transfer Objects for the identity application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Optional


@dataclass(frozen=True)
class LoginCommand:
    """Input DTO for wallet login.

    Attributes:
        wallet_address: Injective wallet address (inj1...).
    """

    wallet_address: Optional[str]


@dataclass(frozen=True)
class IdentitySummary:
    """Output DTO describing an identity and what its tier grants.

    Attributes:
        wallet_address: Injective wallet address.
        is_holder: Whether the wallet holds an N1NJ4 NFT.
        tier: Tier value (standard/white/purple/orange).
        tier_name: Human readable tier name.
        points: Community points reported by the holder registry.
        permissions: Granted capability tags, sorted.
        requests_per_minute: Rate limit for the tier.
        concurrent_connections: Connection limit for the tier.
    """

    wallet_address: str
    is_holder: bool
    tier: str
    tier_name: str
    points: int
    permissions: tuple[str, ...]
    requests_per_minute: int
    concurrent_connections: int


@dataclass(frozen=True)
class LoginResult:
    """Output DTO for a successful login."""

    token: str
    expires_at: datetime
    identity: IdentitySummary


@dataclass(frozen=True)
class VerifyCredentialQuery:
    """Input DTO for verifying a raw credential token."""

    token: str


@dataclass(frozen=True)
class GetPersonalizedFeedQuery:
    """Input DTO for a personalized feed.

    Attributes:
        feed_type: "markets" or "analytics"; anything else yields no data.
    """

    feed_type: str


@dataclass(frozen=True)
class PersonalizedFeedResult:
    """Output DTO for a personalized feed."""

    feed_type: str
    identity_tier: str
    tier_name: str
    data: list[dict[str, Any]]
