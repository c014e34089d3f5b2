"""
Domain entities for the identity bounded context.

Entities represent resolved identities, tier definitions and credentials.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Any


class Tier(Enum):
    """Identity tier derived from N1NJ4 NFT holdership, lowest first."""

    STANDARD = "standard"
    WHITE = "white"
    PURPLE = "purple"
    ORANGE = "orange"


class Permission(Enum):
    """Capability tags granted by a tier."""

    READ_MARKETS = "read:markets"
    READ_ANALYTICS_BASIC = "read:analytics_basic"
    READ_ANALYTICS_ADVANCED = "read:analytics_advanced"
    READ_UTILITY = "read:utility"
    PERSONALIZED_FEEDS = "access:personalized_feeds"
    SOCIAL_TRADING = "access:social_trading"
    EXCLUSIVE_DATA = "access:exclusive_data"
    PRIORITY_SUPPORT = "access:priority_support"


@dataclass(frozen=True)
class TierLimits:
    """Rate limits attached to a tier."""

    requests_per_minute: int
    concurrent_connections: int


@dataclass(frozen=True)
class TierDefinition:
    """Static description of what a tier grants."""

    tier: Tier
    display_name: str
    description: str
    permissions: frozenset[Permission]
    limits: TierLimits


@dataclass(frozen=True)
class HolderRecord:
    """Raw holder registry answer for a wallet.

    The tier is kept as the registry's string so that the resolver can
    reject values it does not know.
    """

    tier: str
    points: int


@dataclass(frozen=True)
class IdentityRecord:
    """A wallet's identity as resolved at a point in time."""

    wallet_address: str
    is_holder: bool
    tier: Tier
    points: int
    resolved_at: datetime


@dataclass(frozen=True)
class Credential:
    """A verified credential.

    Permissions and limits are the snapshot taken when the credential
    was issued, not the current catalog state.
    """

    subject: str
    is_holder: bool
    tier: Tier
    points: int
    permissions: frozenset[Permission]
    limits: TierLimits
    issued_at: datetime
    expires_at: datetime

    def has_permission(self, permission: Permission) -> bool:
        """Return True if the embedded permission set grants `permission`."""
        return permission in self.permissions


@dataclass(frozen=True)
class IssuedCredential:
    """A freshly minted credential with its signed wire form."""

    token: str
    credential: Credential


@dataclass(frozen=True)
class FeedPayload:
    """Tier-personalized feed content."""

    feed_type: str
    identity_tier: Tier
    tier_name: str
    data: tuple[dict[str, Any], ...]
