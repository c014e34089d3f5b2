"""
Domain entities for the social trading bounded context.

These are immutable snapshots handed out by the SocialGraphStore.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Optional


class PositionType(Enum):
    """Direction of a trading post or trade idea."""

    LONG = "long"
    SHORT = "short"


class IdeaStatus(Enum):
    """Lifecycle of a trade idea."""

    ACTIVE = "active"
    EXECUTED = "executed"
    CLOSED = "closed"


class ActionOutcome(Enum):
    """Result of an idempotent action.

    ALREADY_ACTED is a no-op, not a failure.
    """

    APPLIED = "applied"
    ALREADY_ACTED = "already_acted"


@dataclass(frozen=True)
class Comment:
    """A comment attached to exactly one trading post."""

    id: str
    author_id: str
    body: str
    created_at: datetime


@dataclass(frozen=True)
class TradingPost:
    """A trader's published position."""

    id: str
    author_id: str
    content: str
    market_id: str
    position_type: PositionType
    entry_price: Decimal
    stop_loss: Optional[Decimal]
    take_profit: Optional[Decimal]
    created_at: datetime
    liked_by: frozenset[str]
    comments: tuple[Comment, ...]
    share_count: int

    @property
    def like_count(self) -> int:
        """Number of distinct users who liked the post."""
        return len(self.liked_by)


@dataclass(frozen=True)
class TradeIdea:
    """A premium-tier directional market thesis."""

    id: str
    author_id: str
    market_id: str
    thesis: str
    position_type: PositionType
    target_price: Decimal
    time_frame: str
    created_at: datetime
    status: IdeaStatus
    followers: frozenset[str]
    conviction_score: int

    @property
    def follower_count(self) -> int:
        """Number of distinct users following the idea."""
        return len(self.followers)

    @property
    def popularity(self) -> int:
        """Ranking score used by the popular ideas listing."""
        return self.follower_count + self.conviction_score


@dataclass(frozen=True)
class PortfolioShare:
    """A user's publicly shared portfolio. One per user."""

    user_id: str
    payload: dict[str, Any]
    shared_at: datetime


@dataclass(frozen=True)
class LikeResult:
    """Outcome of liking a post."""

    outcome: ActionOutcome
    like_count: int

    @property
    def liked(self) -> bool:
        return self.outcome is ActionOutcome.APPLIED


@dataclass(frozen=True)
class FollowIdeaResult:
    """Outcome of following a trade idea."""

    outcome: ActionOutcome
    follower_count: int

    @property
    def followed(self) -> bool:
        return self.outcome is ActionOutcome.APPLIED


@dataclass(frozen=True)
class TraderActivity:
    """Post count for one author, as ranked by the store."""

    user_id: str
    post_count: int
    first_post_at: datetime
