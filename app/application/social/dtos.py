"""
Data Transfer Objects for the social trading application layer.

DTOs carry data between the interface and application layers.
They are plain dataclasses with no behavior.
"""

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Any, Optional


# ------------------------------------------------------------------
# Posts
# ------------------------------------------------------------------


@dataclass(frozen=True)
class CreatePostCommand:
    """Input DTO for publishing a trading post.

    Attributes:
        content: Free-text commentary.
        market_id: Market the position is in.
        position_type: "long" or "short".
        entry_price: Entry price, strictly positive.
        stop_loss: Optional stop loss, strictly positive.
        take_profit: Optional take profit, strictly positive.
    """

    content: Optional[str]
    market_id: Optional[str]
    position_type: Optional[str]
    entry_price: Optional[Decimal]
    stop_loss: Optional[Decimal] = None
    take_profit: Optional[Decimal] = None


@dataclass(frozen=True)
class CommentResult:
    """Output DTO for a single comment."""

    id: str
    author_id: str
    body: str
    created_at: datetime


@dataclass(frozen=True)
class PostResult:
    """Output DTO for a trading post."""

    id: str
    author_id: str
    content: str
    market_id: str
    position_type: str
    entry_price: Decimal
    stop_loss: Optional[Decimal]
    take_profit: Optional[Decimal]
    created_at: datetime
    like_count: int
    comments: tuple[CommentResult, ...]
    share_count: int


@dataclass(frozen=True)
class GetUserPostsQuery:
    """Input DTO for listing one author's posts."""

    author_id: str


@dataclass(frozen=True)
class PostActionCommand:
    """Input DTO for acting on a post (like, share).

    Attributes:
        user_id: Wallet address of the acting user.
        post_id: Target post.
    """

    user_id: str
    post_id: str


@dataclass(frozen=True)
class LikePostResult:
    """Output DTO for a like. `liked` is False when the user already liked."""

    liked: bool
    like_count: int


@dataclass(frozen=True)
class SharePostResult:
    """Output DTO for a post share."""

    post_id: str
    share_count: int


@dataclass(frozen=True)
class CommentOnPostCommand:
    """Input DTO for commenting on a post."""

    user_id: str
    post_id: str
    body: Optional[str]


# ------------------------------------------------------------------
# Follow graph and feed
# ------------------------------------------------------------------


@dataclass(frozen=True)
class FollowUserCommand:
    """Input DTO for following or unfollowing a user."""

    follower_id: str
    followed_id: str


@dataclass(frozen=True)
class FollowUserResult:
    """Output DTO for follow/unfollow.

    Attributes:
        changed: True if an edge was created (follow) or removed (unfollow).
    """

    changed: bool


@dataclass(frozen=True)
class GetSocialFeedQuery:
    """Input DTO for the social feed.

    Attributes:
        user_id: Wallet whose feed to build.
        limit: Maximum number of posts.
    """

    user_id: str
    limit: int = 20


# ------------------------------------------------------------------
# Trade ideas
# ------------------------------------------------------------------


@dataclass(frozen=True)
class CreateTradeIdeaCommand:
    """Input DTO for publishing a trade idea."""

    market_id: Optional[str]
    thesis: Optional[str]
    position_type: Optional[str]
    target_price: Optional[Decimal]
    time_frame: str = "medium-term"


@dataclass(frozen=True)
class TradeIdeaResult:
    """Output DTO for a trade idea."""

    id: str
    author_id: str
    market_id: str
    thesis: str
    position_type: str
    target_price: Decimal
    time_frame: str
    created_at: datetime
    status: str
    follower_count: int
    conviction_score: int


@dataclass(frozen=True)
class FollowTradeIdeaCommand:
    """Input DTO for following a trade idea."""

    user_id: str
    idea_id: str


@dataclass(frozen=True)
class FollowTradeIdeaResult:
    """Output DTO for following a trade idea."""

    followed: bool
    follower_count: int


@dataclass(frozen=True)
class UpdateTradeIdeaStatusCommand:
    """Input DTO for moving a trade idea to a new status."""

    author_id: str
    idea_id: str
    status: str


@dataclass(frozen=True)
class RankingQuery:
    """Input DTO for ranked listings (popular ideas, top traders)."""

    limit: int = 10


@dataclass(frozen=True)
class TraderRankingResult:
    """Output DTO for one entry of the top traders ranking."""

    user_id: str
    post_count: int
    identity_tier: str
    tier_name: str


# ------------------------------------------------------------------
# Portfolios
# ------------------------------------------------------------------


@dataclass(frozen=True)
class SharePortfolioCommand:
    """Input DTO for sharing a portfolio."""

    user_id: str
    payload: dict[str, Any]


@dataclass(frozen=True)
class SharePortfolioResult:
    """Output DTO for a portfolio share attempt."""

    success: bool
    message: str
    shared_at: Optional[datetime] = None


@dataclass(frozen=True)
class GetSharedPortfolioQuery:
    """Input DTO for reading a shared portfolio."""

    user_id: str


@dataclass(frozen=True)
class SharedPortfolioResult:
    """Output DTO for a shared portfolio."""

    user_id: str
    payload: dict[str, Any]
    shared_at: datetime
