"""
Pydantic schemas for social trading API request/response validation.

Schemas fix types and size bounds. Required body fields default to None
so that presence, like the content rules (blank text, position type,
positive prices), is enforced by the use cases and reported as 400.
No business logic belongs here.
"""

from datetime import datetime
from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel, Field

from app.application.social.dtos import PostResult, TradeIdeaResult

MARKET_ID_MAX_LEN = 128
CONTENT_MAX_LEN = 2000
COMMENT_MAX_LEN = 1000


# ------------------------------------------------------------------
# Posts
# ------------------------------------------------------------------


class CreatePostRequest(BaseModel):
    """Request schema for publishing a trading post.

    Attributes:
        content: Commentary on the position.
        market_id: Market the position is in.
        position_type: "long" or "short".
        entry_price: Entry price, strictly positive.
        stop_loss: Optional stop loss.
        take_profit: Optional take profit.
    """

    content: Optional[str] = Field(None, max_length=CONTENT_MAX_LEN)
    market_id: Optional[str] = Field(None, max_length=MARKET_ID_MAX_LEN)
    position_type: Optional[str] = Field(None, max_length=8, description="long or short")
    entry_price: Optional[Decimal] = None
    stop_loss: Optional[Decimal] = None
    take_profit: Optional[Decimal] = None


class CommentItem(BaseModel):
    """A single comment on a post."""

    id: str
    author_id: str
    body: str
    created_at: datetime


class PostItem(BaseModel):
    """A trading post in responses."""

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
    comments: list[CommentItem]
    share_count: int

    @classmethod
    def from_result(cls, post: PostResult) -> "PostItem":
        return cls(
            id=post.id,
            author_id=post.author_id,
            content=post.content,
            market_id=post.market_id,
            position_type=post.position_type,
            entry_price=post.entry_price,
            stop_loss=post.stop_loss,
            take_profit=post.take_profit,
            created_at=post.created_at,
            like_count=post.like_count,
            comments=[
                CommentItem(
                    id=c.id, author_id=c.author_id, body=c.body, created_at=c.created_at
                )
                for c in post.comments
            ],
            share_count=post.share_count,
        )


class PostListResponse(BaseModel):
    """Response schema for lists of posts (user posts, social feed)."""

    posts: list[PostItem]


class CommentRequest(BaseModel):
    """Request schema for commenting on a post."""

    comment: Optional[str] = Field(None, max_length=COMMENT_MAX_LEN)


class LikeResponse(BaseModel):
    """Response schema for liking a post.

    `liked` is False when the caller had already liked the post.
    """

    liked: bool
    like_count: int


class ShareResponse(BaseModel):
    """Response schema for sharing a post."""

    post_id: str
    share_count: int


# ------------------------------------------------------------------
# Follow graph
# ------------------------------------------------------------------


class FollowResponse(BaseModel):
    """Response schema for following a user."""

    created: bool


class UnfollowResponse(BaseModel):
    """Response schema for unfollowing a user."""

    removed: bool


# ------------------------------------------------------------------
# Trade ideas and rankings
# ------------------------------------------------------------------


class CreateTradeIdeaRequest(BaseModel):
    """Request schema for publishing a trade idea.

    Attributes:
        market_id: Market the idea is about.
        idea: The thesis.
        position_type: "long" or "short".
        target_price: Target price, strictly positive.
        time_frame: Free-form horizon, "medium-term" when omitted.
    """

    market_id: Optional[str] = Field(None, max_length=MARKET_ID_MAX_LEN)
    idea: Optional[str] = Field(None, max_length=CONTENT_MAX_LEN)
    position_type: Optional[str] = Field(None, max_length=8)
    target_price: Optional[Decimal] = None
    time_frame: str = Field(default="medium-term", max_length=32)


class TradeIdeaItem(BaseModel):
    """A trade idea in responses."""

    id: str
    author_id: str
    market_id: str
    idea: str
    position_type: str
    target_price: Decimal
    time_frame: str
    created_at: datetime
    status: str
    follower_count: int
    conviction_score: int

    @classmethod
    def from_result(cls, idea: TradeIdeaResult) -> "TradeIdeaItem":
        return cls(
            id=idea.id,
            author_id=idea.author_id,
            market_id=idea.market_id,
            idea=idea.thesis,
            position_type=idea.position_type,
            target_price=idea.target_price,
            time_frame=idea.time_frame,
            created_at=idea.created_at,
            status=idea.status,
            follower_count=idea.follower_count,
            conviction_score=idea.conviction_score,
        )


class TradeIdeaListResponse(BaseModel):
    """Response schema for ranked trade ideas."""

    ideas: list[TradeIdeaItem]


class FollowIdeaResponse(BaseModel):
    """Response schema for following a trade idea."""

    followed: bool
    follower_count: int


class UpdateIdeaStatusRequest(BaseModel):
    """Request schema for moving a trade idea to executed or closed."""

    status: str = Field(..., max_length=16)


class TopTraderItem(BaseModel):
    """One entry of the top traders ranking."""

    user_id: str
    post_count: int
    identity_tier: str
    tier_name: str


class TopTradersResponse(BaseModel):
    """Response schema for the top traders ranking."""

    traders: list[TopTraderItem]


# ------------------------------------------------------------------
# Portfolios
# ------------------------------------------------------------------


class SharePortfolioRequest(BaseModel):
    """Request schema for sharing the caller's portfolio."""

    portfolio_data: dict[str, Any]


class SharePortfolioResponse(BaseModel):
    """Response schema for a portfolio share attempt."""

    success: bool
    message: str
    shared_at: Optional[datetime] = None


class SharedPortfolioResponse(BaseModel):
    """Response schema for reading a shared portfolio."""

    user_id: str
    portfolio_data: dict[str, Any]
    shared_at: datetime
