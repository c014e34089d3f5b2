"""
Entity-to-DTO mapping and shared input checks for the social use cases.
"""

from decimal import Decimal
from typing import Optional

from app.application.social.dtos import CommentResult, PostResult, TradeIdeaResult
from app.domain.errors import ValidationError
from app.domain.social.entities import Comment, PositionType, TradeIdea, TradingPost


def parse_position_type(value: Optional[str]) -> PositionType:
    """Map "long"/"short" onto PositionType or raise ValidationError."""
    text = require_text("position_type", value)
    try:
        return PositionType(text.lower())
    except ValueError:
        raise ValidationError("position_type", "must be 'long' or 'short'") from None


def require_text(field: str, value: Optional[str]) -> str:
    """Return `value` stripped, rejecting empty or whitespace-only text."""
    text = (value or "").strip()
    if not text:
        raise ValidationError(field, "is required")
    return text


def require_positive(field: str, value: Optional[Decimal], required: bool = True) -> Optional[Decimal]:
    """Reject missing (when required), zero or negative prices."""
    if value is None:
        if required:
            raise ValidationError(field, "is required")
        return None
    if value <= 0:
        raise ValidationError(field, "must be a positive number")
    return value


def comment_to_result(comment: Comment) -> CommentResult:
    return CommentResult(
        id=comment.id,
        author_id=comment.author_id,
        body=comment.body,
        created_at=comment.created_at,
    )


def post_to_result(post: TradingPost) -> PostResult:
    return PostResult(
        id=post.id,
        author_id=post.author_id,
        content=post.content,
        market_id=post.market_id,
        position_type=post.position_type.value,
        entry_price=post.entry_price,
        stop_loss=post.stop_loss,
        take_profit=post.take_profit,
        created_at=post.created_at,
        like_count=post.like_count,
        comments=tuple(comment_to_result(c) for c in post.comments),
        share_count=post.share_count,
    )


def idea_to_result(idea: TradeIdea) -> TradeIdeaResult:
    return TradeIdeaResult(
        id=idea.id,
        author_id=idea.author_id,
        market_id=idea.market_id,
        thesis=idea.thesis,
        position_type=idea.position_type.value,
        target_price=idea.target_price,
        time_frame=idea.time_frame,
        created_at=idea.created_at,
        status=idea.status.value,
        follower_count=idea.follower_count,
        conviction_score=idea.conviction_score,
    )
