"""
In-memory social trading state.

SocialGraphStore is the single owner of posts, follow edges, trade ideas
and shared portfolios for the process. Every public method runs under one
re-entrant lock, so check-and-set operations (likes, idea follows, follow
edges) are atomic and readers only ever see whole snapshots.

Ordering rules:
    feed          newest first; equal timestamps fall back to insertion order
    popular      follower_count + conviction_score desc, then oldest first
    top traders  post count desc, then earliest first post
"""

import itertools
import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Optional
from uuid import uuid4

from app.domain.errors import ForbiddenError, NotFoundError, ValidationError
from app.domain.social.entities import (
    ActionOutcome,
    Comment,
    FollowIdeaResult,
    IdeaStatus,
    LikeResult,
    PortfolioShare,
    PositionType,
    TradeIdea,
    TraderActivity,
    TradingPost,
)

logger = logging.getLogger(__name__)

_STATUS_TRANSITIONS: dict[IdeaStatus, frozenset[IdeaStatus]] = {
    IdeaStatus.ACTIVE: frozenset({IdeaStatus.EXECUTED, IdeaStatus.CLOSED}),
    IdeaStatus.EXECUTED: frozenset({IdeaStatus.CLOSED}),
    IdeaStatus.CLOSED: frozenset(),
}


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _new_id() -> str:
    return uuid4().hex


@dataclass
class _PostState:
    seq: int
    id: str
    author_id: str
    content: str
    market_id: str
    position_type: PositionType
    entry_price: Decimal
    stop_loss: Optional[Decimal]
    take_profit: Optional[Decimal]
    created_at: datetime
    liked_by: set[str] = field(default_factory=set)
    comments: list[Comment] = field(default_factory=list)
    share_count: int = 0

    def snapshot(self) -> TradingPost:
        return TradingPost(
            id=self.id,
            author_id=self.author_id,
            content=self.content,
            market_id=self.market_id,
            position_type=self.position_type,
            entry_price=self.entry_price,
            stop_loss=self.stop_loss,
            take_profit=self.take_profit,
            created_at=self.created_at,
            liked_by=frozenset(self.liked_by),
            comments=tuple(self.comments),
            share_count=self.share_count,
        )


@dataclass
class _IdeaState:
    seq: int
    id: str
    author_id: str
    market_id: str
    thesis: str
    position_type: PositionType
    target_price: Decimal
    time_frame: str
    created_at: datetime
    conviction_score: int
    status: IdeaStatus = IdeaStatus.ACTIVE
    followers: set[str] = field(default_factory=set)

    def snapshot(self) -> TradeIdea:
        return TradeIdea(
            id=self.id,
            author_id=self.author_id,
            market_id=self.market_id,
            thesis=self.thesis,
            position_type=self.position_type,
            target_price=self.target_price,
            time_frame=self.time_frame,
            created_at=self.created_at,
            status=self.status,
            followers=frozenset(self.followers),
            conviction_score=self.conviction_score,
        )


class SocialGraphStore:
    """Concurrency-safe container for all social trading state.

    Input validation (non-empty bodies, positive prices, no self-follow)
    belongs to the caller boundary; the store only guards its own
    invariants.
    """

    def __init__(
        self,
        clock: Callable[[], datetime] = _utc_now,
        id_factory: Callable[[], str] = _new_id,
    ) -> None:
        self._clock = clock
        self._id_factory = id_factory
        self._lock = threading.RLock()
        self._sequence = itertools.count()
        self._posts: dict[str, _PostState] = {}
        self._following: dict[str, dict[str, None]] = {}
        self._ideas: dict[str, _IdeaState] = {}
        self._portfolios: dict[str, PortfolioShare] = {}

    # ------------------------------------------------------------------
    # Posts
    # ------------------------------------------------------------------

    def create_post(
        self,
        author_id: str,
        content: str,
        market_id: str,
        position_type: PositionType,
        entry_price: Decimal,
        stop_loss: Optional[Decimal] = None,
        take_profit: Optional[Decimal] = None,
    ) -> TradingPost:
        """Publish a new trading post."""
        with self._lock:
            post = _PostState(
                seq=next(self._sequence),
                id=self._id_factory(),
                author_id=author_id,
                content=content,
                market_id=market_id,
                position_type=position_type,
                entry_price=entry_price,
                stop_loss=stop_loss,
                take_profit=take_profit,
                created_at=self._clock(),
            )
            self._posts[post.id] = post
            return post.snapshot()

    def posts_by(self, author_id: str) -> list[TradingPost]:
        """Return every post by `author_id`, newest first."""
        with self._lock:
            posts = [p for p in self._posts.values() if p.author_id == author_id]
            return [p.snapshot() for p in self._newest_first(posts)]

    def like_post(self, user_id: str, post_id: str) -> LikeResult:
        """Record a like. A repeat like by the same user is a no-op.

        Raises:
            NotFoundError: If the post does not exist.
        """
        with self._lock:
            post = self._require_post(post_id)
            if user_id in post.liked_by:
                return LikeResult(ActionOutcome.ALREADY_ACTED, len(post.liked_by))
            post.liked_by.add(user_id)
            return LikeResult(ActionOutcome.APPLIED, len(post.liked_by))

    def comment_on_post(self, user_id: str, post_id: str, body: str) -> Comment:
        """Append a comment to a post.

        Raises:
            NotFoundError: If the post does not exist.
        """
        with self._lock:
            post = self._require_post(post_id)
            comment = Comment(
                id=self._id_factory(),
                author_id=user_id,
                body=body,
                created_at=self._clock(),
            )
            post.comments.append(comment)
            return comment

    def share_post(self, user_id: str, post_id: str) -> int:
        """Count a share of a post and return the new share count.

        Raises:
            NotFoundError: If the post does not exist.
        """
        with self._lock:
            post = self._require_post(post_id)
            post.share_count += 1
            logger.debug("Post %s shared by %s", post_id, user_id)
            return post.share_count

    # ------------------------------------------------------------------
    # Follow graph
    # ------------------------------------------------------------------

    def follow(self, follower_id: str, followed_id: str) -> bool:
        """Add the edge follower -> followed. False if it already existed."""
        with self._lock:
            edges = self._following.setdefault(follower_id, {})
            if followed_id in edges:
                return False
            edges[followed_id] = None
            return True

    def unfollow(self, follower_id: str, followed_id: str) -> bool:
        """Remove the edge follower -> followed. False if it was absent."""
        with self._lock:
            edges = self._following.get(follower_id)
            if not edges or followed_id not in edges:
                return False
            del edges[followed_id]
            if not edges:
                del self._following[follower_id]
            return True

    def following(self, follower_id: str) -> tuple[str, ...]:
        """Return the users `follower_id` follows, in follow order."""
        with self._lock:
            return tuple(self._following.get(follower_id, ()))

    def edges(self) -> frozenset[tuple[str, str]]:
        """Return the whole follow graph as (follower, followed) pairs."""
        with self._lock:
            return frozenset(
                (follower, followed)
                for follower, targets in self._following.items()
                for followed in targets
            )

    def feed_for(self, user_id: str, limit: int = 20) -> list[TradingPost]:
        """Return posts by `user_id` and everyone they follow, newest first."""
        with self._lock:
            authors = {user_id, *self._following.get(user_id, ())}
            posts = [p for p in self._posts.values() if p.author_id in authors]
            return [p.snapshot() for p in self._newest_first(posts)[:limit]]

    # ------------------------------------------------------------------
    # Trade ideas
    # ------------------------------------------------------------------

    def create_trade_idea(
        self,
        author_id: str,
        market_id: str,
        thesis: str,
        position_type: PositionType,
        target_price: Decimal,
        time_frame: str,
        conviction_score: int = 0,
    ) -> TradeIdea:
        """Publish a trade idea.

        The caller must have checked the author's exclusive-data permission.

        Raises:
            ValidationError: If `conviction_score` is negative.
        """
        if conviction_score < 0:
            raise ValidationError("conviction_score", "must not be negative")
        with self._lock:
            idea = _IdeaState(
                seq=next(self._sequence),
                id=self._id_factory(),
                author_id=author_id,
                market_id=market_id,
                thesis=thesis,
                position_type=position_type,
                target_price=target_price,
                time_frame=time_frame,
                created_at=self._clock(),
                conviction_score=conviction_score,
            )
            self._ideas[idea.id] = idea
            return idea.snapshot()

    def follow_trade_idea(self, user_id: str, idea_id: str) -> FollowIdeaResult:
        """Follow a trade idea. A repeat follow is a no-op.

        Raises:
            NotFoundError: If the idea does not exist.
        """
        with self._lock:
            idea = self._require_idea(idea_id)
            if user_id in idea.followers:
                return FollowIdeaResult(ActionOutcome.ALREADY_ACTED, len(idea.followers))
            idea.followers.add(user_id)
            return FollowIdeaResult(ActionOutcome.APPLIED, len(idea.followers))

    def update_trade_idea_status(
        self, author_id: str, idea_id: str, status: IdeaStatus
    ) -> TradeIdea:
        """Move an idea along active -> executed -> closed.

        Raises:
            NotFoundError: If the idea does not exist.
            ForbiddenError: If `author_id` did not write the idea.
            ValidationError: If the transition is not allowed.
        """
        with self._lock:
            idea = self._require_idea(idea_id)
            if idea.author_id != author_id:
                raise ForbiddenError("author:trade_idea")
            if status not in _STATUS_TRANSITIONS[idea.status]:
                raise ValidationError(
                    "status",
                    f"cannot move from '{idea.status.value}' to '{status.value}'",
                )
            idea.status = status
            return idea.snapshot()

    def popular_trade_ideas(self, limit: int = 10) -> list[TradeIdea]:
        """Return ideas ranked by followers plus conviction."""
        with self._lock:
            ranked = sorted(
                self._ideas.values(),
                key=lambda i: (
                    -(len(i.followers) + i.conviction_score),
                    i.created_at,
                    i.seq,
                ),
            )
            return [i.snapshot() for i in ranked[:limit]]

    # ------------------------------------------------------------------
    # Rankings and portfolios
    # ------------------------------------------------------------------

    def top_traders(self, limit: int = 10) -> list[TraderActivity]:
        """Rank authors by post count; ties go to the earliest first post."""
        with self._lock:
            counts: dict[str, int] = {}
            first_post: dict[str, _PostState] = {}
            for post in self._posts.values():
                counts[post.author_id] = counts.get(post.author_id, 0) + 1
                current = first_post.get(post.author_id, post)
                first_post[post.author_id] = min(
                    current, post, key=lambda p: (p.created_at, p.seq)
                )

            ranked = sorted(
                counts,
                key=lambda user: (
                    -counts[user],
                    first_post[user].created_at,
                    first_post[user].seq,
                ),
            )
            return [
                TraderActivity(
                    user_id=user,
                    post_count=counts[user],
                    first_post_at=first_post[user].created_at,
                )
                for user in ranked[:limit]
            ]

    def share_portfolio(self, user_id: str, payload: dict[str, Any]) -> PortfolioShare:
        """Store `payload` as the user's shared portfolio (last write wins)."""
        with self._lock:
            share = PortfolioShare(
                user_id=user_id, payload=dict(payload), shared_at=self._clock()
            )
            self._portfolios[user_id] = share
            return share

    def shared_portfolio(self, user_id: str) -> Optional[PortfolioShare]:
        """Return the user's shared portfolio, or None."""
        with self._lock:
            return self._portfolios.get(user_id)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _require_post(self, post_id: str) -> _PostState:
        post = self._posts.get(post_id)
        if post is None:
            raise NotFoundError("Post", post_id)
        return post

    def _require_idea(self, idea_id: str) -> _IdeaState:
        idea = self._ideas.get(idea_id)
        if idea is None:
            raise NotFoundError("Trade idea", idea_id)
        return idea

    @staticmethod
    def _newest_first(posts: list[_PostState]) -> list[_PostState]:
        return sorted(posts, key=lambda p: (p.created_at, p.seq), reverse=True)
