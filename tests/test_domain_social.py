"""
Tests for the social trading domain layer.

Exercises SocialGraphStore directly: idempotent actions, follow graph,
feed and ranking order, trade idea lifecycle and thread safety.
"""

from concurrent.futures import ThreadPoolExecutor
from datetime import timedelta
from decimal import Decimal
from itertools import count

import pytest

from conftest import FIXED_NOW, FakeClock

from app.domain.errors import ForbiddenError, NotFoundError, ValidationError
from app.domain.social.entities import ActionOutcome, IdeaStatus, PositionType
from app.domain.social.social_graph_store import SocialGraphStore


def _post(store: SocialGraphStore, author: str, content: str = "INJ breakout"):
    return store.create_post(
        author_id=author,
        content=content,
        market_id="inj-usdt-spot",
        position_type=PositionType.LONG,
        entry_price=Decimal("25.5"),
    )


def _idea(store: SocialGraphStore, author: str = "inj1orangeholder", conviction: int = 0):
    return store.create_trade_idea(
        author_id=author,
        market_id="inj-usdt-spot",
        thesis="Staking demand keeps rising",
        position_type=PositionType.LONG,
        target_price=Decimal("40"),
        time_frame="medium-term",
        conviction_score=conviction,
    )


class TestPosts:
    """Tests for posts, likes, comments and shares."""

    def test_create_post_snapshot(self, store) -> None:
        post = _post(store, "inj1purpleholder")
        assert post.like_count == 0
        assert post.comments == ()
        assert post.share_count == 0
        assert store.posts_by("inj1purpleholder") == [post]

    def test_like_is_idempotent(self, store) -> None:
        post = _post(store, "inj1purpleholder")
        first = store.like_post("inj1alice000", post.id)
        second = store.like_post("inj1alice000", post.id)

        assert first.outcome is ActionOutcome.APPLIED
        assert first.liked is True
        assert second.outcome is ActionOutcome.ALREADY_ACTED
        assert second.liked is False
        assert second.like_count == 1

    def test_likes_from_distinct_users_add_up(self, store) -> None:
        post = _post(store, "inj1purpleholder")
        store.like_post("inj1alice000", post.id)
        result = store.like_post("inj1bob00000", post.id)
        assert result.like_count == 2

    def test_like_missing_post(self, store) -> None:
        with pytest.raises(NotFoundError):
            store.like_post("inj1alice000", "missing")

    def test_comments_append_in_order(self, store) -> None:
        post = _post(store, "inj1purpleholder")
        store.comment_on_post("inj1alice000", post.id, "first")
        store.comment_on_post("inj1bob00000", post.id, "second")
        (reloaded,) = store.posts_by("inj1purpleholder")
        assert [c.body for c in reloaded.comments] == ["first", "second"]

    def test_share_counts(self, store) -> None:
        post = _post(store, "inj1purpleholder")
        store.share_post("inj1alice000", post.id)
        assert store.share_post("inj1alice000", post.id) == 2

    def test_snapshots_do_not_change(self, store) -> None:
        post = _post(store, "inj1purpleholder")
        store.like_post("inj1alice000", post.id)
        assert post.like_count == 0

    def test_concurrent_likes_by_one_user_count_once(self, store) -> None:
        post = _post(store, "inj1purpleholder")
        with ThreadPoolExecutor(max_workers=16) as pool:
            results = list(
                pool.map(lambda _: store.like_post("inj1alice000", post.id), range(64))
            )
        assert sum(r.liked for r in results) == 1
        assert store.posts_by("inj1purpleholder")[0].like_count == 1


class TestFollowGraph:
    """Tests for follow edges and the social feed."""

    def test_follow_round_trip(self, store) -> None:
        """follow then unfollow restores the original edge set."""
        store.follow("inj1alice000", "inj1carol000")
        before = store.edges()

        assert store.follow("inj1alice000", "inj1bob00000") is True
        assert store.unfollow("inj1alice000", "inj1bob00000") is True
        assert store.edges() == before

    def test_duplicate_follow_reports_false(self, store) -> None:
        assert store.follow("inj1alice000", "inj1bob00000") is True
        assert store.follow("inj1alice000", "inj1bob00000") is False
        assert store.following("inj1alice000") == ("inj1bob00000",)

    def test_unfollow_absent_edge(self, store) -> None:
        assert store.unfollow("inj1alice000", "inj1bob00000") is False

    def test_feed_includes_own_and_followed_posts_newest_first(self, store) -> None:
        own = _post(store, "inj1alice000", "mine")
        followed = _post(store, "inj1bob00000", "theirs")
        _post(store, "inj1carol000", "stranger")
        store.follow("inj1alice000", "inj1bob00000")

        feed = store.feed_for("inj1alice000")
        assert [p.id for p in feed] == [followed.id, own.id]

    def test_feed_ties_fall_back_to_insertion_order(self) -> None:
        """Posts with the same timestamp come out newest-inserted first."""
        store = SocialGraphStore(clock=FakeClock())
        first = _post(store, "inj1alice000", "one")
        second = _post(store, "inj1alice000", "two")
        assert [p.id for p in store.feed_for("inj1alice000")] == [second.id, first.id]

    def test_feed_limit(self, store) -> None:
        for i in range(5):
            _post(store, "inj1alice000", f"post {i}")
        assert len(store.feed_for("inj1alice000", limit=3)) == 3


class TestTradeIdeas:
    """Tests for trade ideas and their ranking."""

    def test_follow_idea_is_idempotent(self, store) -> None:
        idea = _idea(store)
        assert store.follow_trade_idea("inj1alice000", idea.id).followed is True
        repeat = store.follow_trade_idea("inj1alice000", idea.id)
        assert repeat.followed is False
        assert repeat.follower_count == 1

    def test_follow_missing_idea(self, store) -> None:
        with pytest.raises(NotFoundError):
            store.follow_trade_idea("inj1alice000", "missing")

    def test_popular_order(self, store) -> None:
        """Scores [5, 10, 10] rank as [10, 10, 5], oldest first on ties."""
        low = _idea(store, conviction=5)
        older = _idea(store, conviction=10)
        newer = _idea(store, conviction=7)
        for follower in ("inj1a0000000", "inj1b0000000", "inj1c0000000"):
            store.follow_trade_idea(follower, newer.id)

        ranked = store.popular_trade_ideas()
        assert [i.popularity for i in ranked] == [10, 10, 5]
        assert [i.id for i in ranked] == [older.id, newer.id, low.id]

    def test_popular_limit(self, store) -> None:
        for score in range(5):
            _idea(store, conviction=score)
        assert len(store.popular_trade_ideas(limit=2)) == 2

    def test_negative_conviction_rejected(self, store) -> None:
        with pytest.raises(ValidationError):
            _idea(store, conviction=-1)
        assert store.popular_trade_ideas() == []

    def test_status_lifecycle(self, store) -> None:
        idea = _idea(store)
        executed = store.update_trade_idea_status(idea.author_id, idea.id, IdeaStatus.EXECUTED)
        closed = store.update_trade_idea_status(idea.author_id, idea.id, IdeaStatus.CLOSED)
        assert executed.status is IdeaStatus.EXECUTED
        assert closed.status is IdeaStatus.CLOSED

    def test_closed_ideas_cannot_reopen(self, store) -> None:
        idea = _idea(store)
        store.update_trade_idea_status(idea.author_id, idea.id, IdeaStatus.CLOSED)
        with pytest.raises(ValidationError):
            store.update_trade_idea_status(idea.author_id, idea.id, IdeaStatus.ACTIVE)

    def test_only_author_changes_status(self, store) -> None:
        idea = _idea(store)
        with pytest.raises(ForbiddenError):
            store.update_trade_idea_status("inj1alice000", idea.id, IdeaStatus.CLOSED)


class TestRankingsAndPortfolios:
    """Tests for top traders and shared portfolios."""

    def test_top_traders_by_post_count(self, store) -> None:
        _post(store, "inj1alice000")
        for _ in range(3):
            _post(store, "inj1bob00000")
        ranked = store.top_traders()
        assert [(t.user_id, t.post_count) for t in ranked] == [
            ("inj1bob00000", 3),
            ("inj1alice000", 1),
        ]

    def test_top_traders_tie_goes_to_earliest_first_post(self, store) -> None:
        _post(store, "inj1carol000")
        _post(store, "inj1alice000")
        _post(store, "inj1alice000")
        _post(store, "inj1carol000")
        assert [t.user_id for t in store.top_traders()] == ["inj1carol000", "inj1alice000"]

    def test_top_traders_tie_uses_earliest_timestamp(self) -> None:
        """Insertion order does not decide the tie when the clock runs backwards."""
        clock = FakeClock()
        store = SocialGraphStore(clock=clock)
        _post(store, "inj1alice000")
        clock.advance(timedelta(minutes=-10))
        _post(store, "inj1carol000")
        clock.advance(timedelta(minutes=20))
        _post(store, "inj1carol000")
        clock.advance(timedelta(minutes=-30))
        _post(store, "inj1alice000")

        ranked = store.top_traders()
        assert [t.user_id for t in ranked] == ["inj1alice000", "inj1carol000"]
        assert ranked[0].first_post_at == FIXED_NOW - timedelta(minutes=20)

    def test_portfolio_last_write_wins(self, store) -> None:
        store.share_portfolio("inj1alice000", {"INJ": 10})
        store.share_portfolio("inj1alice000", {"INJ": 20})
        assert store.shared_portfolio("inj1alice000").payload == {"INJ": 20}
        assert store.shared_portfolio("inj1bob00000") is None

    def test_ids_come_from_factory(self) -> None:
        ids = count(1)
        store = SocialGraphStore(
            clock=FakeClock(tick=timedelta(seconds=1)), id_factory=lambda: f"id-{next(ids)}"
        )
        assert _post(store, "inj1alice000").id == "id-1"
