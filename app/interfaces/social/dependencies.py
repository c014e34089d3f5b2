"""
Dependency injection for the social trading bounded context.

The social graph store is the single in-memory source of truth for posts,
follows, trade ideas and shared portfolios, so one instance serves the
whole process.
"""

from functools import lru_cache

from fastapi import Depends

from app.application.social.comment_on_post import CommentOnPostUseCase
from app.application.social.create_post import CreatePostUseCase
from app.application.social.create_trade_idea import CreateTradeIdeaUseCase
from app.application.social.follow_trade_idea import FollowTradeIdeaUseCase
from app.application.social.follow_user import FollowUserUseCase, UnfollowUserUseCase
from app.application.social.get_popular_trade_ideas import GetPopularTradeIdeasUseCase
from app.application.social.get_shared_portfolio import GetSharedPortfolioUseCase
from app.application.social.get_social_feed import GetSocialFeedUseCase
from app.application.social.get_top_traders import GetTopTradersUseCase
from app.application.social.get_user_posts import GetUserPostsUseCase
from app.application.social.like_post import LikePostUseCase
from app.application.social.share_portfolio import SharePortfolioUseCase
from app.application.social.share_post import SharePostUseCase
from app.application.social.update_trade_idea_status import (
    UpdateTradeIdeaStatusUseCase,
)
from app.domain.identity.access_guard import AccessGuard
from app.domain.identity.identity_resolver import IdentityResolver
from app.domain.identity.tier_catalog import TierCatalog
from app.domain.markets.ports import MarketDataPort
from app.domain.social.social_graph_store import SocialGraphStore
from app.interfaces.identity.dependencies import (
    get_access_guard,
    get_identity_resolver,
    get_tier_catalog,
)
from app.interfaces.markets.dependencies import get_market_data


@lru_cache(maxsize=1)
def get_social_graph_store() -> SocialGraphStore:
    """Build the process-wide social graph store."""
    return SocialGraphStore()


def get_create_post_use_case(
    store: SocialGraphStore = Depends(get_social_graph_store),
    guard: AccessGuard = Depends(get_access_guard),
) -> CreatePostUseCase:
    """Build CreatePostUseCase with its dependencies."""
    return CreatePostUseCase(store=store, guard=guard)


def get_user_posts_use_case(
    store: SocialGraphStore = Depends(get_social_graph_store),
) -> GetUserPostsUseCase:
    """Build GetUserPostsUseCase with its dependencies."""
    return GetUserPostsUseCase(store=store)


def get_like_post_use_case(
    store: SocialGraphStore = Depends(get_social_graph_store),
) -> LikePostUseCase:
    """Build LikePostUseCase with its dependencies."""
    return LikePostUseCase(store=store)


def get_comment_on_post_use_case(
    store: SocialGraphStore = Depends(get_social_graph_store),
) -> CommentOnPostUseCase:
    """Build CommentOnPostUseCase with its dependencies."""
    return CommentOnPostUseCase(store=store)


def get_share_post_use_case(
    store: SocialGraphStore = Depends(get_social_graph_store),
) -> SharePostUseCase:
    """Build SharePostUseCase with its dependencies."""
    return SharePostUseCase(store=store)


def get_follow_user_use_case(
    store: SocialGraphStore = Depends(get_social_graph_store),
) -> FollowUserUseCase:
    """Build FollowUserUseCase with its dependencies."""
    return FollowUserUseCase(store=store)


def get_unfollow_user_use_case(
    store: SocialGraphStore = Depends(get_social_graph_store),
) -> UnfollowUserUseCase:
    """Build UnfollowUserUseCase with its dependencies."""
    return UnfollowUserUseCase(store=store)


def get_social_feed_use_case(
    store: SocialGraphStore = Depends(get_social_graph_store),
) -> GetSocialFeedUseCase:
    """Build GetSocialFeedUseCase with its dependencies."""
    return GetSocialFeedUseCase(store=store)


def get_create_trade_idea_use_case(
    store: SocialGraphStore = Depends(get_social_graph_store),
    guard: AccessGuard = Depends(get_access_guard),
) -> CreateTradeIdeaUseCase:
    """Build CreateTradeIdeaUseCase with its dependencies."""
    return CreateTradeIdeaUseCase(store=store, guard=guard)


def get_follow_trade_idea_use_case(
    store: SocialGraphStore = Depends(get_social_graph_store),
) -> FollowTradeIdeaUseCase:
    """Build FollowTradeIdeaUseCase with its dependencies."""
    return FollowTradeIdeaUseCase(store=store)


def get_update_trade_idea_status_use_case(
    store: SocialGraphStore = Depends(get_social_graph_store),
) -> UpdateTradeIdeaStatusUseCase:
    """Build UpdateTradeIdeaStatusUseCase with its dependencies."""
    return UpdateTradeIdeaStatusUseCase(store=store)


def get_popular_trade_ideas_use_case(
    store: SocialGraphStore = Depends(get_social_graph_store),
) -> GetPopularTradeIdeasUseCase:
    """Build GetPopularTradeIdeasUseCase with its dependencies."""
    return GetPopularTradeIdeasUseCase(store=store)


def get_top_traders_use_case(
    store: SocialGraphStore = Depends(get_social_graph_store),
    resolver: IdentityResolver = Depends(get_identity_resolver),
    catalog: TierCatalog = Depends(get_tier_catalog),
) -> GetTopTradersUseCase:
    """Build GetTopTradersUseCase with its dependencies."""
    return GetTopTradersUseCase(store=store, resolver=resolver, catalog=catalog)


def get_share_portfolio_use_case(
    store: SocialGraphStore = Depends(get_social_graph_store),
    market_data: MarketDataPort = Depends(get_market_data),
) -> SharePortfolioUseCase:
    """Build SharePortfolioUseCase with its dependencies."""
    return SharePortfolioUseCase(store=store, market_data=market_data)


def get_shared_portfolio_use_case(
    store: SocialGraphStore = Depends(get_social_graph_store),
) -> GetSharedPortfolioUseCase:
    """Build GetSharedPortfolioUseCase with its dependencies."""
    return GetSharedPortfolioUseCase(store=store)
