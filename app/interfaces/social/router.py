"""
FastAPI router for the social trading bounded context.

All routes delegate to use cases. No business logic here.
Every route requires a verified credential; the caller's wallet address
is taken from the credential, never from the request body.
Error mapping is handled by centralized error handlers.
"""

from fastapi import APIRouter, Depends, Path, Query, Request, Response

from app.application.social.comment_on_post import CommentOnPostUseCase
from app.application.social.create_post import CreatePostUseCase
from app.application.social.create_trade_idea import CreateTradeIdeaUseCase
from app.application.social.dtos import (
    CommentOnPostCommand,
    CreatePostCommand,
    CreateTradeIdeaCommand,
    FollowTradeIdeaCommand,
    FollowUserCommand,
    GetSharedPortfolioQuery,
    GetSocialFeedQuery,
    GetUserPostsQuery,
    PostActionCommand,
    RankingQuery,
    SharePortfolioCommand,
    UpdateTradeIdeaStatusCommand,
)
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
from app.domain.identity.entities import Credential, Permission
from app.interfaces.identity.dependencies import (
    get_current_credential,
    require_permission,
)
from app.interfaces.schemas import ErrorResponse
from app.interfaces.social.dependencies import (
    get_comment_on_post_use_case,
    get_create_post_use_case,
    get_create_trade_idea_use_case,
    get_follow_trade_idea_use_case,
    get_follow_user_use_case,
    get_like_post_use_case,
    get_popular_trade_ideas_use_case,
    get_share_portfolio_use_case,
    get_share_post_use_case,
    get_shared_portfolio_use_case,
    get_social_feed_use_case,
    get_top_traders_use_case,
    get_unfollow_user_use_case,
    get_update_trade_idea_status_use_case,
    get_user_posts_use_case,
)
from app.interfaces.social.schemas import (
    CommentItem,
    CommentRequest,
    CreatePostRequest,
    CreateTradeIdeaRequest,
    FollowIdeaResponse,
    FollowResponse,
    LikeResponse,
    PostItem,
    PostListResponse,
    SharedPortfolioResponse,
    SharePortfolioRequest,
    SharePortfolioResponse,
    ShareResponse,
    TopTraderItem,
    TopTradersResponse,
    TradeIdeaItem,
    TradeIdeaListResponse,
    UnfollowResponse,
    UpdateIdeaStatusRequest,
)
from app.shared.security.rate_limiting import credential_rate_limit, limiter

router = APIRouter(prefix="/social", tags=["social"])

HTTP_404 = 404
HTTP_409 = 409

ID_MAX_LEN = 128
DEFAULT_FEED_LIMIT = 20
DEFAULT_RANKING_LIMIT = 10
MAX_LIMIT = 100


# ------------------------------------------------------------------
# Posts
# ------------------------------------------------------------------


@router.post(
    "/posts",
    response_model=PostItem,
    responses={400: {"model": ErrorResponse}, 403: {"model": ErrorResponse}},
    dependencies=[Depends(require_permission(Permission.SOCIAL_TRADING))],
    summary="Publish a trading post",
    description="Share a long or short position with entry, stop loss and take profit.",
)
@limiter.limit(credential_rate_limit)
def create_post(
    request: Request,
    body: CreatePostRequest,
    credential: Credential = Depends(get_current_credential),
    use_case: CreatePostUseCase = Depends(get_create_post_use_case),
) -> PostItem:
    """Publish a trading post as the caller."""
    command = CreatePostCommand(
        content=body.content,
        market_id=body.market_id,
        position_type=body.position_type,
        entry_price=body.entry_price,
        stop_loss=body.stop_loss,
        take_profit=body.take_profit,
    )
    return PostItem.from_result(use_case.execute(credential, command))


@router.get(
    "/posts/user/{user_id}",
    response_model=PostListResponse,
    summary="Posts by a user",
    description="All posts by one author, newest first.",
)
@limiter.limit(credential_rate_limit)
def get_user_posts(
    request: Request,
    user_id: str = Path(..., min_length=1, max_length=ID_MAX_LEN),
    credential: Credential = Depends(get_current_credential),
    use_case: GetUserPostsUseCase = Depends(get_user_posts_use_case),
) -> PostListResponse:
    """List one author's posts."""
    posts = use_case.execute(GetUserPostsQuery(author_id=user_id))
    return PostListResponse(posts=[PostItem.from_result(p) for p in posts])


@router.get(
    "/feed",
    response_model=PostListResponse,
    summary="Social feed",
    description="Posts by the caller and the users they follow, newest first.",
)
@limiter.limit(credential_rate_limit)
def get_social_feed(
    request: Request,
    limit: int = Query(DEFAULT_FEED_LIMIT, ge=1, le=MAX_LIMIT),
    credential: Credential = Depends(get_current_credential),
    use_case: GetSocialFeedUseCase = Depends(get_social_feed_use_case),
) -> PostListResponse:
    """Build the caller's social feed."""
    posts = use_case.execute(GetSocialFeedQuery(user_id=credential.subject, limit=limit))
    return PostListResponse(posts=[PostItem.from_result(p) for p in posts])


@router.post(
    "/posts/{post_id}/like",
    response_model=LikeResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Like a post",
    description="Idempotent: liking twice leaves the count unchanged.",
)
@limiter.limit(credential_rate_limit)
def like_post(
    request: Request,
    post_id: str = Path(..., min_length=1, max_length=ID_MAX_LEN),
    credential: Credential = Depends(get_current_credential),
    use_case: LikePostUseCase = Depends(get_like_post_use_case),
) -> LikeResponse:
    """Like a post as the caller."""
    result = use_case.execute(PostActionCommand(user_id=credential.subject, post_id=post_id))
    return LikeResponse(liked=result.liked, like_count=result.like_count)


@router.post(
    "/posts/{post_id}/comment",
    response_model=CommentItem,
    responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
    summary="Comment on a post",
)
@limiter.limit(credential_rate_limit)
def comment_on_post(
    request: Request,
    body: CommentRequest,
    post_id: str = Path(..., min_length=1, max_length=ID_MAX_LEN),
    credential: Credential = Depends(get_current_credential),
    use_case: CommentOnPostUseCase = Depends(get_comment_on_post_use_case),
) -> CommentItem:
    """Append a comment to a post."""
    comment = use_case.execute(
        CommentOnPostCommand(user_id=credential.subject, post_id=post_id, body=body.comment)
    )
    return CommentItem(
        id=comment.id,
        author_id=comment.author_id,
        body=comment.body,
        created_at=comment.created_at,
    )


@router.post(
    "/posts/{post_id}/share",
    response_model=ShareResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Share a post",
)
@limiter.limit(credential_rate_limit)
def share_post(
    request: Request,
    post_id: str = Path(..., min_length=1, max_length=ID_MAX_LEN),
    credential: Credential = Depends(get_current_credential),
    use_case: SharePostUseCase = Depends(get_share_post_use_case),
) -> ShareResponse:
    """Count a share of a post."""
    result = use_case.execute(PostActionCommand(user_id=credential.subject, post_id=post_id))
    return ShareResponse(post_id=result.post_id, share_count=result.share_count)


# ------------------------------------------------------------------
# Follow graph
# ------------------------------------------------------------------


@router.post(
    "/follow/{user_id}",
    response_model=FollowResponse,
    responses={400: {"model": ErrorResponse}, 409: {"model": FollowResponse}},
    summary="Follow a user",
    description="Returns 409 with created=false when already following.",
)
@limiter.limit(credential_rate_limit)
def follow_user(
    request: Request,
    response: Response,
    user_id: str = Path(..., min_length=1, max_length=ID_MAX_LEN),
    credential: Credential = Depends(get_current_credential),
    use_case: FollowUserUseCase = Depends(get_follow_user_use_case),
) -> FollowResponse:
    """Follow another user."""
    result = use_case.execute(
        FollowUserCommand(follower_id=credential.subject, followed_id=user_id)
    )
    if not result.changed:
        response.status_code = HTTP_409
    return FollowResponse(created=result.changed)


@router.delete(
    "/follow/{user_id}",
    response_model=UnfollowResponse,
    responses={404: {"model": UnfollowResponse}},
    summary="Unfollow a user",
    description="Returns 404 with removed=false when not following.",
)
@limiter.limit(credential_rate_limit)
def unfollow_user(
    request: Request,
    response: Response,
    user_id: str = Path(..., min_length=1, max_length=ID_MAX_LEN),
    credential: Credential = Depends(get_current_credential),
    use_case: UnfollowUserUseCase = Depends(get_unfollow_user_use_case),
) -> UnfollowResponse:
    """Stop following a user."""
    result = use_case.execute(
        FollowUserCommand(follower_id=credential.subject, followed_id=user_id)
    )
    if not result.changed:
        response.status_code = HTTP_404
    return UnfollowResponse(removed=result.changed)


# ------------------------------------------------------------------
# Portfolios
# ------------------------------------------------------------------


@router.post(
    "/portfolio/share",
    response_model=SharePortfolioResponse,
    responses={400: {"model": ErrorResponse}, 503: {"model": ErrorResponse}},
    summary="Share your portfolio",
    description="Publishes the payload once the wallet is known to hold a portfolio.",
)
@limiter.limit(credential_rate_limit)
def share_portfolio(
    request: Request,
    body: SharePortfolioRequest,
    credential: Credential = Depends(get_current_credential),
    use_case: SharePortfolioUseCase = Depends(get_share_portfolio_use_case),
) -> SharePortfolioResponse:
    """Share the caller's portfolio."""
    result = use_case.execute(
        SharePortfolioCommand(user_id=credential.subject, payload=body.portfolio_data)
    )
    return SharePortfolioResponse(
        success=result.success, message=result.message, shared_at=result.shared_at
    )


@router.get(
    "/portfolio/{user_id}",
    response_model=SharedPortfolioResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Read a shared portfolio",
)
@limiter.limit(credential_rate_limit)
def get_shared_portfolio(
    request: Request,
    user_id: str = Path(..., min_length=1, max_length=ID_MAX_LEN),
    credential: Credential = Depends(get_current_credential),
    use_case: GetSharedPortfolioUseCase = Depends(get_shared_portfolio_use_case),
) -> SharedPortfolioResponse:
    """Return the portfolio a user has shared."""
    result = use_case.execute(GetSharedPortfolioQuery(user_id=user_id))
    return SharedPortfolioResponse(
        user_id=result.user_id, portfolio_data=result.payload, shared_at=result.shared_at
    )


# ------------------------------------------------------------------
# Trade ideas and rankings
# ------------------------------------------------------------------


@router.post(
    "/ideas",
    response_model=TradeIdeaItem,
    responses={400: {"model": ErrorResponse}, 403: {"model": ErrorResponse}},
    dependencies=[Depends(require_permission(Permission.EXCLUSIVE_DATA))],
    summary="Publish a trade idea",
    description="Requires exclusive data access (N1NJ4 Orange).",
)
@limiter.limit(credential_rate_limit)
def create_trade_idea(
    request: Request,
    body: CreateTradeIdeaRequest,
    credential: Credential = Depends(get_current_credential),
    use_case: CreateTradeIdeaUseCase = Depends(get_create_trade_idea_use_case),
) -> TradeIdeaItem:
    """Publish a trade idea as the caller."""
    command = CreateTradeIdeaCommand(
        market_id=body.market_id,
        thesis=body.idea,
        position_type=body.position_type,
        target_price=body.target_price,
        time_frame=body.time_frame,
    )
    return TradeIdeaItem.from_result(use_case.execute(credential, command))


@router.get(
    "/ideas/popular",
    response_model=TradeIdeaListResponse,
    summary="Popular trade ideas",
    description="Ranked by followers plus conviction, earliest first on ties.",
)
@limiter.limit(credential_rate_limit)
def get_popular_trade_ideas(
    request: Request,
    limit: int = Query(DEFAULT_RANKING_LIMIT, ge=1, le=MAX_LIMIT),
    credential: Credential = Depends(get_current_credential),
    use_case: GetPopularTradeIdeasUseCase = Depends(get_popular_trade_ideas_use_case),
) -> TradeIdeaListResponse:
    """List the most popular trade ideas."""
    ideas = use_case.execute(RankingQuery(limit=limit))
    return TradeIdeaListResponse(ideas=[TradeIdeaItem.from_result(i) for i in ideas])


@router.post(
    "/ideas/{idea_id}/follow",
    response_model=FollowIdeaResponse,
    responses={404: {"model": ErrorResponse}},
    summary="Follow a trade idea",
    description="Idempotent: following twice leaves the count unchanged.",
)
@limiter.limit(credential_rate_limit)
def follow_trade_idea(
    request: Request,
    idea_id: str = Path(..., min_length=1, max_length=ID_MAX_LEN),
    credential: Credential = Depends(get_current_credential),
    use_case: FollowTradeIdeaUseCase = Depends(get_follow_trade_idea_use_case),
) -> FollowIdeaResponse:
    """Follow a trade idea as the caller."""
    result = use_case.execute(
        FollowTradeIdeaCommand(user_id=credential.subject, idea_id=idea_id)
    )
    return FollowIdeaResponse(followed=result.followed, follower_count=result.follower_count)


@router.patch(
    "/ideas/{idea_id}/status",
    response_model=TradeIdeaItem,
    responses={
        400: {"model": ErrorResponse},
        403: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
    },
    summary="Update a trade idea's status",
    description="Authors only: active to executed or closed, executed to closed.",
)
@limiter.limit(credential_rate_limit)
def update_trade_idea_status(
    request: Request,
    body: UpdateIdeaStatusRequest,
    idea_id: str = Path(..., min_length=1, max_length=ID_MAX_LEN),
    credential: Credential = Depends(get_current_credential),
    use_case: UpdateTradeIdeaStatusUseCase = Depends(
        get_update_trade_idea_status_use_case
    ),
) -> TradeIdeaItem:
    """Move one of the caller's trade ideas to a new status."""
    result = use_case.execute(
        UpdateTradeIdeaStatusCommand(
            author_id=credential.subject, idea_id=idea_id, status=body.status
        )
    )
    return TradeIdeaItem.from_result(result)


@router.get(
    "/top-traders",
    response_model=TopTradersResponse,
    responses={503: {"model": ErrorResponse}},
    summary="Top traders",
    description="Authors ranked by post count, with their current tier.",
)
@limiter.limit(credential_rate_limit)
def get_top_traders(
    request: Request,
    limit: int = Query(DEFAULT_RANKING_LIMIT, ge=1, le=MAX_LIMIT),
    credential: Credential = Depends(get_current_credential),
    use_case: GetTopTradersUseCase = Depends(get_top_traders_use_case),
) -> TopTradersResponse:
    """Rank the most active traders."""
    rankings = use_case.execute(RankingQuery(limit=limit))
    return TopTradersResponse(
        traders=[
            TopTraderItem(
                user_id=r.user_id,
                post_count=r.post_count,
                identity_tier=r.identity_tier,
                tier_name=r.tier_name,
            )
            for r in rankings
        ]
    )
