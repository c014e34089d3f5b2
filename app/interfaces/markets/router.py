"""
FastAPI router for the markets bounded context.

All routes delegate to use cases. Each route is gated by the permission
its tier must grant; error mapping is handled by centralized handlers.
"""

from fastapi import APIRouter, Depends, Path, Query, Request

from app.application.markets.dtos import (
    GetLiquidityAnalyticsQuery,
    GetMarketSummariesQuery,
    GetNormalizedMarketsQuery,
)
from app.application.markets.get_liquidity_analytics import GetLiquidityAnalyticsUseCase
from app.application.markets.get_market_summaries import GetMarketSummariesUseCase
from app.application.markets.get_normalized_markets import GetNormalizedMarketsUseCase
from app.domain.identity.entities import Permission
from app.interfaces.identity.dependencies import require_permission
from app.interfaces.markets.dependencies import (
    get_liquidity_analytics_use_case,
    get_market_summaries_use_case,
    get_normalized_markets_use_case,
)
from app.interfaces.markets.schemas import (
    LiquidityAnalyticsResponse,
    MarketSummariesResponse,
    NormalizedMarketsResponse,
)
from app.interfaces.schemas import ErrorResponse
from app.shared.security.rate_limiting import credential_rate_limit, limiter

router = APIRouter(tags=["markets"])

_GATED_RESPONSES = {
    401: {"model": ErrorResponse},
    403: {"model": ErrorResponse},
    503: {"model": ErrorResponse},
}


@router.get(
    "/markets/summary",
    response_model=MarketSummariesResponse,
    responses={400: {"model": ErrorResponse}, **_GATED_RESPONSES},
    dependencies=[Depends(require_permission(Permission.READ_MARKETS))],
    summary="Market summaries",
    description="List spot or derivative markets from the Injective exchange module.",
)
@limiter.limit(credential_rate_limit)
def get_market_summaries(
    request: Request,
    market_type: str = Query("spot", alias="type", max_length=16),
    use_case: GetMarketSummariesUseCase = Depends(get_market_summaries_use_case),
) -> MarketSummariesResponse:
    """Return summaries for every market of the given type."""
    markets = use_case.execute(GetMarketSummariesQuery(market_type=market_type))
    return MarketSummariesResponse(
        market_type=market_type, count=len(markets), markets=markets
    )


@router.get(
    "/markets/{market_id}/liquidity",
    response_model=LiquidityAnalyticsResponse,
    responses={404: {"model": ErrorResponse}, **_GATED_RESPONSES},
    dependencies=[Depends(require_permission(Permission.READ_ANALYTICS_ADVANCED))],
    summary="Orderbook liquidity",
    description="Total bid/ask liquidity and top price levels for one market.",
)
@limiter.limit(credential_rate_limit)
def get_liquidity_analytics(
    request: Request,
    market_id: str = Path(..., min_length=1, max_length=128),
    use_case: GetLiquidityAnalyticsUseCase = Depends(get_liquidity_analytics_use_case),
) -> LiquidityAnalyticsResponse:
    """Return orderbook liquidity for a market."""
    analytics = use_case.execute(GetLiquidityAnalyticsQuery(market_id=market_id))
    return LiquidityAnalyticsResponse(**analytics)


@router.get(
    "/utility/markets/normalized",
    response_model=NormalizedMarketsResponse,
    responses={400: {"model": ErrorResponse}, **_GATED_RESPONSES},
    dependencies=[Depends(require_permission(Permission.READ_UTILITY))],
    summary="Normalized market data",
    description="Spot and derivative records for a comma-separated list of market ids.",
)
@limiter.limit(credential_rate_limit)
def get_normalized_markets(
    request: Request,
    market_ids: str = Query(..., max_length=8192),
    use_case: GetNormalizedMarketsUseCase = Depends(get_normalized_markets_use_case),
) -> NormalizedMarketsResponse:
    """Return cached, normalized data for the requested markets."""
    query = GetNormalizedMarketsQuery(market_ids=tuple(market_ids.split(",")))
    result = use_case.execute(query)
    return NormalizedMarketsResponse(spot=result.spot, derivatives=result.derivatives)
