"""
Dependency injection for the markets bounded context.

The market-data client and its cache are process-wide: the client owns
an httpx connection pool and the cache must outlive single requests.
"""

from functools import lru_cache

from fastapi import Depends

from app.application.markets.get_liquidity_analytics import GetLiquidityAnalyticsUseCase
from app.application.markets.get_market_summaries import GetMarketSummariesUseCase
from app.application.markets.get_normalized_markets import GetNormalizedMarketsUseCase
from app.core.config import settings
from app.domain.markets.ports import MarketCachePort, MarketDataPort
from app.infrastructure.markets.injective_market_data_adapter import (
    InjectiveMarketDataAdapter,
)
from app.infrastructure.markets.ttl_cache import TTLCache


@lru_cache(maxsize=1)
def get_market_data() -> MarketDataPort:
    """Build the Injective LCD client from settings."""
    return InjectiveMarketDataAdapter(
        base_url=settings.market_data_base_url,
        timeout_seconds=settings.upstream_timeout_seconds,
    )


@lru_cache(maxsize=1)
def get_market_cache() -> MarketCachePort:
    """Build the market cache from settings."""
    return TTLCache(
        ttl_seconds=settings.market_cache_ttl_seconds,
        max_entries=settings.market_cache_max_entries,
    )


def get_market_summaries_use_case(
    market_data: MarketDataPort = Depends(get_market_data),
) -> GetMarketSummariesUseCase:
    """Build GetMarketSummariesUseCase with its dependencies."""
    return GetMarketSummariesUseCase(market_data=market_data)


def get_liquidity_analytics_use_case(
    market_data: MarketDataPort = Depends(get_market_data),
) -> GetLiquidityAnalyticsUseCase:
    """Build GetLiquidityAnalyticsUseCase with its dependencies."""
    return GetLiquidityAnalyticsUseCase(market_data=market_data)


def get_normalized_markets_use_case(
    market_data: MarketDataPort = Depends(get_market_data),
    cache: MarketCachePort = Depends(get_market_cache),
) -> GetNormalizedMarketsUseCase:
    """Build GetNormalizedMarketsUseCase with its dependencies."""
    return GetNormalizedMarketsUseCase(market_data=market_data, cache=cache)
