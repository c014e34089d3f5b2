"""
Use case: Get orderbook liquidity for a market.

Failure cases: NotFoundError, UpstreamUnavailableError.
"""

from typing import Any

from app.application.markets.dtos import GetLiquidityAnalyticsQuery
from app.domain.markets.ports import MarketDataPort


class GetLiquidityAnalyticsUseCase:
    def __init__(self, market_data: MarketDataPort) -> None:
        self._market_data = market_data

    def execute(self, query: GetLiquidityAnalyticsQuery) -> dict[str, Any]:
        return self._market_data.get_liquidity_analytics(query.market_id)
