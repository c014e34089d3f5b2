"""
Use case: List market summaries for one market type.

Failure cases: ValidationError, UpstreamUnavailableError.
"""

import logging
from typing import Any

from app.application.markets.dtos import GetMarketSummariesQuery
from app.domain.markets.ports import MarketDataPort

logger = logging.getLogger(__name__)


class GetMarketSummariesUseCase:
    """Passes market summaries through from the market-data collaborator."""

    def __init__(self, market_data: MarketDataPort) -> None:
        self._market_data = market_data

    def execute(self, query: GetMarketSummariesQuery) -> list[dict[str, Any]]:
        logger.info("Fetching market summaries: type=%s", query.market_type)
        return self._market_data.get_market_summaries(query.market_type)
