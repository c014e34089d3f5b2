"""
Use case: Get normalized data for a set of markets.

Input: GetNormalizedMarketsQuery (market_ids)
Output: NormalizedMarketsResult (spot, derivatives)
Side effects: Populates the market cache.
Failure cases: ValidationError, UpstreamUnavailableError.

Results are cached per set of market ids; expiry is checked lazily
when the entry is next read.
"""

import logging

from app.application.markets.dtos import GetNormalizedMarketsQuery, NormalizedMarketsResult
from app.domain.errors import ValidationError
from app.domain.markets.ports import MarketCachePort, MarketDataPort

logger = logging.getLogger(__name__)

MAX_MARKET_IDS = 50


class GetNormalizedMarketsUseCase:
    """Filters spot and derivative summaries down to the requested markets."""

    def __init__(self, market_data: MarketDataPort, cache: MarketCachePort) -> None:
        self._market_data = market_data
        self._cache = cache

    def execute(self, query: GetNormalizedMarketsQuery) -> NormalizedMarketsResult:
        """Run the normalized markets use case.

        Raises:
            ValidationError: If no market ids, or too many, are requested.
        """
        market_ids = sorted({m.strip() for m in query.market_ids if m.strip()})
        if not market_ids:
            raise ValidationError("market_ids", "at least one market id is required")
        if len(market_ids) > MAX_MARKET_IDS:
            raise ValidationError("market_ids", f"at most {MAX_MARKET_IDS} allowed")

        key = "normalized_markets:" + ",".join(market_ids)
        return self._cache.get_or_load(key, lambda: self._load(set(market_ids)))

    def _load(self, market_ids: set[str]) -> NormalizedMarketsResult:
        logger.info("Loading normalized data for %d markets", len(market_ids))
        spot = self._market_data.get_market_summaries("spot")
        derivatives = self._market_data.get_market_summaries("derivative")
        return NormalizedMarketsResult(
            spot=[m for m in spot if m.get("market_id") in market_ids],
            derivatives=[m for m in derivatives if m.get("market_id") in market_ids],
        )
