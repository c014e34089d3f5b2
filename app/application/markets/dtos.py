"""
Data Transfer Objects for the markets application layer.
"""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class GetMarketSummariesQuery:
    """Input DTO for market summaries.

    Attributes:
        market_type: "spot" or "derivative".
    """

    market_type: str = "spot"


@dataclass(frozen=True)
class GetLiquidityAnalyticsQuery:
    """Input DTO for a market's orderbook liquidity."""

    market_id: str


@dataclass(frozen=True)
class GetNormalizedMarketsQuery:
    """Input DTO for normalized market data across market types.

    Attributes:
        market_ids: Markets to include; order does not matter.
    """

    market_ids: tuple[str, ...]


@dataclass(frozen=True)
class NormalizedMarketsResult:
    """Output DTO grouping the requested markets by type."""

    spot: list[dict[str, Any]]
    derivatives: list[dict[str, Any]]
