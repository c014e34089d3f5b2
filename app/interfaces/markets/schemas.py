"""
Pydantic schemas for market data responses.

Market records are passed through as flat dictionaries; their fields
follow the Injective LCD market and orderbook records.
"""

from typing import Any

from pydantic import BaseModel


class MarketSummariesResponse(BaseModel):
    """Response schema for market summaries."""

    market_type: str
    count: int
    markets: list[dict[str, Any]]


class PriceLevelSchema(BaseModel):
    """A single orderbook price level."""

    price: float
    quantity: float


class LiquidityAnalyticsResponse(BaseModel):
    """Response schema for a market's orderbook liquidity."""

    market_id: str
    market_type: str
    total_bid_liquidity: float
    total_ask_liquidity: float
    total_liquidity: float
    bid_levels: int
    ask_levels: int
    bids: list[PriceLevelSchema]
    asks: list[PriceLevelSchema]


class NormalizedMarketsResponse(BaseModel):
    """Response schema for normalized market data grouped by type."""

    spot: list[dict[str, Any]]
    derivatives: list[dict[str, Any]]
