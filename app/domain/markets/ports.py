"""
Port interfaces (ABCs) for the markets bounded context.

The market-data collaborator is treated as an opaque, fallible and
possibly slow data source.
"""

from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import Any

MarketSummary = dict[str, Any]


class MarketDataPort(ABC):
    """Port for the external market-data client."""

    @abstractmethod
    def get_market_summaries(self, market_type: str = "spot") -> list[MarketSummary]:
        """Return summaries (id, ticker, fees, tick sizes) for one market type.

        Raises:
            UpstreamUnavailableError: If the upstream fails or times out.
        """
        raise NotImplementedError

    @abstractmethod
    def get_liquidity_analytics(self, market_id: str) -> dict[str, Any]:
        """Return orderbook bids, asks and liquidity totals for a market.

        Raises:
            NotFoundError: If the market does not exist.
            UpstreamUnavailableError: If the upstream fails or times out.
        """
        raise NotImplementedError

    @abstractmethod
    def get_account_portfolio(self, wallet_address: str) -> dict[str, Any]:
        """Return balances and positions held by a wallet.

        Raises:
            NotFoundError: If the wallet holds no portfolio.
            UpstreamUnavailableError: If the upstream fails or times out.
        """
        raise NotImplementedError


class MarketCachePort(ABC):
    """Port for caching market data between requests."""

    @abstractmethod
    def get_or_load(self, key: str, loader: Callable[[], Any]) -> Any:
        """Return the cached value for `key`, calling `loader` on a miss."""
        raise NotImplementedError
