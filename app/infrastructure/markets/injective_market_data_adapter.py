"""
Adapter: Injective market data over the LCD REST API.

Implements MarketDataPort with httpx.
Transport errors, timeouts, 5xx answers and malformed bodies become
UpstreamUnavailableError;
4xx answers for a specific market or account become NotFoundError.
"""

import logging
from typing import Any, Optional

import httpx

from app.domain.errors import NotFoundError, UpstreamUnavailableError, ValidationError
from app.domain.markets.ports import MarketDataPort, MarketSummary

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "https://sentry.lcd.injective.network"
DEFAULT_TIMEOUT_SECONDS = 5.0
SERVICE_NAME = "market data"

MARKET_TYPES = ("spot", "derivative")
_MARKETS_PATH = "/injective/exchange/v1beta1/{market_type}/markets"
_ORDERBOOK_PATH = "/injective/exchange/v1beta1/{market_type}/orderbook/{market_id}"
_BALANCES_PATH = "/cosmos/bank/v1beta1/balances/{address}"
_DEPTH_LEVELS = 10


def _summary(market: dict[str, Any]) -> MarketSummary:
    """Flatten an LCD market record into a market summary."""
    market = market.get("market", market)
    return {
        "market_id": market.get("market_id"),
        "ticker": market.get("ticker"),
        "base_denom": market.get("base_denom"),
        "quote_denom": market.get("quote_denom"),
        "oracle_base": market.get("oracle_base"),
        "oracle_quote": market.get("oracle_quote"),
        "maker_fee_rate": market.get("maker_fee_rate"),
        "taker_fee_rate": market.get("taker_fee_rate"),
        "min_price_tick_size": market.get("min_price_tick_size"),
        "min_quantity_tick_size": market.get("min_quantity_tick_size"),
    }


def _levels(raw_levels: list[dict[str, Any]]) -> list[dict[str, float]]:
    return [{"price": float(level["p"]), "quantity": float(level["q"])} for level in raw_levels]


class InjectiveMarketDataAdapter(MarketDataPort):
    """Market data client for an Injective LCD endpoint."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self._client = httpx.Client(
            base_url=base_url,
            timeout=timeout_seconds,
            transport=transport,
            headers={"Accept": "application/json"},
        )

    def close(self) -> None:
        """Release pooled connections."""
        self._client.close()

    def _get(self, path: str) -> httpx.Response:
        try:
            response = self._client.get(path)
        except httpx.TimeoutException as exc:
            logger.warning("Market data request timed out: %s", path)
            raise UpstreamUnavailableError(SERVICE_NAME, "timed out") from exc
        except httpx.HTTPError as exc:
            logger.warning("Market data request failed: %s", type(exc).__name__)
            raise UpstreamUnavailableError(SERVICE_NAME, "request failed") from exc

        if response.status_code >= 500:
            logger.warning(
                "Market data upstream error %d for %s", response.status_code, path
            )
            raise UpstreamUnavailableError(
                SERVICE_NAME, f"status {response.status_code}"
            )
        return response

    def _decode(self, response: httpx.Response) -> dict[str, Any]:
        try:
            body = response.json()
        except ValueError as exc:
            logger.warning("Market data response is not JSON: %s", response.url.path)
            raise UpstreamUnavailableError(SERVICE_NAME, "malformed response") from exc
        if not isinstance(body, dict):
            raise UpstreamUnavailableError(SERVICE_NAME, "malformed response")
        return body

    def get_market_summaries(self, market_type: str = "spot") -> list[MarketSummary]:
        """Return summaries for spot or derivative markets."""
        if market_type not in MARKET_TYPES:
            raise ValidationError("market_type", f"must be one of {list(MARKET_TYPES)}")

        response = self._get(_MARKETS_PATH.format(market_type=market_type))
        if response.is_error:
            raise UpstreamUnavailableError(SERVICE_NAME, f"status {response.status_code}")
        body = self._decode(response)
        try:
            return [_summary(m) for m in body.get("markets", [])]
        except (AttributeError, TypeError) as exc:
            raise UpstreamUnavailableError(SERVICE_NAME, "malformed response") from exc

    def get_liquidity_analytics(self, market_id: str) -> dict[str, Any]:
        """Return top-of-book depth and liquidity totals for a market.

        Spot orderbooks are tried first, then derivative ones.
        """
        for market_type in MARKET_TYPES:
            response = self._get(
                _ORDERBOOK_PATH.format(market_type=market_type, market_id=market_id)
            )
            if response.is_success:
                break
        else:
            raise NotFoundError("Market", market_id)

        body = self._decode(response)
        try:
            bids = _levels(body.get("buys_price_level") or [])
            asks = _levels(body.get("sells_price_level") or [])
        except (KeyError, TypeError, ValueError) as exc:
            logger.warning("Malformed orderbook levels for %s", market_id)
            raise UpstreamUnavailableError(SERVICE_NAME, "malformed response") from exc
        bids.sort(key=lambda b: -b["price"])
        asks.sort(key=lambda a: a["price"])
        total_bid = sum(b["price"] * b["quantity"] for b in bids)
        total_ask = sum(a["price"] * a["quantity"] for a in asks)

        return {
            "market_id": market_id,
            "market_type": market_type,
            "total_bid_liquidity": total_bid,
            "total_ask_liquidity": total_ask,
            "total_liquidity": total_bid + total_ask,
            "bid_levels": len(bids),
            "ask_levels": len(asks),
            "bids": bids[:_DEPTH_LEVELS],
            "asks": asks[:_DEPTH_LEVELS],
        }

    def get_account_portfolio(self, wallet_address: str) -> dict[str, Any]:
        """Return the wallet's bank balances.

        The LCD bank module exposes balances only, so `positions` is empty.
        A wallet with no balances holds no portfolio.
        """
        response = self._get(_BALANCES_PATH.format(address=wallet_address))
        if response.is_error:
            raise NotFoundError("Portfolio", wallet_address)

        balances = self._decode(response).get("balances", [])
        if not balances:
            raise NotFoundError("Portfolio", wallet_address)

        return {"address": wallet_address, "balances": balances, "positions": []}
