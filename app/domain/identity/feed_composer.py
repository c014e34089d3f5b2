"""
Tier-personalized feeds.

`markets` feeds follow the permission lattice: each tier sees everything
the tier below sees, plus richer fields or exclusive items.
`analytics` feeds split in two: purple and orange get the detailed variant.
Unknown feed types degrade to an empty payload.
"""

from typing import Any

from app.domain.identity.entities import FeedPayload, Tier
from app.domain.identity.tier_catalog import TierCatalog

MARKETS_FEED = "markets"
ANALYTICS_FEED = "analytics"

_DETAILED_ANALYTICS_TIERS = frozenset({Tier.PURPLE, Tier.ORANGE})

# (minimum tier, item). An item is included for every tier at or above it.
_MARKET_ITEMS: tuple[tuple[Tier, dict[str, Any]], ...] = (
    (
        Tier.ORANGE,
        {
            "market_id": "exclusive-market-1",
            "ticker": "EXCL/USDT",
            "status": "pre-launch",
            "access": "orange-only",
        },
    ),
    (Tier.STANDARD, {"market_id": "inj-usdt-spot", "ticker": "INJ/USDT", "volume": "1.2M"}),
    (Tier.WHITE, {"market_id": "atom-usdt-spot", "ticker": "ATOM/USDT", "volume": "800K"}),
)

_ANALYTICS_ITEMS: tuple[dict[str, Any], ...] = (
    {"type": "sentiment-analysis", "market_id": "inj-usdt", "score": 78},
    {"type": "manipulation-risk", "market_id": "btc-usdt", "level": "low"},
)

_DETAILED_ANALYTICS_ITEMS: tuple[dict[str, Any], ...] = (
    {"type": "liquidity-depth", "market_id": "eth-usdt", "score": 92},
)


class FeedComposer:
    """Builds personalized feeds as a pure function of (tier, feed_type)."""

    def __init__(self, catalog: TierCatalog) -> None:
        self._catalog = catalog

    def personalized_feed(self, tier: Tier, feed_type: str) -> FeedPayload:
        """Return the feed for `tier`; unknown `feed_type` yields no data."""
        if feed_type == MARKETS_FEED:
            data = self._markets(tier)
        elif feed_type == ANALYTICS_FEED:
            data = self._analytics(tier)
        else:
            data = ()

        return FeedPayload(
            feed_type=feed_type,
            identity_tier=tier,
            tier_name=self._catalog.definition_for(tier).display_name,
            data=data,
        )

    def _markets(self, tier: Tier) -> tuple[dict[str, Any], ...]:
        rank = self._catalog.rank(tier)
        items = []
        for minimum, item in _MARKET_ITEMS:
            if rank < self._catalog.rank(minimum):
                continue
            entry = dict(item)
            # Holders get the premium flag; purple and above get insights.
            if tier is not Tier.STANDARD and "volume" in entry:
                entry["premium_insights"] = rank >= self._catalog.rank(Tier.PURPLE)
            items.append(entry)
        return tuple(items)

    def _analytics(self, tier: Tier) -> tuple[dict[str, Any], ...]:
        if tier not in _DETAILED_ANALYTICS_TIERS:
            return tuple(dict(item) for item in _ANALYTICS_ITEMS)
        return tuple(
            {**item, "detailed": True}
            for item in _ANALYTICS_ITEMS + _DETAILED_ANALYTICS_ITEMS
        )
