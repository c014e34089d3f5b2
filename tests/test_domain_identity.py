"""
Tests for the identity domain layer.

Tier catalog, identity resolution and personalized feeds, in isolation.
No network or framework required.
"""

import threading
from dataclasses import replace
from unittest.mock import MagicMock

import pytest

from app.domain.errors import ConfigurationError, UpstreamUnavailableError
from app.domain.identity.entities import HolderRecord, Permission, Tier
from app.domain.identity.feed_composer import FeedComposer
from app.domain.identity.identity_resolver import IdentityResolver
from app.domain.identity.ports import HolderRegistryPort
from app.domain.identity.tier_catalog import (
    DEFAULT_TIER_DEFINITIONS,
    TIER_ORDER,
    TierCatalog,
)


class TestTierCatalog:
    """Tests for the tier -> permissions/limits table."""

    def test_permissions_form_a_lattice(self, catalog) -> None:
        """Each tier grants everything the tier below it grants."""
        definitions = catalog.all_tiers()
        for lower, higher in zip(definitions, definitions[1:]):
            assert lower.permissions <= higher.permissions

    def test_every_permission_is_granted(self, catalog) -> None:
        granted = set().union(*(d.permissions for d in catalog.all_tiers()))
        assert granted == set(Permission)

    def test_tiers_are_ordered_lowest_first(self, catalog) -> None:
        assert tuple(d.tier for d in catalog.all_tiers()) == TIER_ORDER
        assert catalog.rank(Tier.STANDARD) == 0
        assert catalog.rank(Tier.ORANGE) == 3

    def test_limits_per_tier(self, catalog) -> None:
        expected = {
            Tier.STANDARD: (60, 3),
            Tier.WHITE: (300, 10),
            Tier.PURPLE: (1000, 30),
            Tier.ORANGE: (5000, 100),
        }
        for tier, (rpm, connections) in expected.items():
            limits = catalog.definition_for(tier).limits
            assert limits.requests_per_minute == rpm
            assert limits.concurrent_connections == connections

    def test_only_orange_has_exclusive_data(self, catalog) -> None:
        holders = [
            d.tier for d in catalog.all_tiers() if Permission.EXCLUSIVE_DATA in d.permissions
        ]
        assert holders == [Tier.ORANGE]

    def test_lattice_violation_rejected(self) -> None:
        """A higher tier dropping a lower tier's permission is a config error."""
        white, purple = DEFAULT_TIER_DEFINITIONS[1], DEFAULT_TIER_DEFINITIONS[2]
        broken_purple = replace(
            purple, permissions=purple.permissions - {Permission.READ_UTILITY}
        )
        definitions = (
            DEFAULT_TIER_DEFINITIONS[0],
            white,
            broken_purple,
            DEFAULT_TIER_DEFINITIONS[3],
        )
        with pytest.raises(ConfigurationError):
            TierCatalog(definitions)

    def test_missing_tier_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            TierCatalog(DEFAULT_TIER_DEFINITIONS[:3])

    def test_duplicate_tier_rejected(self) -> None:
        with pytest.raises(ConfigurationError):
            TierCatalog(DEFAULT_TIER_DEFINITIONS + DEFAULT_TIER_DEFINITIONS[:1])

    def test_unknown_tier_string_rejected(self, catalog) -> None:
        assert catalog.parse_tier("purple") is Tier.PURPLE
        with pytest.raises(ConfigurationError):
            catalog.parse_tier("gold")


class TestIdentityResolver:
    """Tests for wallet -> identity resolution."""

    def test_non_holder_is_standard(self, resolver) -> None:
        identity = resolver.resolve("inj1nobodyatall")
        assert identity.is_holder is False
        assert identity.tier is Tier.STANDARD
        assert identity.points == 0

    def test_holder_gets_registry_tier(self, resolver, clock) -> None:
        identity = resolver.resolve("inj1purpleholder")
        assert identity.is_holder is True
        assert identity.tier is Tier.PURPLE
        assert identity.points == 300
        assert identity.resolved_at == clock.now

    def test_registry_consulted_on_every_call(self, catalog) -> None:
        """Nothing is cached between resolutions."""
        registry = MagicMock(spec=HolderRegistryPort)
        registry.lookup.return_value = HolderRecord(tier="white", points=5)
        resolver = IdentityResolver(registry, catalog)

        resolver.resolve("inj1whiteholder")
        registry.lookup.return_value = HolderRecord(tier="orange", points=9)
        identity = resolver.resolve("inj1whiteholder")

        assert registry.lookup.call_count == 2
        assert identity.tier is Tier.ORANGE

    def test_unknown_registry_tier_is_configuration_error(self, catalog) -> None:
        registry = MagicMock(spec=HolderRegistryPort)
        registry.lookup.return_value = HolderRecord(tier="gold", points=1)
        with pytest.raises(ConfigurationError):
            IdentityResolver(registry, catalog).resolve("inj1goldholder")

    def test_registry_failure_propagates(self, catalog) -> None:
        registry = MagicMock(spec=HolderRegistryPort)
        registry.lookup.side_effect = UpstreamUnavailableError("holder registry", "down")
        with pytest.raises(UpstreamUnavailableError):
            IdentityResolver(registry, catalog).resolve("inj1whiteholder")

    def test_unexpected_registry_error_is_upstream_unavailable(self, catalog) -> None:
        registry = MagicMock(spec=HolderRegistryPort)
        registry.lookup.side_effect = ConnectionError("registry down")
        with pytest.raises(UpstreamUnavailableError) as exc_info:
            IdentityResolver(registry, catalog).resolve("inj1whiteholder")
        assert exc_info.value.reason == "lookup failed"
        assert isinstance(exc_info.value.__cause__, ConnectionError)

    def test_configuration_error_from_registry_passes_through(self, catalog) -> None:
        registry = MagicMock(spec=HolderRegistryPort)
        registry.lookup.side_effect = ConfigurationError("registry misconfigured")
        with pytest.raises(ConfigurationError):
            IdentityResolver(registry, catalog).resolve("inj1whiteholder")

    def test_negative_points_is_configuration_error(self, catalog) -> None:
        registry = MagicMock(spec=HolderRegistryPort)
        registry.lookup.return_value = HolderRecord(tier="white", points=-5)
        with pytest.raises(ConfigurationError):
            IdentityResolver(registry, catalog).resolve("inj1negholder")

    def test_slow_registry_times_out(self, catalog) -> None:
        """A registry slower than the timeout surfaces as upstream unavailable."""
        release = threading.Event()

        class SlowRegistry(HolderRegistryPort):
            def lookup(self, wallet_address):
                release.wait(timeout=5)
                return None

        resolver = IdentityResolver(SlowRegistry(), catalog, timeout_seconds=0.05)
        try:
            with pytest.raises(UpstreamUnavailableError):
                resolver.resolve("inj1whiteholder")
        finally:
            release.set()


class TestFeedComposer:
    """Tests for tier-personalized feeds."""

    @staticmethod
    def _market_ids(composer: FeedComposer, tier: Tier) -> set[str]:
        return {item["market_id"] for item in composer.personalized_feed(tier, "markets").data}

    def test_market_feed_follows_lattice(self, catalog) -> None:
        composer = FeedComposer(catalog)
        ids = [self._market_ids(composer, tier) for tier in TIER_ORDER]
        for lower, higher in zip(ids, ids[1:]):
            assert lower <= higher

    def test_orange_sees_exclusive_market(self, catalog) -> None:
        composer = FeedComposer(catalog)
        assert "exclusive-market-1" in self._market_ids(composer, Tier.ORANGE)
        assert "exclusive-market-1" not in self._market_ids(composer, Tier.PURPLE)

    def test_standard_feed_has_no_premium_flags(self, catalog) -> None:
        feed = FeedComposer(catalog).personalized_feed(Tier.STANDARD, "markets")
        assert [item["market_id"] for item in feed.data] == ["inj-usdt-spot"]
        assert all("premium_insights" not in item for item in feed.data)

    def test_premium_insights_from_purple_up(self, catalog) -> None:
        composer = FeedComposer(catalog)
        white = composer.personalized_feed(Tier.WHITE, "markets").data
        purple = composer.personalized_feed(Tier.PURPLE, "markets").data
        assert all(item["premium_insights"] is False for item in white)
        assert all(item["premium_insights"] is True for item in purple)

    def test_detailed_analytics_for_purple_and_orange(self, catalog) -> None:
        composer = FeedComposer(catalog)
        for tier in (Tier.PURPLE, Tier.ORANGE):
            data = composer.personalized_feed(tier, "analytics").data
            assert len(data) == 3
            assert all(item["detailed"] for item in data)
        for tier in (Tier.STANDARD, Tier.WHITE):
            data = composer.personalized_feed(tier, "analytics").data
            assert len(data) == 2
            assert all("detailed" not in item for item in data)

    def test_unknown_feed_type_is_empty(self, catalog) -> None:
        feed = FeedComposer(catalog).personalized_feed(Tier.ORANGE, "weather")
        assert feed.data == ()
        assert feed.tier_name == "N1NJ4 Orange"
