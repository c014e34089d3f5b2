"""
Tier catalog.

Static table of tier -> permissions, limits and display name.
The permission lattice is validated once, at construction:

    standard ⊆ white ⊆ purple ⊆ orange

and every Permission tag must be granted by at least one tier.
"""

from collections.abc import Iterable

from app.domain.errors import ConfigurationError
from app.domain.identity.entities import Permission, Tier, TierDefinition, TierLimits

TIER_ORDER: tuple[Tier, ...] = (Tier.STANDARD, Tier.WHITE, Tier.PURPLE, Tier.ORANGE)

_STANDARD_PERMISSIONS = frozenset(
    {Permission.READ_MARKETS, Permission.READ_ANALYTICS_BASIC}
)
_WHITE_PERMISSIONS = _STANDARD_PERMISSIONS | {
    Permission.READ_ANALYTICS_ADVANCED,
    Permission.READ_UTILITY,
}
_PURPLE_PERMISSIONS = _WHITE_PERMISSIONS | {
    Permission.PERSONALIZED_FEEDS,
    Permission.SOCIAL_TRADING,
}
_ORANGE_PERMISSIONS = _PURPLE_PERMISSIONS | {
    Permission.EXCLUSIVE_DATA,
    Permission.PRIORITY_SUPPORT,
}

DEFAULT_TIER_DEFINITIONS: tuple[TierDefinition, ...] = (
    TierDefinition(
        tier=Tier.STANDARD,
        display_name="Standard User",
        description="Non-holder, basic access to public market data",
        permissions=_STANDARD_PERMISSIONS,
        limits=TierLimits(requests_per_minute=60, concurrent_connections=3),
    ),
    TierDefinition(
        tier=Tier.WHITE,
        display_name="N1NJ4 White",
        description="Community contributor, white background NFT holder",
        permissions=_WHITE_PERMISSIONS,
        limits=TierLimits(requests_per_minute=300, concurrent_connections=10),
    ),
    TierDefinition(
        tier=Tier.PURPLE,
        display_name="N1NJ4 Purple",
        description="Veteran contributor, purple background NFT holder",
        permissions=_PURPLE_PERMISSIONS,
        limits=TierLimits(requests_per_minute=1000, concurrent_connections=30),
    ),
    TierDefinition(
        tier=Tier.ORANGE,
        display_name="N1NJ4 Orange",
        description="Elite contributor, orange background NFT holder (max tier)",
        permissions=_ORANGE_PERMISSIONS,
        limits=TierLimits(requests_per_minute=5000, concurrent_connections=100),
    ),
)


class TierCatalog:
    """Lookup table of tier definitions ordered lowest to highest.

    Raises:
        ConfigurationError: If the definitions break the permission lattice,
            miss a tier, define a tier twice or leave a permission unused.
    """

    def __init__(
        self, definitions: Iterable[TierDefinition] = DEFAULT_TIER_DEFINITIONS
    ) -> None:
        by_tier: dict[Tier, TierDefinition] = {}
        for definition in definitions:
            if definition.tier in by_tier:
                raise ConfigurationError(
                    f"tier '{definition.tier.value}' defined twice"
                )
            by_tier[definition.tier] = definition

        missing = [t.value for t in TIER_ORDER if t not in by_tier]
        if missing:
            raise ConfigurationError(f"tier catalog missing tiers: {missing}")

        self._definitions = tuple(by_tier[t] for t in TIER_ORDER)
        self._by_tier = by_tier
        self._validate_lattice()

    def _validate_lattice(self) -> None:
        for lower, higher in zip(self._definitions, self._definitions[1:]):
            if not lower.permissions <= higher.permissions:
                dropped = sorted(p.value for p in lower.permissions - higher.permissions)
                raise ConfigurationError(
                    f"tier '{higher.tier.value}' drops permissions of "
                    f"'{lower.tier.value}': {dropped}"
                )

        granted = frozenset().union(*(d.permissions for d in self._definitions))
        unused = sorted(p.value for p in Permission if p not in granted)
        if unused:
            raise ConfigurationError(f"permissions granted by no tier: {unused}")

    def definition_for(self, tier: Tier) -> TierDefinition:
        """Return the definition for `tier`."""
        return self._by_tier[tier]

    def all_tiers(self) -> tuple[TierDefinition, ...]:
        """Return every definition, lowest tier first."""
        return self._definitions

    def parse_tier(self, value: str) -> Tier:
        """Map a raw tier string onto a known tier.

        Raises:
            ConfigurationError: If `value` names no tier in this catalog.
        """
        for tier in self._by_tier:
            if tier.value == value:
                return tier
        raise ConfigurationError(f"unknown tier '{value}' reported by holder registry")

    def rank(self, tier: Tier) -> int:
        """Return the position of `tier` in the lattice (0 = lowest)."""
        return TIER_ORDER.index(tier)
