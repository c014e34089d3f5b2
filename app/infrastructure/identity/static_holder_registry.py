"""
Adapter: Static N1NJ4 holder registry.

Implements HolderRegistryPort from an in-process table.

In production the table would be replaced by calls to the NinjaLabsNFT
contract (balanceOf) and its view contract (getUserStats) on Injective
EVM; on-chain calls are out of scope here, so the registry serves a
deterministic snapshot: the built-in development holders plus any
overrides supplied through settings.
"""

import logging
from collections.abc import Mapping
from typing import Any, Optional

from app.domain.identity.entities import HolderRecord
from app.domain.identity.ports import HolderRegistryPort

logger = logging.getLogger(__name__)

DEVELOPMENT_HOLDERS: dict[str, HolderRecord] = {
    "inj1whiteholder": HolderRecord(tier="white", points=50),
    "inj1purpleholder": HolderRecord(tier="purple", points=300),
    "inj1orangeholder": HolderRecord(tier="orange", points=1000),
}


class StaticHolderRegistryAdapter(HolderRegistryPort):
    """Holder registry backed by a fixed wallet -> holder table."""

    def __init__(
        self,
        overrides: Optional[Mapping[str, Mapping[str, Any]]] = None,
        include_development_holders: bool = True,
    ) -> None:
        holders = dict(DEVELOPMENT_HOLDERS) if include_development_holders else {}
        for wallet, entry in (overrides or {}).items():
            holders[wallet] = HolderRecord(
                tier=str(entry["tier"]), points=int(entry.get("points", 0))
            )
        self._holders = holders
        logger.info("Holder registry loaded with %d holders", len(holders))

    def lookup(self, wallet_address: str) -> Optional[HolderRecord]:
        """Return the holder record for `wallet_address`, or None."""
        return self._holders.get(wallet_address)
