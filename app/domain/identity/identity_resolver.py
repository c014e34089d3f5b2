"""
Identity resolution.

Maps a wallet address to an IdentityRecord using the holder registry and
the tier catalog. Nothing is cached: every call asks the registry again.
"""

import logging
from collections.abc import Callable
from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FutureTimeoutError
from datetime import datetime, timezone
from typing import Optional

from app.domain.errors import (
    ConfigurationError,
    GatewayDomainError,
    UpstreamUnavailableError,
)
from app.domain.identity.entities import HolderRecord, IdentityRecord, Tier
from app.domain.identity.ports import HolderRegistryPort
from app.domain.identity.tier_catalog import TierCatalog

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 5.0

_registry_pool = ThreadPoolExecutor(max_workers=8, thread_name_prefix="holder-registry")


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class IdentityResolver:
    """Resolves wallets to identity records.

    The registry is called on a worker thread so a slow registry is cut
    off after `timeout_seconds` instead of hanging the request.
    """

    def __init__(
        self,
        registry: HolderRegistryPort,
        catalog: TierCatalog,
        timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._registry = registry
        self._catalog = catalog
        self._timeout_seconds = timeout_seconds
        self._clock = clock

    def resolve(self, wallet_address: str) -> IdentityRecord:
        """Resolve `wallet_address` into an IdentityRecord.

        Raises:
            UpstreamUnavailableError: If the registry fails or times out.
            ConfigurationError: If the registry reports an unknown tier or
                negative points.
        """
        holder = self._lookup(wallet_address)

        if holder is None:
            return IdentityRecord(
                wallet_address=wallet_address,
                is_holder=False,
                tier=Tier.STANDARD,
                points=0,
                resolved_at=self._clock(),
            )

        tier = self._catalog.parse_tier(holder.tier)
        if holder.points < 0:
            raise ConfigurationError(
                f"negative points {holder.points} reported by holder registry"
            )
        return IdentityRecord(
            wallet_address=wallet_address,
            is_holder=True,
            tier=tier,
            points=holder.points,
            resolved_at=self._clock(),
        )

    def _lookup(self, wallet_address: str) -> Optional[HolderRecord]:
        future = _registry_pool.submit(self._registry.lookup, wallet_address)
        try:
            return future.result(timeout=self._timeout_seconds)
        except FutureTimeoutError as exc:
            future.cancel()
            logger.warning(
                "Holder registry timed out after %.1fs", self._timeout_seconds
            )
            raise UpstreamUnavailableError("holder registry", "timed out") from exc
        except GatewayDomainError:
            raise
        except Exception as exc:
            logger.warning("Holder registry lookup failed: %s", type(exc).__name__)
            raise UpstreamUnavailableError("holder registry", "lookup failed") from exc
