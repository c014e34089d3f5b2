"""
Use case: Get the caller's current profile.

Input: a verified Credential
Output: IdentitySummary re-resolved against the holder registry
Side effects: None.
Failure cases: UpstreamUnavailableError, ConfigurationError.

Unlike permission checks, which use the credential snapshot, the profile
shows the wallet's tier as of now. A difference between the two means
the caller should log in again to pick up the new permissions.
"""

import logging

from app.application.identity.dtos import IdentitySummary
from app.application.identity.mappers import summary_from_identity
from app.domain.identity.entities import Credential
from app.domain.identity.identity_resolver import IdentityResolver
from app.domain.identity.tier_catalog import TierCatalog

logger = logging.getLogger(__name__)


class GetProfileUseCase:
    """Re-resolves the credential subject's identity."""

    def __init__(self, resolver: IdentityResolver, catalog: TierCatalog) -> None:
        self._resolver = resolver
        self._catalog = catalog

    def execute(self, credential: Credential) -> IdentitySummary:
        identity = self._resolver.resolve(credential.subject)
        if identity.tier is not credential.tier:
            logger.info(
                "Tier changed since issuance: %s -> %s",
                credential.tier.value,
                identity.tier.value,
            )
        return summary_from_identity(identity, self._catalog)
