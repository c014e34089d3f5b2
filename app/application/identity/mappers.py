"""
Entity-to-DTO mapping for the identity application layer.
"""

from app.application.identity.dtos import IdentitySummary
from app.domain.identity.entities import Credential, IdentityRecord
from app.domain.identity.tier_catalog import TierCatalog


def summary_from_credential(credential: Credential, catalog: TierCatalog) -> IdentitySummary:
    """Describe the identity as it was when the credential was issued."""
    return IdentitySummary(
        wallet_address=credential.subject,
        is_holder=credential.is_holder,
        tier=credential.tier.value,
        tier_name=catalog.definition_for(credential.tier).display_name,
        points=credential.points,
        permissions=tuple(sorted(p.value for p in credential.permissions)),
        requests_per_minute=credential.limits.requests_per_minute,
        concurrent_connections=credential.limits.concurrent_connections,
    )


def summary_from_identity(identity: IdentityRecord, catalog: TierCatalog) -> IdentitySummary:
    """Describe a freshly resolved identity using the current catalog."""
    definition = catalog.definition_for(identity.tier)
    return IdentitySummary(
        wallet_address=identity.wallet_address,
        is_holder=identity.is_holder,
        tier=identity.tier.value,
        tier_name=definition.display_name,
        points=identity.points,
        permissions=tuple(sorted(p.value for p in definition.permissions)),
        requests_per_minute=definition.limits.requests_per_minute,
        concurrent_connections=definition.limits.concurrent_connections,
    )
