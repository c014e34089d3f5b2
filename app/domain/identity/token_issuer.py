"""
Credential issuance.

Packages a resolved identity into a signed, time-bounded credential.
The tier's permissions and limits are copied into the claims at issuance,
so later catalog changes only reach a holder once the credential is reissued.
"""

import logging
from collections.abc import Callable
from datetime import datetime, timedelta, timezone
from typing import Any

from app.domain.identity.entities import (
    Credential,
    IdentityRecord,
    IssuedCredential,
)
from app.domain.identity.ports import CredentialSigner
from app.domain.identity.tier_catalog import TierCatalog

logger = logging.getLogger(__name__)

DEFAULT_TTL = timedelta(hours=24)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def credential_claims(credential: Credential) -> dict[str, Any]:
    """Serialize a credential into signable claims."""
    return {
        "sub": credential.subject,
        "holder": credential.is_holder,
        "tier": credential.tier.value,
        "points": credential.points,
        "permissions": sorted(p.value for p in credential.permissions),
        "limits": {
            "requests_per_minute": credential.limits.requests_per_minute,
            "concurrent_connections": credential.limits.concurrent_connections,
        },
        "iat": int(credential.issued_at.timestamp()),
        "exp": int(credential.expires_at.timestamp()),
    }


class TokenIssuer:
    """Mints signed credentials for resolved identities."""

    def __init__(
        self,
        catalog: TierCatalog,
        signer: CredentialSigner,
        ttl: timedelta = DEFAULT_TTL,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._catalog = catalog
        self._signer = signer
        self._ttl = ttl
        self._clock = clock

    def issue(self, identity: IdentityRecord) -> IssuedCredential:
        """Issue a credential for `identity`.

        Raises:
            ConfigurationError: If the signer has no secret configured.
        """
        definition = self._catalog.definition_for(identity.tier)
        issued_at = self._clock().replace(microsecond=0)

        credential = Credential(
            subject=identity.wallet_address,
            is_holder=identity.is_holder,
            tier=identity.tier,
            points=identity.points,
            permissions=definition.permissions,
            limits=definition.limits,
            issued_at=issued_at,
            expires_at=issued_at + self._ttl,
        )
        token = self._signer.encode(credential_claims(credential))

        logger.info(
            "Issued credential for tier=%s, expires_at=%s",
            identity.tier.value,
            credential.expires_at.isoformat(),
        )
        return IssuedCredential(token=token, credential=credential)
