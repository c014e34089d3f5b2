"""
Credential verification and permission checks.

Authorization reflects the identity at issuance time: permission checks
test membership in the credential's embedded permission set and never
consult the current tier catalog.
"""

import logging
from collections.abc import Callable
from datetime import datetime, timezone
from typing import Any

from app.domain.errors import ForbiddenError, InvalidCredentialError
from app.domain.identity.entities import Credential, Permission, Tier, TierLimits
from app.domain.identity.ports import CredentialSigner

logger = logging.getLogger(__name__)


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def _credential_from_claims(claims: dict[str, Any]) -> Credential:
    limits = claims["limits"]
    return Credential(
        subject=str(claims["sub"]),
        is_holder=bool(claims["holder"]),
        tier=Tier(claims["tier"]),
        points=int(claims["points"]),
        permissions=frozenset(Permission(p) for p in claims["permissions"]),
        limits=TierLimits(
            requests_per_minute=int(limits["requests_per_minute"]),
            concurrent_connections=int(limits["concurrent_connections"]),
        ),
        issued_at=datetime.fromtimestamp(int(claims["iat"]), tz=timezone.utc),
        expires_at=datetime.fromtimestamp(int(claims["exp"]), tz=timezone.utc),
    )


class AccessGuard:
    """Verifies credentials and enforces permissions."""

    def __init__(
        self,
        signer: CredentialSigner,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self._signer = signer
        self._clock = clock

    def verify(self, token: str) -> Credential:
        """Verify a raw credential token.

        Raises:
            InvalidCredentialError: If the token is expired, malformed or
                carries a bad signature.
            ConfigurationError: If no signing secret is configured.
        """
        if not token:
            raise InvalidCredentialError()

        claims = self._signer.decode(token)
        try:
            credential = _credential_from_claims(claims)
        except (KeyError, TypeError, ValueError) as exc:
            logger.warning("Credential claims malformed: %s", type(exc).__name__)
            raise InvalidCredentialError() from exc

        if self._clock() >= credential.expires_at:
            logger.info("Rejected expired credential")
            raise InvalidCredentialError()

        return credential

    def require_permission(self, credential: Credential, permission: Permission) -> None:
        """Ensure `credential` grants `permission`.

        Raises:
            ForbiddenError: If the permission is not in the embedded set.
        """
        if not credential.has_permission(permission):
            logger.info(
                "Denied permission=%s for tier=%s",
                permission.value,
                credential.tier.value,
            )
            raise ForbiddenError(permission.value)
