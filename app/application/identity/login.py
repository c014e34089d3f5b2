"""
Use case: Log a wallet in.

Input: LoginCommand (wallet_address)
Output: LoginResult (token, expiry, identity summary)
Side effects: None (credentials are stateless).
Failure cases: ValidationError, UpstreamUnavailableError, ConfigurationError.
"""

import logging
import re
from typing import Optional

from app.application.identity.dtos import LoginCommand, LoginResult
from app.application.identity.mappers import summary_from_credential
from app.domain.errors import ValidationError
from app.domain.identity.identity_resolver import IdentityResolver
from app.domain.identity.tier_catalog import TierCatalog
from app.domain.identity.token_issuer import TokenIssuer

logger = logging.getLogger(__name__)

WALLET_ADDRESS_PATTERN = re.compile(r"^inj1[0-9a-z]{6,58}$")


def validate_wallet_address(wallet_address: Optional[str]) -> str:
    """Return the trimmed address or raise ValidationError."""
    address = (wallet_address or "").strip()
    if not address:
        raise ValidationError("wallet_address", "is required")
    if not WALLET_ADDRESS_PATTERN.match(address):
        raise ValidationError(
            "wallet_address", "must be an Injective address starting with inj1"
        )
    return address


class LoginUseCase:
    """Resolves the wallet's identity tier and issues a credential."""

    def __init__(
        self,
        resolver: IdentityResolver,
        issuer: TokenIssuer,
        catalog: TierCatalog,
    ) -> None:
        self._resolver = resolver
        self._issuer = issuer
        self._catalog = catalog

    def execute(self, command: LoginCommand) -> LoginResult:
        """Run the login use case.

        Raises:
            ValidationError: If the wallet address is missing or malformed.
        """
        wallet_address = validate_wallet_address(command.wallet_address)

        identity = self._resolver.resolve(wallet_address)
        issued = self._issuer.issue(identity)

        logger.info(
            "Login succeeded: holder=%s, tier=%s", identity.is_holder, identity.tier.value
        )
        return LoginResult(
            token=issued.token,
            expires_at=issued.credential.expires_at,
            identity=summary_from_credential(issued.credential, self._catalog),
        )
