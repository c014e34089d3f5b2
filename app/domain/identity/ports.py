"""
Port interfaces (ABCs) for the identity bounded context.

Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

from app.domain.identity.entities import HolderRecord


class HolderRegistryPort(ABC):
    """Port for the external N1NJ4 holder registry."""

    @abstractmethod
    def lookup(self, wallet_address: str) -> Optional[HolderRecord]:
        """Return the holder record for a wallet, or None for non-holders.

        Raises:
            UpstreamUnavailableError: If the registry cannot be reached.
        """
        raise NotImplementedError


class CredentialSigner(ABC):
    """Port for signing and verifying credential claims."""

    @abstractmethod
    def encode(self, claims: dict[str, Any]) -> str:
        """Sign `claims` and return the opaque token.

        Raises:
            ConfigurationError: If no signing secret is configured.
        """
        raise NotImplementedError

    @abstractmethod
    def decode(self, token: str) -> dict[str, Any]:
        """Verify the token signature and return its claims.

        Expiry is not checked here; the AccessGuard owns the clock.

        Raises:
            InvalidCredentialError: If the token is malformed or tampered.
            ConfigurationError: If no signing secret is configured.
        """
        raise NotImplementedError
