"""
Adapter: JWT credential signer.

Implements CredentialSigner with PyJWT (HMAC-SHA256).
Expiry is enforced by the AccessGuard against its own clock, so the
`exp` claim is required here but not checked.
"""

import logging
from typing import Any, Optional

import jwt

from app.domain.errors import ConfigurationError, InvalidCredentialError
from app.domain.identity.ports import CredentialSigner

logger = logging.getLogger(__name__)

DEFAULT_ALGORITHM = "HS256"
REQUIRED_CLAIMS = ["sub", "tier", "permissions", "limits", "iat", "exp"]


class JwtCredentialSigner(CredentialSigner):
    """Signs credential claims as compact JWTs."""

    def __init__(self, secret: Optional[str], algorithm: str = DEFAULT_ALGORITHM) -> None:
        self._secret = secret
        self._algorithm = algorithm

    def _require_secret(self) -> str:
        if not self._secret:
            logger.critical("JWT_SECRET is not configured")
            raise ConfigurationError("JWT_SECRET environment variable is required")
        return self._secret

    def encode(self, claims: dict[str, Any]) -> str:
        """Sign `claims` into a JWT."""
        return jwt.encode(claims, self._require_secret(), algorithm=self._algorithm)

    def decode(self, token: str) -> dict[str, Any]:
        """Verify the JWT signature and return its claims."""
        secret = self._require_secret()
        try:
            return jwt.decode(
                token,
                secret,
                algorithms=[self._algorithm],
                options={"require": REQUIRED_CLAIMS, "verify_exp": False},
            )
        except jwt.PyJWTError as exc:
            logger.info("Credential rejected: %s", type(exc).__name__)
            raise InvalidCredentialError() from exc
