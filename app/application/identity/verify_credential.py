"""
Use case: Verify a credential.

Input: VerifyCredentialQuery (token)
Output: IdentitySummary as of issuance
Side effects: None.
Failure cases: InvalidCredentialError, ConfigurationError.
"""

from app.application.identity.dtos import IdentitySummary, VerifyCredentialQuery
from app.application.identity.mappers import summary_from_credential
from app.domain.identity.access_guard import AccessGuard
from app.domain.identity.tier_catalog import TierCatalog


class VerifyCredentialUseCase:
    """Checks a raw token and describes the identity it carries."""

    def __init__(self, guard: AccessGuard, catalog: TierCatalog) -> None:
        self._guard = guard
        self._catalog = catalog

    def execute(self, query: VerifyCredentialQuery) -> IdentitySummary:
        credential = self._guard.verify(query.token)
        return summary_from_credential(credential, self._catalog)
