"""
Tests for credential issuance, verification and expiry.

Uses the real PyJWT signer with a fixed clock, so expiry is checked
against a known instant rather than wall time.
"""

from datetime import timedelta

import jwt
import pytest

from app.domain.errors import ConfigurationError, ForbiddenError, InvalidCredentialError
from app.domain.identity.access_guard import AccessGuard
from app.domain.identity.entities import Permission, Tier
from app.domain.identity.token_issuer import TokenIssuer, credential_claims
from app.infrastructure.identity.jwt_credential_signer import JwtCredentialSigner


@pytest.fixture
def purple_token(resolver, issuer) -> str:
    return issuer.issue(resolver.resolve("inj1purpleholder")).token


class TestTokenIssuer:
    """Tests for credential issuance."""

    def test_credential_embeds_tier_snapshot(self, resolver, issuer, catalog, clock) -> None:
        issued = issuer.issue(resolver.resolve("inj1whiteholder"))
        credential = issued.credential
        definition = catalog.definition_for(Tier.WHITE)

        assert credential.subject == "inj1whiteholder"
        assert credential.permissions == definition.permissions
        assert credential.limits == definition.limits
        assert credential.issued_at == clock.now
        assert credential.expires_at == clock.now + timedelta(hours=24)

    def test_claims_are_serializable(self, resolver, issuer) -> None:
        credential = issuer.issue(resolver.resolve("inj1orangeholder")).credential
        claims = credential_claims(credential)
        assert claims["sub"] == "inj1orangeholder"
        assert claims["tier"] == "orange"
        assert claims["permissions"] == sorted(claims["permissions"])
        assert claims["limits"]["requests_per_minute"] == 5000
        assert claims["exp"] - claims["iat"] == 24 * 3600

    def test_missing_secret_is_configuration_error(self, resolver, catalog, clock) -> None:
        issuer = TokenIssuer(catalog, JwtCredentialSigner(None), clock=clock)
        with pytest.raises(ConfigurationError):
            issuer.issue(resolver.resolve("inj1whiteholder"))


class TestAccessGuard:
    """Tests for credential verification and permission checks."""

    def test_round_trip(self, guard, purple_token) -> None:
        credential = guard.verify(purple_token)
        assert credential.subject == "inj1purpleholder"
        assert credential.tier is Tier.PURPLE
        assert credential.points == 300
        assert credential.has_permission(Permission.SOCIAL_TRADING)
        assert not credential.has_permission(Permission.EXCLUSIVE_DATA)

    def test_valid_just_before_expiry(self, guard, clock, purple_token) -> None:
        clock.advance(timedelta(hours=23, minutes=59))
        assert guard.verify(purple_token).subject == "inj1purpleholder"

    def test_expired_after_24_hours(self, guard, clock, purple_token) -> None:
        """A credential is rejected at +24h01m."""
        clock.advance(timedelta(hours=24, minutes=1))
        with pytest.raises(InvalidCredentialError):
            guard.verify(purple_token)

    def test_expired_exactly_at_expiry(self, guard, clock, purple_token) -> None:
        clock.advance(timedelta(hours=24))
        with pytest.raises(InvalidCredentialError):
            guard.verify(purple_token)

    def test_wrong_secret_rejected(self, clock, purple_token) -> None:
        other = AccessGuard(JwtCredentialSigner("another-secret-of-sufficient-length-000"), clock)
        with pytest.raises(InvalidCredentialError):
            other.verify(purple_token)

    def test_forged_claims_rejected(self, guard, purple_token) -> None:
        """Escalating the tier without the secret invalidates the signature."""
        header, _, signature = purple_token.split(".")
        claims = jwt.decode(purple_token, options={"verify_signature": False})
        claims["tier"] = "orange"
        forged = jwt.encode(claims, "guess-the-secret-guess-the-secret-00", algorithm="HS256")
        _, forged_payload, _ = forged.split(".")
        with pytest.raises(InvalidCredentialError):
            guard.verify(f"{header}.{forged_payload}.{signature}")

    def test_unsigned_token_rejected(self, guard, resolver, issuer) -> None:
        credential = issuer.issue(resolver.resolve("inj1orangeholder")).credential
        unsigned = jwt.encode(credential_claims(credential), None, algorithm="none")
        with pytest.raises(InvalidCredentialError):
            guard.verify(unsigned)

    @pytest.mark.parametrize("token", ["", "not-a-token", "a.b.c"])
    def test_garbage_rejected(self, guard, token) -> None:
        with pytest.raises(InvalidCredentialError):
            guard.verify(token)

    def test_missing_claims_rejected(self, guard, signer) -> None:
        token = signer.encode({"sub": "inj1purpleholder", "iat": 0})
        with pytest.raises(InvalidCredentialError):
            guard.verify(token)

    def test_unknown_tier_claim_rejected(self, guard, signer, resolver, issuer) -> None:
        credential = issuer.issue(resolver.resolve("inj1purpleholder")).credential
        claims = credential_claims(credential)
        claims["tier"] = "gold"
        with pytest.raises(InvalidCredentialError):
            guard.verify(signer.encode(claims))

    def test_error_message_is_uniform(self, guard, clock, purple_token) -> None:
        """Expired and malformed credentials are indistinguishable to callers."""
        clock.advance(timedelta(days=2))
        with pytest.raises(InvalidCredentialError) as expired:
            guard.verify(purple_token)
        with pytest.raises(InvalidCredentialError) as malformed:
            guard.verify("garbage")
        assert expired.value.message == malformed.value.message

    def test_require_permission(self, guard, purple_token) -> None:
        credential = guard.verify(purple_token)
        guard.require_permission(credential, Permission.SOCIAL_TRADING)
        with pytest.raises(ForbiddenError) as excinfo:
            guard.require_permission(credential, Permission.EXCLUSIVE_DATA)
        assert excinfo.value.message == "Permission 'access:exclusive_data' required"

    def test_missing_secret_on_verify(self, clock, purple_token) -> None:
        with pytest.raises(ConfigurationError):
            AccessGuard(JwtCredentialSigner(None), clock).verify(purple_token)
