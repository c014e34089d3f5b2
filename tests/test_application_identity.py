"""
Tests for the identity application layer (use cases).

Use cases run against real domain services with a fixed clock and the
static holder registry; registry changes are simulated with a mock.
"""

from datetime import timedelta
from unittest.mock import MagicMock

import pytest

from app.application.identity.dtos import (
    GetPersonalizedFeedQuery,
    LoginCommand,
    VerifyCredentialQuery,
)
from app.application.identity.get_personalized_feed import GetPersonalizedFeedUseCase
from app.application.identity.get_profile import GetProfileUseCase
from app.application.identity.login import LoginUseCase, validate_wallet_address
from app.application.identity.verify_credential import VerifyCredentialUseCase
from app.domain.errors import InvalidCredentialError, ValidationError
from app.domain.identity.entities import HolderRecord
from app.domain.identity.feed_composer import FeedComposer
from app.domain.identity.identity_resolver import IdentityResolver
from app.domain.identity.ports import HolderRegistryPort


@pytest.fixture
def login_use_case(resolver, issuer, catalog) -> LoginUseCase:
    return LoginUseCase(resolver=resolver, issuer=issuer, catalog=catalog)


class TestWalletValidation:
    """Tests for wallet address validation."""

    @pytest.mark.parametrize(
        "address", ["inj1purpleholder", "inj1qy09gsfx3gxqjahumq97elwxqf4qu5agdmqgnyk"]
    )
    def test_valid_addresses(self, address) -> None:
        assert validate_wallet_address(f"  {address} ") == address

    @pytest.mark.parametrize(
        "address",
        ["", "   ", "cosmos1abcdefgh", "inj1", "inj1short", "INJ1PURPLEHOLDER", "inj1has space"],
    )
    def test_invalid_addresses(self, address) -> None:
        with pytest.raises(ValidationError):
            validate_wallet_address(address)


class TestLoginUseCase:
    """Tests for the LoginUseCase."""

    def test_standard_login(self, login_use_case, clock) -> None:
        result = login_use_case.execute(LoginCommand(wallet_address="inj1standarduser"))
        assert result.identity.tier == "standard"
        assert result.identity.tier_name == "Standard User"
        assert result.identity.is_holder is False
        assert result.identity.requests_per_minute == 60
        assert result.expires_at == clock.now + timedelta(hours=24)

    def test_purple_login(self, login_use_case) -> None:
        result = login_use_case.execute(LoginCommand(wallet_address="inj1purpleholder"))
        identity = result.identity
        assert identity.tier == "purple"
        assert identity.points == 300
        assert "access:social_trading" in identity.permissions
        assert "access:exclusive_data" not in identity.permissions

    def test_invalid_wallet_never_reaches_registry(self, issuer, catalog) -> None:
        registry = MagicMock(spec=HolderRegistryPort)
        use_case = LoginUseCase(IdentityResolver(registry, catalog), issuer, catalog)
        with pytest.raises(ValidationError):
            use_case.execute(LoginCommand(wallet_address="0xdeadbeef"))
        registry.lookup.assert_not_called()


class TestVerifyCredentialUseCase:
    """Tests for the VerifyCredentialUseCase."""

    def test_verify_issued_token(self, login_use_case, guard, catalog) -> None:
        token = login_use_case.execute(LoginCommand(wallet_address="inj1orangeholder")).token
        summary = VerifyCredentialUseCase(guard, catalog).execute(
            VerifyCredentialQuery(token=token)
        )
        assert summary.wallet_address == "inj1orangeholder"
        assert summary.tier_name == "N1NJ4 Orange"

    def test_verify_expired_token(self, login_use_case, guard, catalog, clock) -> None:
        token = login_use_case.execute(LoginCommand(wallet_address="inj1orangeholder")).token
        clock.advance(timedelta(hours=24, minutes=1))
        with pytest.raises(InvalidCredentialError):
            VerifyCredentialUseCase(guard, catalog).execute(VerifyCredentialQuery(token=token))


class TestGetProfileUseCase:
    """Tests for the GetProfileUseCase."""

    def test_profile_reflects_current_tier(self, catalog, issuer, guard, clock) -> None:
        """A holder upgraded after login sees the new tier in the profile,
        while the credential keeps granting the old permissions."""
        registry = MagicMock(spec=HolderRegistryPort)
        registry.lookup.return_value = HolderRecord(tier="white", points=50)
        resolver = IdentityResolver(registry, catalog, clock=clock)
        token = LoginUseCase(resolver, issuer, catalog).execute(
            LoginCommand(wallet_address="inj1risingholder")
        ).token
        credential = guard.verify(token)

        registry.lookup.return_value = HolderRecord(tier="orange", points=900)
        profile = GetProfileUseCase(resolver, catalog).execute(credential)

        assert profile.tier == "orange"
        assert profile.points == 900
        assert credential.tier.value == "white"
        assert "access:exclusive_data" not in {p.value for p in credential.permissions}


class TestGetPersonalizedFeedUseCase:
    """Tests for the GetPersonalizedFeedUseCase."""

    def test_feed_uses_credential_tier(self, login_use_case, guard, catalog) -> None:
        token = login_use_case.execute(LoginCommand(wallet_address="inj1orangeholder")).token
        result = GetPersonalizedFeedUseCase(FeedComposer(catalog)).execute(
            guard.verify(token), GetPersonalizedFeedQuery(feed_type="markets")
        )
        assert result.identity_tier == "orange"
        assert result.data[0]["market_id"] == "exclusive-market-1"
