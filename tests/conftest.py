"""
Shared fixtures.

JWT_SECRET must be in the environment before `app.core.config` is
imported, because settings are read once at import time.
"""

import os

os.environ.setdefault("JWT_SECRET", "test-secret-for-the-blade-dance-suite-0123456789")

from datetime import datetime, timedelta, timezone  # noqa: E402
from typing import Any, Optional  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from app.domain.errors import NotFoundError  # noqa: E402
from app.domain.identity.access_guard import AccessGuard  # noqa: E402
from app.domain.identity.identity_resolver import IdentityResolver  # noqa: E402
from app.domain.identity.tier_catalog import TierCatalog  # noqa: E402
from app.domain.identity.token_issuer import TokenIssuer  # noqa: E402
from app.domain.markets.ports import MarketDataPort, MarketSummary  # noqa: E402
from app.domain.social.social_graph_store import SocialGraphStore  # noqa: E402
from app.infrastructure.identity.jwt_credential_signer import (  # noqa: E402
    JwtCredentialSigner,
)
from app.infrastructure.identity.static_holder_registry import (  # noqa: E402
    StaticHolderRegistryAdapter,
)
from app.interfaces.markets.dependencies import get_market_data  # noqa: E402
from app.interfaces.social.dependencies import get_social_graph_store  # noqa: E402
from app.main import app  # noqa: E402
from app.shared.security.rate_limiting import limiter  # noqa: E402

TEST_SECRET = os.environ["JWT_SECRET"]
FIXED_NOW = datetime(2025, 1, 15, 12, 0, 0, tzinfo=timezone.utc)


class FakeClock:
    """Settable clock; `tick` advances it on every call when non-zero."""

    def __init__(self, now: datetime = FIXED_NOW, tick: timedelta = timedelta(0)) -> None:
        self.now = now
        self.tick = tick

    def __call__(self) -> datetime:
        current = self.now
        self.now = self.now + self.tick
        return current

    def advance(self, delta: timedelta) -> None:
        self.now = self.now + delta


class FakeMarketData(MarketDataPort):
    """In-memory market data collaborator."""

    def __init__(
        self,
        summaries: Optional[dict[str, list[MarketSummary]]] = None,
        liquidity: Optional[dict[str, dict[str, Any]]] = None,
        portfolios: Optional[dict[str, dict[str, Any]]] = None,
    ) -> None:
        self.summaries = summaries or {"spot": [], "derivative": []}
        self.liquidity = liquidity or {}
        self.portfolios = portfolios or {}
        self.summary_calls = 0

    def get_market_summaries(self, market_type: str = "spot") -> list[MarketSummary]:
        self.summary_calls += 1
        return list(self.summaries.get(market_type, []))

    def get_liquidity_analytics(self, market_id: str) -> dict[str, Any]:
        if market_id not in self.liquidity:
            raise NotFoundError("Market", market_id)
        return self.liquidity[market_id]

    def get_account_portfolio(self, wallet_address: str) -> dict[str, Any]:
        if wallet_address not in self.portfolios:
            raise NotFoundError("Portfolio", wallet_address)
        return self.portfolios[wallet_address]


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def catalog() -> TierCatalog:
    return TierCatalog()


@pytest.fixture
def signer() -> JwtCredentialSigner:
    return JwtCredentialSigner(TEST_SECRET)


@pytest.fixture
def resolver(catalog: TierCatalog, clock: FakeClock) -> IdentityResolver:
    return IdentityResolver(StaticHolderRegistryAdapter(), catalog, clock=clock)


@pytest.fixture
def issuer(catalog: TierCatalog, signer: JwtCredentialSigner, clock: FakeClock) -> TokenIssuer:
    return TokenIssuer(catalog, signer, clock=clock)


@pytest.fixture
def guard(signer: JwtCredentialSigner, clock: FakeClock) -> AccessGuard:
    return AccessGuard(signer, clock=clock)


@pytest.fixture
def store() -> SocialGraphStore:
    return SocialGraphStore(clock=FakeClock(tick=timedelta(seconds=1)))


@pytest.fixture
def market_data() -> FakeMarketData:
    return FakeMarketData()


@pytest.fixture(autouse=True)
def reset_rate_limits() -> None:
    limiter.reset()


@pytest.fixture
def client(store: SocialGraphStore, market_data: FakeMarketData):
    """TestClient with a fresh social store and in-memory market data."""
    app.dependency_overrides[get_social_graph_store] = lambda: store
    app.dependency_overrides[get_market_data] = lambda: market_data
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def login(client: TestClient):
    """Return a helper that logs a wallet in and builds its Authorization header."""

    def _login(wallet_address: str) -> dict[str, str]:
        response = client.post(
            "/api/v1/auth/login", json={"wallet_address": wallet_address}
        )
        assert response.status_code == 200, response.text
        return {"Authorization": f"Bearer {response.json()['token']}"}

    return _login
