"""
Blade Dance: tier-aware API gateway for Injective market data and
social trading.

Application package root. A modular monolith using hexagonal
architecture (ports & adapters).

Bounded contexts:
    - identity: Wallet login, N1NJ4 tiers, credentials, personalized feeds.
    - social: Trading posts, follow graph, trade ideas, shared portfolios.
    - markets: Market summaries, orderbook liquidity, normalized data.

Layers:
    - domain: Business rules, entities, ports (ABCs), errors.
    - application: Use cases, DTOs, orchestration.
    - infrastructure: Adapters (holder registry, JWT signing, LCD client, cache).
    - interfaces: FastAPI routers, Pydantic schemas.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
