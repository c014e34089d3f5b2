"""
Interfaces layer package.

FastAPI routers, Pydantic request/response schemas and dependency
wiring for the identity, social and markets contexts. Routes verify
credentials, call use cases and shape responses; no business logic
belongs here.
"""
