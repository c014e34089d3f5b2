"""
Use case: Read a user's shared portfolio.
"""

from app.application.social.dtos import GetSharedPortfolioQuery, SharedPortfolioResult
from app.domain.errors import NotFoundError
from app.domain.social.social_graph_store import SocialGraphStore


class GetSharedPortfolioUseCase:
    def __init__(self, store: SocialGraphStore) -> None:
        self._store = store

    def execute(self, query: GetSharedPortfolioQuery) -> SharedPortfolioResult:
        """Raises NotFoundError if the user has not shared a portfolio."""
        share = self._store.shared_portfolio(query.user_id)
        if share is None:
            raise NotFoundError("Shared portfolio", query.user_id)
        return SharedPortfolioResult(
            user_id=share.user_id, payload=dict(share.payload), shared_at=share.shared_at
        )
