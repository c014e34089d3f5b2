"""
Use case: List the most popular trade ideas.

Ideas are ranked by follower count plus conviction score; equal scores
keep creation order.
"""

from app.application.social.dtos import RankingQuery, TradeIdeaResult
from app.application.social.mappers import idea_to_result
from app.domain.errors import ValidationError
from app.domain.social.social_graph_store import SocialGraphStore


class GetPopularTradeIdeasUseCase:
    def __init__(self, store: SocialGraphStore) -> None:
        self._store = store

    def execute(self, query: RankingQuery) -> list[TradeIdeaResult]:
        if query.limit < 1:
            raise ValidationError("limit", "must be at least 1")
        return [idea_to_result(i) for i in self._store.popular_trade_ideas(query.limit)]
