"""
Use case: Rank the most active traders.

Input: RankingQuery (limit)
Output: list[TraderRankingResult]
Side effects: None.
Failure cases: ValidationError, UpstreamUnavailableError.

Authors are ranked by post count; equal counts are ordered by who
posted first. Each entry is enriched with the author's current tier.
"""

import logging

from app.application.social.dtos import RankingQuery, TraderRankingResult
from app.domain.errors import ValidationError
from app.domain.identity.identity_resolver import IdentityResolver
from app.domain.identity.tier_catalog import TierCatalog
from app.domain.social.social_graph_store import SocialGraphStore

logger = logging.getLogger(__name__)


class GetTopTradersUseCase:
    """Ranks authors and attaches their identity tier."""

    def __init__(
        self,
        store: SocialGraphStore,
        resolver: IdentityResolver,
        catalog: TierCatalog,
    ) -> None:
        self._store = store
        self._resolver = resolver
        self._catalog = catalog

    def execute(self, query: RankingQuery) -> list[TraderRankingResult]:
        if query.limit < 1:
            raise ValidationError("limit", "must be at least 1")

        rankings = []
        for activity in self._store.top_traders(query.limit):
            identity = self._resolver.resolve(activity.user_id)
            rankings.append(
                TraderRankingResult(
                    user_id=activity.user_id,
                    post_count=activity.post_count,
                    identity_tier=identity.tier.value,
                    tier_name=self._catalog.definition_for(identity.tier).display_name,
                )
            )
        return rankings
