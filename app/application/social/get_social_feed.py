"""
Use case: Get the caller's social feed.

Input: GetSocialFeedQuery (user_id, limit)
Output: list[PostResult], newest first
Side effects: None.
Failure cases: ValidationError for a non-positive limit.
"""

from app.application.social.dtos import GetSocialFeedQuery, PostResult
from app.application.social.mappers import post_to_result
from app.domain.errors import ValidationError
from app.domain.social.social_graph_store import SocialGraphStore


class GetSocialFeedUseCase:
    """Builds a feed from the caller's posts and those of people they follow."""

    def __init__(self, store: SocialGraphStore) -> None:
        self._store = store

    def execute(self, query: GetSocialFeedQuery) -> list[PostResult]:
        if query.limit < 1:
            raise ValidationError("limit", "must be at least 1")
        posts = self._store.feed_for(query.user_id, query.limit)
        return [post_to_result(p) for p in posts]
