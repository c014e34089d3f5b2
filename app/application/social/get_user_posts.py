"""
Use case: List one author's trading posts, newest first.
"""

from app.application.social.dtos import GetUserPostsQuery, PostResult
from app.application.social.mappers import post_to_result
from app.domain.social.social_graph_store import SocialGraphStore


class GetUserPostsUseCase:
    def __init__(self, store: SocialGraphStore) -> None:
        self._store = store

    def execute(self, query: GetUserPostsQuery) -> list[PostResult]:
        return [post_to_result(p) for p in self._store.posts_by(query.author_id)]
