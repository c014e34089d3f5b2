"""
Use case: Share a trading post.

Every share is counted; sharing is not idempotent.
"""

from app.application.social.dtos import PostActionCommand, SharePostResult
from app.domain.social.social_graph_store import SocialGraphStore


class SharePostUseCase:
    def __init__(self, store: SocialGraphStore) -> None:
        self._store = store

    def execute(self, command: PostActionCommand) -> SharePostResult:
        """Raises NotFoundError if the post does not exist."""
        share_count = self._store.share_post(command.user_id, command.post_id)
        return SharePostResult(post_id=command.post_id, share_count=share_count)
