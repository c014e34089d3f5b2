"""
Use case: Like a trading post.

Input: PostActionCommand (user_id, post_id)
Output: LikePostResult
Side effects: Records the like once per user.
Failure cases: NotFoundError. A repeat like is a no-op, reported
with liked=False and an unchanged count.
"""

import logging

from app.application.social.dtos import LikePostResult, PostActionCommand
from app.domain.social.social_graph_store import SocialGraphStore

logger = logging.getLogger(__name__)


class LikePostUseCase:
    """Records a like on a post."""

    def __init__(self, store: SocialGraphStore) -> None:
        self._store = store

    def execute(self, command: PostActionCommand) -> LikePostResult:
        result = self._store.like_post(command.user_id, command.post_id)
        if not result.liked:
            logger.info("Duplicate like ignored for post=%s", command.post_id)
        return LikePostResult(liked=result.liked, like_count=result.like_count)
