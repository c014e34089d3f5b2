"""
Use cases: Follow and unfollow a user.

Input: FollowUserCommand (follower_id, followed_id)
Output: FollowUserResult (changed)
Side effects: Adds or removes a follow edge.
Failure cases: ValidationError for self-follow. Following twice or
unfollowing a user who is not followed returns changed=False.
"""

import logging

from app.application.social.dtos import FollowUserCommand, FollowUserResult
from app.application.social.mappers import require_text
from app.domain.errors import ValidationError
from app.domain.social.social_graph_store import SocialGraphStore

logger = logging.getLogger(__name__)


class FollowUserUseCase:
    """Creates a follow edge between two users."""

    def __init__(self, store: SocialGraphStore) -> None:
        self._store = store

    def execute(self, command: FollowUserCommand) -> FollowUserResult:
        """Run the follow use case.

        Raises:
            ValidationError: If the target is missing or is the caller.
        """
        followed_id = require_text("user_id", command.followed_id)
        if followed_id == command.follower_id:
            raise ValidationError("user_id", "cannot follow yourself")

        created = self._store.follow(command.follower_id, followed_id)
        logger.info("Follow request: created=%s", created)
        return FollowUserResult(changed=created)


class UnfollowUserUseCase:
    """Removes a follow edge between two users."""

    def __init__(self, store: SocialGraphStore) -> None:
        self._store = store

    def execute(self, command: FollowUserCommand) -> FollowUserResult:
        removed = self._store.unfollow(command.follower_id, command.followed_id)
        return FollowUserResult(changed=removed)
