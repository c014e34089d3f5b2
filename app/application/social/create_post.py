"""
Use case: Publish a trading post.

Input: a verified Credential and CreatePostCommand
Output: PostResult
Side effects: Adds a post to the SocialGraphStore.
Failure cases: ForbiddenError, ValidationError.
"""

import logging

from app.application.social.dtos import CreatePostCommand, PostResult
from app.application.social.mappers import (
    parse_position_type,
    post_to_result,
    require_positive,
    require_text,
)
from app.domain.identity.access_guard import AccessGuard
from app.domain.identity.entities import Credential, Permission
from app.domain.social.social_graph_store import SocialGraphStore

logger = logging.getLogger(__name__)


class CreatePostUseCase:
    """Validates a trading post and stores it under the caller's wallet."""

    def __init__(self, store: SocialGraphStore, guard: AccessGuard) -> None:
        self._store = store
        self._guard = guard

    def execute(self, credential: Credential, command: CreatePostCommand) -> PostResult:
        """Run the create post use case.

        Raises:
            ForbiddenError: If the caller lacks social trading access.
            ValidationError: If a required field is missing or a price
                is not positive.
        """
        self._guard.require_permission(credential, Permission.SOCIAL_TRADING)

        post = self._store.create_post(
            author_id=credential.subject,
            content=require_text("content", command.content),
            market_id=require_text("market_id", command.market_id),
            position_type=parse_position_type(command.position_type),
            entry_price=require_positive("entry_price", command.entry_price),
            stop_loss=require_positive("stop_loss", command.stop_loss, required=False),
            take_profit=require_positive(
                "take_profit", command.take_profit, required=False
            ),
        )

        logger.info("Post created: id=%s, market=%s", post.id, post.market_id)
        return post_to_result(post)
