"""
Use case: Publish a trade idea.

Input: a verified Credential and CreateTradeIdeaCommand
Output: TradeIdeaResult
Side effects: Adds a trade idea to the SocialGraphStore.
Failure cases: ForbiddenError, ValidationError.

The exclusive-data permission is a hard precondition: it is checked
before any field is looked at, so a caller without it always gets
ForbiddenError. New ideas start with zero conviction; it is never
taken from the caller.
"""

import logging

from app.application.social.dtos import CreateTradeIdeaCommand, TradeIdeaResult
from app.application.social.mappers import (
    idea_to_result,
    parse_position_type,
    require_positive,
    require_text,
)
from app.domain.identity.access_guard import AccessGuard
from app.domain.identity.entities import Credential, Permission
from app.domain.social.social_graph_store import SocialGraphStore

logger = logging.getLogger(__name__)

DEFAULT_TIME_FRAME = "medium-term"


class CreateTradeIdeaUseCase:
    """Publishes a trade idea for callers with exclusive data access."""

    def __init__(self, store: SocialGraphStore, guard: AccessGuard) -> None:
        self._store = store
        self._guard = guard

    def execute(
        self, credential: Credential, command: CreateTradeIdeaCommand
    ) -> TradeIdeaResult:
        """Run the create trade idea use case.

        Raises:
            ForbiddenError: If the caller lacks `access:exclusive_data`.
            ValidationError: If a required field is missing or invalid.
        """
        self._guard.require_permission(credential, Permission.EXCLUSIVE_DATA)

        idea = self._store.create_trade_idea(
            author_id=credential.subject,
            market_id=require_text("market_id", command.market_id),
            thesis=require_text("idea", command.thesis),
            position_type=parse_position_type(command.position_type),
            target_price=require_positive("target_price", command.target_price),
            time_frame=(command.time_frame or "").strip() or DEFAULT_TIME_FRAME,
        )

        logger.info("Trade idea created: id=%s, market=%s", idea.id, idea.market_id)
        return idea_to_result(idea)
