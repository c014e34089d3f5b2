"""
Use case: Move a trade idea to a new status.

Input: UpdateTradeIdeaStatusCommand (author_id, idea_id, status)
Output: TradeIdeaResult
Side effects: Updates the idea's status.
Failure cases: ValidationError (unknown status or illegal transition),
NotFoundError, ForbiddenError (caller is not the author).
"""

import logging

from app.application.social.dtos import TradeIdeaResult, UpdateTradeIdeaStatusCommand
from app.application.social.mappers import idea_to_result
from app.domain.errors import ValidationError
from app.domain.social.entities import IdeaStatus
from app.domain.social.social_graph_store import SocialGraphStore

logger = logging.getLogger(__name__)


class UpdateTradeIdeaStatusUseCase:
    """Lets an author mark an idea executed or closed."""

    def __init__(self, store: SocialGraphStore) -> None:
        self._store = store

    def execute(self, command: UpdateTradeIdeaStatusCommand) -> TradeIdeaResult:
        try:
            status = IdeaStatus(command.status)
        except ValueError:
            raise ValidationError(
                "status", "must be one of active, executed, closed"
            ) from None

        idea = self._store.update_trade_idea_status(
            command.author_id, command.idea_id, status
        )
        logger.info("Trade idea %s moved to %s", idea.id, idea.status.value)
        return idea_to_result(idea)
