"""
Use case: Follow a trade idea.

Input: FollowTradeIdeaCommand (user_id, idea_id)
Output: FollowTradeIdeaResult
Side effects: Adds the user to the idea's follower set.
Failure cases: NotFoundError. Following twice is a no-op.
"""

from app.application.social.dtos import FollowTradeIdeaCommand, FollowTradeIdeaResult
from app.domain.social.social_graph_store import SocialGraphStore


class FollowTradeIdeaUseCase:
    """Adds the caller to a trade idea's followers."""

    def __init__(self, store: SocialGraphStore) -> None:
        self._store = store

    def execute(self, command: FollowTradeIdeaCommand) -> FollowTradeIdeaResult:
        result = self._store.follow_trade_idea(command.user_id, command.idea_id)
        return FollowTradeIdeaResult(
            followed=result.followed, follower_count=result.follower_count
        )
