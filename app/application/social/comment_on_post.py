"""
Use case: Comment on a trading post.

Input: CommentOnPostCommand (user_id, post_id, body)
Output: CommentResult
Side effects: Appends a comment to the post.
Failure cases: ValidationError (empty body), NotFoundError.
"""

from app.application.social.dtos import CommentOnPostCommand, CommentResult
from app.application.social.mappers import comment_to_result, require_text
from app.domain.social.social_graph_store import SocialGraphStore


class CommentOnPostUseCase:
    """Appends a comment to an existing post."""

    def __init__(self, store: SocialGraphStore) -> None:
        self._store = store

    def execute(self, command: CommentOnPostCommand) -> CommentResult:
        """Run the comment use case.

        Raises:
            ValidationError: If the body is empty or whitespace.
            NotFoundError: If the post does not exist.
        """
        body = require_text("comment", command.body)
        comment = self._store.comment_on_post(command.user_id, command.post_id, body)
        return comment_to_result(comment)
