"""Toggle reaction use case."""

from pydantic import BaseModel

from gallery.domain.service import ReactionService
from gallery.domain.value import CommentId, UserId

from ..base import BaseUseCase


class ToggleReactionRequest(BaseModel):
    """Toggle reaction request."""

    comment_id: str
    emoji: str
    user_id: str


class ToggleReactionResponse(BaseModel):
    """Toggle reaction response.

    Only acknowledges the toggle; clients keep their own optimistic state.
    """

    success: bool


class ToggleReactionUseCase(BaseUseCase):
    """Use case for adding or removing a user's emoji reaction on a comment."""

    def __init__(self, reaction_service: ReactionService) -> None:
        """Initialize toggle reaction use case.

        Args:
            reaction_service: Reaction domain service
        """
        self.reaction_service = reaction_service

    async def execute(self, request: ToggleReactionRequest) -> ToggleReactionResponse:
        """Execute toggle reaction flow.

        Raises:
            ValidationError: If emoji or user id is malformed
            NotFoundError: If the comment does not exist
        """
        await self.reaction_service.toggle_reaction(
            comment_id=CommentId(request.comment_id),
            emoji=request.emoji,
            user_id=UserId(request.user_id),
        )
        return ToggleReactionResponse(success=True)
