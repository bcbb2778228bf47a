"""Reaction domain service."""

import logfire
import pydantic

from gallery.domain.error import NotFoundError, ValidationError
from gallery.domain.repository import CommentRepository, ReactionRepository
from gallery.domain.value import CommentId, UserId
from gallery.domain.value.types import Emoji

from .base import Service


class ReactionService(Service):
    """Domain service for emoji reactions on comments.

    A toggle is an involution on the (comment, emoji, user) triple: applying
    it twice restores the prior state. Two rapid identical toggles from the
    same user therefore cancel out.
    """

    def __init__(
        self,
        reaction_repository: ReactionRepository,
        comment_repository: CommentRepository,
    ) -> None:
        self.reaction_repository = reaction_repository
        self.comment_repository = comment_repository

    async def toggle_reaction(
        self, comment_id: CommentId, emoji: str, user_id: UserId
    ) -> bool:
        """Add the reaction if absent, remove it if present.

        Args:
            comment_id: Comment reacted to
            emoji: Reaction key
            user_id: Reacting user

        Returns:
            True if the reaction was added, False if it was removed

        Raises:
            ValidationError: If emoji or user id is malformed
            NotFoundError: If the comment does not exist
        """
        with logfire.span(
            "reaction_service.toggle_reaction",
            comment_id=str(comment_id),
            emoji=emoji,
            user_id=str(user_id),
        ):
            try:
                emoji = Emoji(emoji).root
            except pydantic.ValidationError as e:
                raise ValidationError(str(e)) from e
            if not user_id or not str(user_id).strip():
                raise ValidationError("User id must not be blank")

            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                logfire.warn("Reaction on unknown comment", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))

            added = await self.reaction_repository.toggle(comment_id, emoji, user_id)
            logfire.info(
                "Reaction added" if added else "Reaction removed",
                comment_id=str(comment_id),
                emoji=emoji,
                user_id=str(user_id),
            )
            return added

