"""Reaction repository interface."""

from abc import ABC, abstractmethod
from typing import List, Sequence

from gallery.domain.model.reaction import Reaction
from gallery.domain.value import CommentId, UserId


class ReactionRepository(ABC):
    """Repository for Reaction records keyed by (comment, emoji, user)."""

    @abstractmethod
    async def toggle(self, comment_id: CommentId, emoji: str, user_id: UserId) -> bool:
        """Flip the presence of one reaction record atomically.

        Args:
            comment_id: The comment reacted to
            emoji: The reaction key
            user_id: The reacting user

        Returns:
            True if the record was added, False if it was removed
        """
        pass

    @abstractmethod
    async def exists(self, comment_id: CommentId, emoji: str, user_id: UserId) -> bool:
        """Check whether a reaction record is present."""
        pass

    @abstractmethod
    async def find_by_comment(self, comment_id: CommentId) -> List[Reaction]:
        """Find all reaction records of a comment, oldest first."""
        pass

    @abstractmethod
    async def delete_by_comments(self, comment_ids: Sequence[CommentId]) -> int:
        """Delete every reaction record attached to the given comments.

        Args:
            comment_ids: Comments whose reactions are removed

        Returns:
            Number of records removed
        """
        pass
