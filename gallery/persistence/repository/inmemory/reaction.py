"""In-memory reaction repository for testing."""

from typing import Sequence

from gallery.domain.model.reaction import Reaction
from gallery.domain.repository.reaction import ReactionRepository
from gallery.domain.value import CommentId, UserId

from .database import InMemoryDatabase


class InMemoryReactionRepository(ReactionRepository):
    """In-memory implementation of ReactionRepository for testing."""

    def __init__(self, database: InMemoryDatabase | None = None) -> None:
        self.database = database or InMemoryDatabase()

    async def toggle(self, comment_id: CommentId, emoji: str, user_id: UserId) -> bool:
        key = (comment_id, emoji, user_id)
        if self.database.reactions.pop(key, None) is not None:
            return False
        self.database.reactions[key] = Reaction(
            comment_id=comment_id, emoji=emoji, user_id=user_id
        )
        return True

    async def exists(self, comment_id: CommentId, emoji: str, user_id: UserId) -> bool:
        return (comment_id, emoji, user_id) in self.database.reactions

    async def find_by_comment(self, comment_id: CommentId) -> list[Reaction]:
        return [r for r in self.database.reactions.values() if r.comment_id == comment_id]

    async def delete_by_comments(self, comment_ids: Sequence[CommentId]) -> int:
        targets = set(comment_ids)
        doomed = [key for key in self.database.reactions if key[0] in targets]
        for key in doomed:
            del self.database.reactions[key]
        return len(doomed)
