"""In-memory comment repository for testing."""

from typing import Optional, Sequence

from gallery.domain.model.comment import Comment
from gallery.domain.repository.comment import CommentRepository
from gallery.domain.value import CommentId, PhotoId, group_reactions

from .database import InMemoryDatabase


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, database: InMemoryDatabase | None = None) -> None:
        self.database = database or InMemoryDatabase()

    def _attach_reactions(self, comments: list[Comment]) -> list[Comment]:
        reactions = group_reactions(self.database.reactions.keys())
        return [
            comment.model_copy(update={"reactions": reactions.get(comment.id, {})})
            for comment in comments
        ]

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        comment = self.database.comments.get(comment_id)
        if comment is None:
            return None
        return self._attach_reactions([comment])[0]

    async def find_by_photo(self, photo_id: PhotoId) -> list[Comment]:
        comments = [c for c in self.database.comments.values() if c.photo_id == photo_id]
        # Stable sort keeps insertion order for equal timestamps
        comments.sort(key=lambda c: c.created_at)
        return self._attach_reactions(comments)

    async def find_latest(self, limit: int) -> list[Comment]:
        comments = list(self.database.comments.values())
        # Later insertions win ties
        comments.reverse()
        comments.sort(key=lambda c: c.created_at, reverse=True)
        return self._attach_reactions(comments[:limit])

    async def find_child_ids(self, parent_ids: Sequence[CommentId]) -> list[CommentId]:
        parents = set(parent_ids)
        return [
            c.id for c in self.database.comments.values() if c.parent_id in parents
        ]

    async def save(self, comment: Comment) -> Comment:
        stored = comment.model_copy(update={"reactions": {}})
        self.database.comments[comment.id] = stored
        return stored

    async def delete_many(self, comment_ids: Sequence[CommentId]) -> int:
        removed = 0
        for comment_id in comment_ids:
            if self.database.comments.pop(comment_id, None) is not None:
                removed += 1
        return removed
