"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from gallery.domain.model.comment import Comment
from gallery.domain.value import CommentId, PhotoId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Every comment returned carries its full reaction map.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_photo(self, photo_id: PhotoId) -> List[Comment]:
        """Find all comments for a photo, oldest first.

        Args:
            photo_id: The photo ID

        Returns:
            Flat list of comments ordered by created_at ascending
        """
        pass

    @abstractmethod
    async def find_latest(self, limit: int) -> List[Comment]:
        """Find the most recent comments across all photos.

        Implementations must read comments and reactions from one snapshot.

        Args:
            limit: Maximum number of comments to return

        Returns:
            Comments ordered by created_at descending
        """
        pass

    @abstractmethod
    async def find_child_ids(
        self, parent_ids: Sequence[CommentId]
    ) -> List[CommentId]:
        """Find the ids of direct replies to any of the given comments.

        Args:
            parent_ids: Comments whose direct children are wanted

        Returns:
            Child comment ids, in no particular order
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Persist a new comment.

        Reactions on the passed entity are ignored; they live in the
        reaction store.

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def delete_many(self, comment_ids: Sequence[CommentId]) -> int:
        """Hard delete comments.

        Args:
            comment_ids: Comments to delete

        Returns:
            Number of comments removed
        """
        pass
