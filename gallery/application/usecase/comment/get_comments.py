"""Get comments use case."""

from datetime import datetime

from pydantic import BaseModel

from gallery.domain.model.comment import Comment
from gallery.domain.service import CommentService
from gallery.domain.value import PhotoId

from ..base import BaseUseCase


class CommentItem(BaseModel):
    """Comment item in response."""

    comment_id: str
    photo_id: str
    author: str
    text: str
    created_at: datetime
    parent_id: str | None
    reactions: dict[str, list[str]]  # emoji -> sorted user ids

    @classmethod
    def from_domain(cls, comment: Comment) -> "CommentItem":
        return cls(
            comment_id=str(comment.id),
            photo_id=str(comment.photo_id),
            author=comment.author,
            text=comment.text,
            created_at=comment.created_at,
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            reactions={
                emoji: sorted(str(user_id) for user_id in users)
                for emoji, users in comment.reactions.items()
            },
        )


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    photo_id: str


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    photo_id: str
    comments: list[CommentItem]
    total: int


class GetCommentsUseCase(BaseUseCase):
    """Use case for listing a photo's comments as a flat, oldest-first list."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Args:
            request: Get comments request with photo ID

        Returns:
            Flat comment list with reactions; clients rebuild threads
        """
        comments = await self.comment_service.get_comments_for_photo(
            PhotoId(request.photo_id)
        )
        items = [CommentItem.from_domain(comment) for comment in comments]
        return GetCommentsResponse(
            photo_id=request.photo_id,
            comments=items,
            total=len(items),
        )
