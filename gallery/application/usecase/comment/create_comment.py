"""Create comment use case."""

from pydantic import BaseModel

from gallery.domain.service import CommentService
from gallery.domain.value import CommentId, PhotoId

from ..base import BaseUseCase
from .get_comments import CommentItem


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    photo_id: str
    author: str  # Display name of the signed-in user
    text: str
    parent_id: str | None = None  # Parent comment ID for replies


class CreateCommentUseCase(BaseUseCase):
    """Use case for posting a comment on a photo or replying to a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CommentItem:
        """Execute create comment flow.

        Args:
            request: Create comment request

        Returns:
            The stored comment, with an empty reaction map

        Raises:
            ValidationError: If author or text is invalid
            NotFoundError: If the photo or parent comment does not exist
        """
        comment = await self.comment_service.create_comment(
            photo_id=PhotoId(request.photo_id),
            author=request.author,
            text=request.text,
            parent_id=CommentId(request.parent_id) if request.parent_id else None,
        )
        return CommentItem.from_domain(comment)
