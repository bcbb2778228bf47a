"""Delete comment use case."""

from pydantic import BaseModel

from gallery.domain.service import CascadeDeleteService
from gallery.domain.value import CommentId

from ..base import BaseUseCase


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str


class DeleteCommentResponse(BaseModel):
    """Delete comment response."""

    success: bool
    deleted_count: int


class DeleteCommentUseCase(BaseUseCase):
    """Use case for deleting a comment with all of its replies.

    Permission to delete is decided by the client; the server does not
    check who is asking.
    """

    def __init__(self, cascade_delete_service: CascadeDeleteService) -> None:
        self.cascade_delete_service = cascade_delete_service

    async def execute(self, request: DeleteCommentRequest) -> DeleteCommentResponse:
        """Execute delete comment flow.

        Raises:
            NotFoundError: If the comment does not exist
            StoreFailureError: If the deletion was rolled back
        """
        deleted = await self.cascade_delete_service.delete(
            CommentId(request.comment_id)
        )
        return DeleteCommentResponse(success=True, deleted_count=len(deleted))
