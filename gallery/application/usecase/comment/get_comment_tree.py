"""Get comment tree use case."""

from pydantic import BaseModel

from gallery.domain.service import CommentService, build_comment_forest, iter_forest
from gallery.domain.service.comment_tree import CommentTreeNode
from gallery.domain.value import PhotoId

from ..base import BaseUseCase
from .get_comments import CommentItem


class CommentNodeResponse(BaseModel):
    """Comment thread node for API response.

    Nodes are returned flat in thread order; ``reply_ids`` and ``depth``
    carry the nesting, so reply chains of any length serialize safely.
    """

    comment: CommentItem
    depth: int  # 0 for top-level comments
    reply_ids: list[str]

    @classmethod
    def from_domain(cls, node: CommentTreeNode, depth: int) -> "CommentNodeResponse":
        return cls(
            comment=CommentItem.from_domain(node.comment),
            depth=depth,
            reply_ids=[reply.comment.id for reply in node.replies],
        )


class GetCommentTreeRequest(BaseModel):
    """Get comment tree request."""

    photo_id: str


class GetCommentTreeResponse(BaseModel):
    """Get comment tree response."""

    photo_id: str
    root_ids: list[str]
    nodes: list[CommentNodeResponse]  # Pre-order: each thread, then its replies
    total: int


class GetCommentTreeUseCase(BaseUseCase):
    """Use case for a photo's comments arranged as threads.

    Replies whose parent is gone are shown as top-level threads.
    """

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: GetCommentTreeRequest) -> GetCommentTreeResponse:
        comments = await self.comment_service.get_comments_for_photo(
            PhotoId(request.photo_id)
        )
        forest = build_comment_forest(comments)

        # Pre-order visits a parent before its replies
        depths = {root.comment.id: 0 for root in forest}
        nodes = []
        for node in iter_forest(forest):
            depth = depths[node.comment.id]
            for reply in node.replies:
                depths[reply.comment.id] = depth + 1
            nodes.append(CommentNodeResponse.from_domain(node, depth))

        return GetCommentTreeResponse(
            photo_id=request.photo_id,
            root_ids=[root.comment.id for root in forest],
            nodes=nodes,
            total=len(nodes),
        )
