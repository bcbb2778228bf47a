"""Comment routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, Field

from gallery.application.usecase.comment import (
    CommentItem,
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentResponse,
    DeleteCommentUseCase,
    GetCommentTreeRequest,
    GetCommentTreeResponse,
    GetCommentTreeUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
)
from gallery.domain.error import NotFoundError, StoreFailureError, ValidationError

router = APIRouter(tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for posting a comment."""

    author: str
    text: str
    parent_id: str | None = None  # Parent comment ID for replies


@router.get("/photos/{photo_id}/comments", response_model=GetCommentsResponse)
async def get_comments(
    photo_id: str,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
) -> GetCommentsResponse:
    """List a photo's comments, oldest first, each with its reactions.

    Args:
        photo_id: Photo identifier
        get_comments_use_case: Get comments use case from DI

    Returns:
        Flat comment list; threads are rebuilt from parent_id
    """
    return await get_comments_use_case.execute(GetCommentsRequest(photo_id=photo_id))


@router.get("/photos/{photo_id}/comments/tree", response_model=GetCommentTreeResponse)
async def get_comment_tree(
    photo_id: str,
    get_comment_tree_use_case: FromDishka[GetCommentTreeUseCase],
) -> GetCommentTreeResponse:
    """List a photo's comments arranged as threads."""
    return await get_comment_tree_use_case.execute(
        GetCommentTreeRequest(photo_id=photo_id)
    )


@router.post(
    "/photos/{photo_id}/comments",
    response_model=CommentItem,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    photo_id: str,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
) -> CommentItem:
    """Post a comment on a photo or reply to another comment.

    Args:
        photo_id: Photo identifier
        request: Author, text and optional parent comment
        create_comment_use_case: Create comment use case from DI

    Returns:
        The created comment

    Raises:
        HTTPException: 400 on invalid data, 404 if photo or parent is missing
    """
    try:
        return await create_comment_use_case.execute(
            CreateCommentRequest(
                photo_id=photo_id,
                author=request.author,
                text=request.text,
                parent_id=request.parent_id,
            )
        )
    except NotFoundError as e:
        logfire.warn("Comment creation failed", error=str(e))
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.delete("/comments/{comment_id}", response_model=DeleteCommentResponse)
async def delete_comment(
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
) -> DeleteCommentResponse:
    """Delete a comment and every reply beneath it.

    Raises:
        HTTPException: 404 if the comment is missing, 500 if the store failed
    """
    try:
        return await delete_comment_use_case.execute(
            DeleteCommentRequest(comment_id=comment_id)
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except StoreFailureError as e:
        logfire.error("Comment deletion failed", comment_id=comment_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to delete comment",
        )
