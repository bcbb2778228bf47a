"""Latest-comments feed routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, Query, status

from gallery.application.usecase.feed import (
    GetLatestCommentsRequest,
    GetLatestCommentsResponse,
    GetLatestCommentsUseCase,
)
from gallery.domain.error import ValidationError

router = APIRouter(tags=["feed"], route_class=DishkaRoute)


@router.get("/comments/latest", response_model=GetLatestCommentsResponse)
async def get_latest_comments(
    get_latest_comments_use_case: FromDishka[GetLatestCommentsUseCase],
    limit: str | None = Query(default=None),
) -> GetLatestCommentsResponse:
    """Most recent comments across all photos, newest first.

    Args:
        get_latest_comments_use_case: Feed use case from DI
        limit: Requested size; defaults to 5, capped at 20

    Raises:
        HTTPException: 400 if limit is not an integer
    """
    try:
        return await get_latest_comments_use_case.execute(
            GetLatestCommentsRequest(limit=limit)
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
