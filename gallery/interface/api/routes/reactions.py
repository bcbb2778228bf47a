"""Reaction routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel

from gallery.application.usecase.reaction import (
    ToggleReactionRequest,
    ToggleReactionResponse,
    ToggleReactionUseCase,
)
from gallery.domain.error import NotFoundError, ValidationError

router = APIRouter(tags=["reactions"], route_class=DishkaRoute)


class ToggleReactionAPIRequest(BaseModel):
    """API request for toggling a reaction."""

    emoji: str
    user_id: str


@router.post("/comments/{comment_id}/reactions", response_model=ToggleReactionResponse)
async def toggle_reaction(
    comment_id: str,
    request: ToggleReactionAPIRequest,
    toggle_reaction_use_case: FromDishka[ToggleReactionUseCase],
) -> ToggleReactionResponse:
    """Add the user's reaction if absent, remove it if present.

    Args:
        comment_id: Comment identifier
        request: Emoji and reacting user
        toggle_reaction_use_case: Toggle reaction use case from DI

    Returns:
        Acknowledgement only

    Raises:
        HTTPException: 400 on malformed input, 404 if the comment is missing
    """
    try:
        return await toggle_reaction_use_case.execute(
            ToggleReactionRequest(
                comment_id=comment_id,
                emoji=request.emoji,
                user_id=request.user_id,
            )
        )
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
