"""Unit tests for ToggleReactionUseCase."""

import pytest

from gallery.application.usecase.comment import GetCommentsRequest, GetCommentsUseCase
from gallery.application.usecase.reaction import (
    ToggleReactionRequest,
    ToggleReactionUseCase,
)
from gallery.domain.error import NotFoundError
from gallery.domain.repository import CommentRepository
from tests.conftest import make_comment
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestToggleReactionUseCase:
    @pytest.mark.asyncio
    async def test_response_is_ack_only(self, unit_env):
        comment_repo = await unit_env.get(CommentRepository)
        await comment_repo.save(make_comment("c1"))
        use_case = await unit_env.get(ToggleReactionUseCase)

        response = await use_case.execute(
            ToggleReactionRequest(comment_id="c1", emoji="👍", user_id="u1")
        )

        assert response.model_dump() == {"success": True}

    @pytest.mark.asyncio
    async def test_reactions_show_up_in_listing_sorted(self, unit_env):
        comment_repo = await unit_env.get(CommentRepository)
        await comment_repo.save(make_comment("c1"))
        use_case = await unit_env.get(ToggleReactionUseCase)
        get_use_case = await unit_env.get(GetCommentsUseCase)

        for user in ("u2", "u1"):
            await use_case.execute(
                ToggleReactionRequest(comment_id="c1", emoji="❤️", user_id=user)
            )
        listed = await get_use_case.execute(GetCommentsRequest(photo_id="p1"))

        assert listed.comments[0].reactions == {"❤️": ["u1", "u2"]}

    @pytest.mark.asyncio
    async def test_unknown_comment(self, unit_env):
        use_case = await unit_env.get(ToggleReactionUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                ToggleReactionRequest(comment_id="nope", emoji="👍", user_id="u1")
            )
