"""Unit tests for DeleteCommentUseCase."""

import pytest

from gallery.application.usecase.comment import (
    DeleteCommentRequest,
    DeleteCommentUseCase,
    GetCommentsRequest,
    GetCommentsUseCase,
)
from gallery.domain.error import NotFoundError
from gallery.domain.repository import CommentRepository, ReactionRepository
from gallery.domain.value import CommentId, UserId
from tests.conftest import make_comment
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestDeleteCommentUseCase:
    @pytest.mark.asyncio
    async def test_deleting_thread_root_empties_thread(self, unit_env):
        """c1 <- c2 <- c3 on photo p1; deleting c1 removes all three."""
        comment_repo = await unit_env.get(CommentRepository)
        reaction_repo = await unit_env.get(ReactionRepository)
        await comment_repo.save(make_comment("c1", minute=0))
        await comment_repo.save(make_comment("c2", parent_id="c1", minute=1))
        await comment_repo.save(make_comment("c3", parent_id="c2", minute=2))
        await reaction_repo.toggle(CommentId("c3"), "😮", UserId("u1"))
        delete_use_case = await unit_env.get(DeleteCommentUseCase)
        get_use_case = await unit_env.get(GetCommentsUseCase)

        response = await delete_use_case.execute(DeleteCommentRequest(comment_id="c1"))
        listed = await get_use_case.execute(GetCommentsRequest(photo_id="p1"))

        assert response.success is True
        assert response.deleted_count == 3
        assert listed.comments == []
        assert await reaction_repo.find_by_comment(CommentId("c3")) == []

    @pytest.mark.asyncio
    async def test_unknown_comment(self, unit_env):
        use_case = await unit_env.get(DeleteCommentUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(DeleteCommentRequest(comment_id="missing"))
