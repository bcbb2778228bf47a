"""Unit tests for CreateCommentUseCase."""

import pytest

from gallery.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentUseCase,
    GetCommentsRequest,
    GetCommentsUseCase,
)
from gallery.domain.error import NotFoundError, ValidationError
from gallery.domain.value import PhotoId
from gallery.persistence.repository.inmemory import InMemoryDatabase
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestCreateCommentUseCase:
    """Tests for posting comments through the use case."""

    @pytest.mark.asyncio
    async def test_created_comment_is_listed(self, unit_env):
        # Arrange
        database = await unit_env.get(InMemoryDatabase)
        database.add_photo(PhotoId("101"))
        create_use_case = await unit_env.get(CreateCommentUseCase)
        get_use_case = await unit_env.get(GetCommentsUseCase)

        # Act
        created = await create_use_case.execute(
            CreateCommentRequest(photo_id="101", author="Alice", text="Nice shot")
        )
        listed = await get_use_case.execute(GetCommentsRequest(photo_id="101"))

        # Assert
        assert created.photo_id == "101"
        assert created.reactions == {}
        assert listed.total == 1
        assert listed.comments[0].comment_id == created.comment_id

    @pytest.mark.asyncio
    async def test_reply_keeps_parent_id(self, unit_env):
        database = await unit_env.get(InMemoryDatabase)
        database.add_photo(PhotoId("101"))
        use_case = await unit_env.get(CreateCommentUseCase)
        parent = await use_case.execute(
            CreateCommentRequest(photo_id="101", author="Alice", text="Parent")
        )

        reply = await use_case.execute(
            CreateCommentRequest(
                photo_id="101",
                author="Bob",
                text="Reply",
                parent_id=parent.comment_id,
            )
        )

        assert reply.parent_id == parent.comment_id

    @pytest.mark.asyncio
    async def test_unknown_photo(self, unit_env):
        use_case = await unit_env.get(CreateCommentUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateCommentRequest(photo_id="999", author="Alice", text="Hi")
            )

    @pytest.mark.asyncio
    async def test_blank_text(self, unit_env):
        database = await unit_env.get(InMemoryDatabase)
        database.add_photo(PhotoId("101"))
        use_case = await unit_env.get(CreateCommentUseCase)

        with pytest.raises(ValidationError):
            await use_case.execute(
                CreateCommentRequest(photo_id="101", author="Alice", text=" ")
            )
