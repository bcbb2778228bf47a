"""Unit tests for CascadeDeleteService."""

import pytest

from gallery.domain.error import NotFoundError, StoreFailureError
from gallery.domain.repository import CommentRepository, ReactionRepository
from gallery.domain.service import CascadeDeleteService
from gallery.domain.value import CommentId, UserId
from gallery.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryDatabase,
    InMemoryReactionRepository,
    InMemoryTransactionManager,
)
from tests.conftest import make_comment
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def _seed_chain(comment_repo: CommentRepository) -> None:
    """Seed A <- B <- C <- D plus an unrelated E."""
    await comment_repo.save(make_comment("A", minute=0))
    await comment_repo.save(make_comment("B", parent_id="A", minute=1))
    await comment_repo.save(make_comment("C", parent_id="B", minute=2))
    await comment_repo.save(make_comment("D", parent_id="C", minute=3))
    await comment_repo.save(make_comment("E", minute=4))


class TestResolveClosure:
    """Tests for resolve_closure."""

    @pytest.mark.asyncio
    async def test_closure_includes_all_descendants(self, unit_env):
        service = await unit_env.get(CascadeDeleteService)
        comment_repo = await unit_env.get(CommentRepository)
        await _seed_chain(comment_repo)
        await comment_repo.save(make_comment("B2", parent_id="A", minute=5))

        closure = await service.resolve_closure(CommentId("A"))

        assert closure[0] == "A"
        assert set(closure) == {"A", "B", "B2", "C", "D"}

    @pytest.mark.asyncio
    async def test_closure_is_breadth_first(self, unit_env):
        service = await unit_env.get(CascadeDeleteService)
        comment_repo = await unit_env.get(CommentRepository)
        await _seed_chain(comment_repo)

        closure = await service.resolve_closure(CommentId("A"))

        assert closure == ["A", "B", "C", "D"]

    @pytest.mark.asyncio
    async def test_cycle_in_parent_links_terminates(self, unit_env):
        """Corrupt data where X and Y are each other's parent."""
        service = await unit_env.get(CascadeDeleteService)
        comment_repo = await unit_env.get(CommentRepository)
        await comment_repo.save(make_comment("X", parent_id="Y", minute=0))
        await comment_repo.save(make_comment("Y", parent_id="X", minute=1))

        closure = await service.resolve_closure(CommentId("X"))

        assert sorted(closure) == ["X", "Y"]


class TestDelete:
    """Tests for delete."""

    @pytest.mark.asyncio
    async def test_delete_mid_chain_removes_subtree_only(self, unit_env):
        service = await unit_env.get(CascadeDeleteService)
        comment_repo = await unit_env.get(CommentRepository)
        await _seed_chain(comment_repo)

        deleted = await service.delete(CommentId("C"))

        assert sorted(deleted) == ["C", "D"]
        assert await comment_repo.find_by_id(CommentId("C")) is None
        assert await comment_repo.find_by_id(CommentId("D")) is None
        assert await comment_repo.find_by_id(CommentId("A")) is not None
        assert await comment_repo.find_by_id(CommentId("B")) is not None
        assert await comment_repo.find_by_id(CommentId("E")) is not None

    @pytest.mark.asyncio
    async def test_delete_removes_reactions_of_closure(self, unit_env):
        service = await unit_env.get(CascadeDeleteService)
        comment_repo = await unit_env.get(CommentRepository)
        reaction_repo = await unit_env.get(ReactionRepository)
        await _seed_chain(comment_repo)
        await reaction_repo.toggle(CommentId("D"), "👍", UserId("u1"))
        await reaction_repo.toggle(CommentId("A"), "👍", UserId("u1"))

        await service.delete(CommentId("B"))

        assert await reaction_repo.find_by_comment(CommentId("D")) == []
        assert await reaction_repo.exists(CommentId("A"), "👍", UserId("u1"))

    @pytest.mark.asyncio
    async def test_delete_unknown_comment_raises_not_found(self, unit_env):
        service = await unit_env.get(CascadeDeleteService)
        comment_repo = await unit_env.get(CommentRepository)
        await _seed_chain(comment_repo)

        with pytest.raises(NotFoundError):
            await service.delete(CommentId("nope"))

        assert len(await comment_repo.find_by_photo("p1")) == 5


class FailingCommentRepository(InMemoryCommentRepository):
    """Comment store whose bulk delete always fails."""

    async def delete_many(self, comment_ids):
        raise RuntimeError("disk full")


class TestDeleteAtomicity:
    """A store failure leaves comments and reactions untouched."""

    @pytest.mark.asyncio
    async def test_failure_after_reaction_delete_rolls_back(self):
        database = InMemoryDatabase()
        comment_repo = FailingCommentRepository(database)
        reaction_repo = InMemoryReactionRepository(database)
        service = CascadeDeleteService(
            comment_repository=comment_repo,
            reaction_repository=reaction_repo,
            transaction_manager=InMemoryTransactionManager(database),
        )
        await _seed_chain(comment_repo)
        await reaction_repo.toggle(CommentId("C"), "❤️", UserId("u2"))

        with pytest.raises(StoreFailureError):
            await service.delete(CommentId("B"))

        assert await reaction_repo.exists(CommentId("C"), "❤️", UserId("u2"))
        assert len(database.comments) == 5
