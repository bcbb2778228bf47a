"""Unit tests for optimistic updates with rollback."""

import pytest

from gallery.client import (
    LocalState,
    MutationRevertedError,
    OptimisticUpdateCoordinator,
    toggle_comment_reaction,
)
from gallery.domain.value import CommentId
from tests.conftest import make_comment


async def ok():
    return {"success": True}


async def fail():
    raise RuntimeError("server unavailable")


class TestOptimisticUpdateCoordinator:
    @pytest.mark.asyncio
    async def test_success_keeps_tentative_value(self):
        state = LocalState((make_comment("c1"),))
        coordinator = OptimisticUpdateCoordinator(state)

        outcome = await coordinator.run(
            lambda comments: toggle_comment_reaction(comments, CommentId("c1"), "👍", "u1"),
            ok,
        )

        assert state.value is outcome.tentative
        assert state.value[0].reactions == {"👍": frozenset({"u1"})}
        assert outcome.response == {"success": True}

    @pytest.mark.asyncio
    async def test_failure_restores_exact_snapshot(self):
        before = (make_comment("c1", reactions={"👍": {"u2"}}),)
        state = LocalState(before)
        errors = []
        coordinator = OptimisticUpdateCoordinator(state, on_error=errors.append)

        with pytest.raises(MutationRevertedError) as exc_info:
            await coordinator.run(
                lambda comments: toggle_comment_reaction(
                    comments, CommentId("c1"), "👍", "u1"
                ),
                fail,
            )

        assert state.value is before
        assert exc_info.value.snapshot is before
        assert isinstance(exc_info.value.cause, RuntimeError)
        assert len(errors) == 1

    @pytest.mark.asyncio
    async def test_listeners_see_tentative_then_snapshot(self):
        before = ("a",)
        state = LocalState(before)
        seen = []
        state.subscribe(seen.append)
        coordinator = OptimisticUpdateCoordinator(state)

        with pytest.raises(MutationRevertedError):
            await coordinator.run(lambda value: value + ("b",), fail)

        assert seen == [("a", "b"), ("a",)]

    @pytest.mark.asyncio
    async def test_each_invocation_has_its_own_snapshot(self):
        state = LocalState(0)
        coordinator = OptimisticUpdateCoordinator(state)

        first = await coordinator.run(lambda v: v + 1, ok)
        with pytest.raises(MutationRevertedError) as exc_info:
            await coordinator.run(lambda v: v + 10, fail)

        assert first.snapshot == 0
        assert exc_info.value.snapshot == 1
        assert state.value == 1


class TestLocalState:
    def test_unsubscribe_stops_notifications(self):
        state = LocalState(1)
        seen = []
        unsubscribe = state.subscribe(seen.append)

        state.set(2)
        unsubscribe()
        state.set(3)

        assert seen == [2]
        assert state.value == 3
