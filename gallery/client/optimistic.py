"""Optimistic updates with exact rollback.

A mutation is applied to local state before the server confirms it. If the
request fails, the state captured just before the mutation is put back.

Protocol per invocation:
1. capture the current value (the snapshot)
2. compute and install the tentative value
3. send the request
4. on success keep local state as it is; on failure install the snapshot
"""

from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Generic, TypeVar

import logfire

from gallery.client.state import LocalState

T = TypeVar("T")


class MutationRevertedError(Exception):
    """The server rejected an optimistic mutation; local state was restored."""

    def __init__(self, cause: Exception, snapshot: Any):
        self.cause = cause
        self.snapshot = snapshot
        super().__init__(f"Update failed and was reverted: {cause}")


@dataclass(frozen=True)
class OptimisticOutcome(Generic[T]):
    """Result of a confirmed optimistic mutation."""

    snapshot: T
    tentative: T
    response: Any


class OptimisticUpdateCoordinator(Generic[T]):
    """Runs mutations against a ``LocalState`` with capture/apply/revert.

    Each call owns its snapshot. When calls overlap and one fails, the
    failing call restores the value it captured, which may discard the
    tentative changes of calls that started after it.
    """

    def __init__(
        self,
        state: LocalState[T],
        on_error: Callable[[Exception], None] | None = None,
    ) -> None:
        self.state = state
        self.on_error = on_error

    async def run(
        self,
        mutate: Callable[[T], T],
        request: Callable[[], Awaitable[Any]],
        name: str = "mutation",
    ) -> OptimisticOutcome[T]:
        """Apply ``mutate`` locally, then confirm it with ``request``.

        Args:
            mutate: Pure function from the current value to the tentative one
            request: Sends the mutation to the server
            name: Label for logging

        Returns:
            The snapshot, the tentative value and the server response

        Raises:
            MutationRevertedError: If ``request`` failed; the snapshot has
                already been restored
        """
        snapshot = self.state.value
        tentative = mutate(snapshot)
        self.state.set(tentative)

        try:
            response = await request()
        except Exception as e:
            self.state.set(snapshot)
            logfire.warn("Optimistic update reverted", mutation=name, error=str(e))
            if self.on_error is not None:
                self.on_error(e)
            raise MutationRevertedError(e, snapshot) from e

        return OptimisticOutcome(snapshot=snapshot, tentative=tentative, response=response)
