"""In-memory transaction boundary for testing."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from gallery.domain.repository.transaction import TransactionManager

from .database import InMemoryDatabase


class InMemoryTransactionManager(TransactionManager):
    """Restores a snapshot of the database when the unit of work fails."""

    def __init__(self, database: InMemoryDatabase | None = None) -> None:
        self.database = database or InMemoryDatabase()

    @asynccontextmanager
    async def atomic(self) -> AsyncIterator[None]:
        snapshot = self.database.snapshot()
        try:
            yield
        except BaseException:
            self.database.restore(snapshot)
            raise
