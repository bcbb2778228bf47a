"""SQLAlchemy transaction boundary."""

from contextlib import asynccontextmanager
from typing import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncSession

from gallery.domain.repository import TransactionManager


class SqlAlchemyTransactionManager(TransactionManager):
    """Runs a unit of work in a savepoint of the request session.

    The savepoint is rolled back on error; the enclosing request transaction
    is committed or rolled back by the session provider.
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    @asynccontextmanager
    async def atomic(self) -> AsyncIterator[None]:
        async with self.session.begin_nested():
            yield
