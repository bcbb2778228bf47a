"""Transaction boundary interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractAsyncContextManager


class TransactionManager(ABC):
    """Groups repository calls into one all-or-nothing unit.

    Leaving the ``atomic()`` block with an exception discards every change
    made inside it and re-raises the exception.
    """

    @abstractmethod
    def atomic(self) -> AbstractAsyncContextManager[None]:
        pass
