"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .database import InMemoryDatabase
from .photo import InMemoryPhotoRepository
from .reaction import InMemoryReactionRepository
from .transaction import InMemoryTransactionManager

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryDatabase",
    "InMemoryPhotoRepository",
    "InMemoryReactionRepository",
    "InMemoryTransactionManager",
]
