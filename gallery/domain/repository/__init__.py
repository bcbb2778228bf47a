"""Repository interfaces for the gallery domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from gallery.domain.repository.comment import CommentRepository
from gallery.domain.repository.photo import PhotoRepository
from gallery.domain.repository.reaction import ReactionRepository
from gallery.domain.repository.transaction import TransactionManager

__all__ = [
    "CommentRepository",
    "PhotoRepository",
    "ReactionRepository",
    "TransactionManager",
]
