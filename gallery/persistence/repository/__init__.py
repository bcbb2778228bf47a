"""PostgreSQL repository implementations."""

from gallery.persistence.repository.comment import PostgresCommentRepository
from gallery.persistence.repository.photo import PostgresPhotoRepository
from gallery.persistence.repository.reaction import PostgresReactionRepository
from gallery.persistence.repository.transaction import SqlAlchemyTransactionManager

__all__ = [
    "PostgresCommentRepository",
    "PostgresPhotoRepository",
    "PostgresReactionRepository",
    "SqlAlchemyTransactionManager",
]
