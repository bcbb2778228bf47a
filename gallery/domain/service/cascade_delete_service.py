"""Cascade deletion of comment threads."""

import logfire

from gallery.domain.error import DomainError, NotFoundError, StoreFailureError
from gallery.domain.repository import (
    CommentRepository,
    ReactionRepository,
    TransactionManager,
)
from gallery.domain.value import CommentId

from .base import Service


class CascadeDeleteService(Service):
    """Deletes a comment together with every transitive reply.

    The set of comments removed is the closure of the target under the
    "is a direct reply of" relation. Reactions of the closure are removed
    first, then the comments, all in one unit of work.
    """

    def __init__(
        self,
        comment_repository: CommentRepository,
        reaction_repository: ReactionRepository,
        transaction_manager: TransactionManager,
    ) -> None:
        self.comment_repository = comment_repository
        self.reaction_repository = reaction_repository
        self.transaction_manager = transaction_manager

    async def resolve_closure(self, comment_id: CommentId) -> list[CommentId]:
        """Collect a comment and all of its transitive replies.

        Breadth-first, one store round-trip per level. The visited set
        guarantees termination even if parent links form a cycle.

        Args:
            comment_id: Root of the closure

        Returns:
            Comment ids in breadth-first order, starting with ``comment_id``
        """
        closure: list[CommentId] = [comment_id]
        visited: set[CommentId] = {comment_id}
        frontier: list[CommentId] = [comment_id]

        while frontier:
            children = await self.comment_repository.find_child_ids(frontier)
            frontier = []
            for child_id in children:
                if child_id in visited:
                    continue
                visited.add(child_id)
                closure.append(child_id)
                frontier.append(child_id)
        return closure

    async def delete(self, comment_id: CommentId) -> list[CommentId]:
        """Delete a comment and its whole reply subtree atomically.

        Args:
            comment_id: Comment to delete

        Returns:
            Ids of the deleted comments

        Raises:
            NotFoundError: If the comment does not exist; nothing is changed
            StoreFailureError: If the store fails; nothing is changed
        """
        with logfire.span(
            "cascade_delete_service.delete", comment_id=str(comment_id)
        ):
            try:
                async with self.transaction_manager.atomic():
                    comment = await self.comment_repository.find_by_id(comment_id)
                    if not comment:
                        logfire.warn("Delete of unknown comment", comment_id=str(comment_id))
                        raise NotFoundError("Comment", str(comment_id))

                    closure = await self.resolve_closure(comment_id)
                    removed_reactions = await self.reaction_repository.delete_by_comments(
                        closure
                    )
                    removed_comments = await self.comment_repository.delete_many(closure)
            except DomainError:
                raise
            except Exception as e:
                logfire.error(
                    "Cascade delete rolled back",
                    comment_id=str(comment_id),
                    error=str(e),
                )
                raise StoreFailureError("cascade delete", e) from e

            logfire.info(
                "Comment thread deleted",
                comment_id=str(comment_id),
                comments=removed_comments,
                reactions=removed_reactions,
            )
            return closure
