"""PostgreSQL implementation of Reaction repository."""

from typing import List, Sequence

from sqlalchemy import and_, delete, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from gallery.domain.model import Reaction
from gallery.domain.repository import ReactionRepository
from gallery.domain.value import CommentId, UserId
from gallery.persistence.mappers import reaction_to_dict, row_to_reaction
from gallery.persistence.tables import comment_reactions_table


class PostgresReactionRepository(ReactionRepository):
    """PostgreSQL implementation of ReactionRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _matches(self, comment_id: CommentId, emoji: str, user_id: UserId):
        return and_(
            comment_reactions_table.c.comment_id == comment_id,
            comment_reactions_table.c.emoji == emoji,
            comment_reactions_table.c.user_id == user_id,
        )

    async def toggle(self, comment_id: CommentId, emoji: str, user_id: UserId) -> bool:
        """Flip one reaction record inside a savepoint.

        Delete-first: if a row was removed the toggle is done, otherwise the
        row is inserted. ON CONFLICT covers a concurrent insert of the same
        triple.
        """
        async with self.session.begin_nested():
            removed = await self.session.execute(
                delete(comment_reactions_table)
                .where(self._matches(comment_id, emoji, user_id))
                .returning(comment_reactions_table.c.comment_id)
            )
            if removed.first() is not None:
                return False

            reaction = Reaction(comment_id=comment_id, emoji=emoji, user_id=user_id)
            await self.session.execute(
                insert(comment_reactions_table)
                .values(**reaction_to_dict(reaction))
                .on_conflict_do_nothing(
                    index_elements=["comment_id", "emoji", "user_id"]
                )
            )
            return True

    async def exists(self, comment_id: CommentId, emoji: str, user_id: UserId) -> bool:
        stmt = select(comment_reactions_table.c.comment_id).where(
            self._matches(comment_id, emoji, user_id)
        )
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def find_by_comment(self, comment_id: CommentId) -> List[Reaction]:
        stmt = (
            select(comment_reactions_table)
            .where(comment_reactions_table.c.comment_id == comment_id)
            .order_by(comment_reactions_table.c.created_at)
        )
        result = await self.session.execute(stmt)
        return [row_to_reaction(row._asdict()) for row in result.fetchall()]

    async def delete_by_comments(self, comment_ids: Sequence[CommentId]) -> int:
        if not comment_ids:
            return 0
        stmt = delete(comment_reactions_table).where(
            comment_reactions_table.c.comment_id.in_(list(comment_ids))
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
