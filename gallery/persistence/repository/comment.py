"""PostgreSQL implementation of Comment repository."""

from typing import Any, Iterable, List, Optional, Sequence

from sqlalchemy import delete, desc, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from gallery.domain.model import Comment
from gallery.domain.repository import CommentRepository
from gallery.domain.value import CommentId, PhotoId, group_reactions
from gallery.persistence.mappers import comment_to_dict, row_to_comment
from gallery.persistence.tables import comment_reactions_table, comments_table


def _with_reactions(comments):
    """Select comment columns plus one (emoji, user_id) pair per reaction.

    Comments without reactions appear once with NULL emoji and user_id.
    """
    return select(
        comments_table,
        comment_reactions_table.c.emoji,
        comment_reactions_table.c.user_id,
    ).select_from(
        comments.outerjoin(
            comment_reactions_table,
            comment_reactions_table.c.comment_id == comments_table.c.id,
        )
    )


def _rows_to_comments(rows: Iterable[Any]) -> List[Comment]:
    """Fold joined rows back into comments, keeping first-seen order."""
    comment_rows: dict[str, dict[str, Any]] = {}
    reaction_rows = []
    for row in rows:
        data = row._asdict()
        emoji = data.pop("emoji")
        user_id = data.pop("user_id")
        comment_rows.setdefault(data["id"], data)
        if emoji is not None:
            reaction_rows.append((data["id"], emoji, user_id))

    reactions = group_reactions(reaction_rows)
    return [
        row_to_comment(data, reactions.get(comment_id))
        for comment_id, data in comment_rows.items()
    ]


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository.

    Comments and their reactions are read with a single joined statement,
    so each read observes one snapshot.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = _with_reactions(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        comments = _rows_to_comments(result.fetchall())
        return comments[0] if comments else None

    async def find_by_photo(self, photo_id: PhotoId) -> List[Comment]:
        """Find all comments for a photo, oldest first."""
        stmt = (
            _with_reactions(comments_table)
            .where(comments_table.c.photo_id == photo_id)
            .order_by(comments_table.c.created_at, comments_table.c.seq)
        )
        result = await self.session.execute(stmt)
        return _rows_to_comments(result.fetchall())

    async def find_latest(self, limit: int) -> List[Comment]:
        """Find the most recent comments across all photos."""
        latest = (
            select(comments_table.c.id)
            .order_by(desc(comments_table.c.created_at), desc(comments_table.c.seq))
            .limit(limit)
            .subquery()
        )
        stmt = (
            _with_reactions(
                comments_table.join(latest, latest.c.id == comments_table.c.id)
            )
            .order_by(desc(comments_table.c.created_at), desc(comments_table.c.seq))
        )
        result = await self.session.execute(stmt)
        return _rows_to_comments(result.fetchall())

    async def find_child_ids(self, parent_ids: Sequence[CommentId]) -> List[CommentId]:
        """Find ids of direct replies to any of the given comments."""
        if not parent_ids:
            return []
        stmt = select(comments_table.c.id).where(
            comments_table.c.parent_id.in_(list(parent_ids))
        )
        result = await self.session.execute(stmt)
        return [CommentId(row.id) for row in result.fetchall()]

    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        stmt = insert(comments_table).values(**comment_to_dict(comment))
        await self.session.execute(stmt)
        await self.session.flush()
        return comment.model_copy(update={"reactions": {}})

    async def delete_many(self, comment_ids: Sequence[CommentId]) -> int:
        """Hard delete comments by id."""
        if not comment_ids:
            return 0
        stmt = delete(comments_table).where(comments_table.c.id.in_(list(comment_ids)))
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
