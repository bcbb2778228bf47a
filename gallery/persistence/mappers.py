"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so mapping is manual.
"""

from typing import Any, Dict

from gallery.domain.model import Comment, Reaction
from gallery.domain.value import CommentId, PhotoId, ReactionMap, UserId


def row_to_comment(row: Dict[str, Any], reactions: ReactionMap | None = None) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict
        reactions: Reaction map gathered for this comment

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(row["id"]),
        photo_id=PhotoId(row["photo_id"]),
        author=row["author"],
        text=row["text"],
        parent_id=CommentId(row["parent_id"]) if row.get("parent_id") else None,
        created_at=row["created_at"],
        reactions=reactions or {},
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to a comments-table row.

    Reactions are stored in their own table and are left out.
    """
    return {
        "id": comment.id,
        "photo_id": comment.photo_id,
        "author": comment.author,
        "text": comment.text,
        "parent_id": comment.parent_id,
        "created_at": comment.created_at,
    }


def row_to_reaction(row: Dict[str, Any]) -> Reaction:
    return Reaction(
        comment_id=CommentId(row["comment_id"]),
        emoji=row["emoji"],
        user_id=UserId(row["user_id"]),
        created_at=row["created_at"],
    )


def reaction_to_dict(reaction: Reaction) -> Dict[str, Any]:
    return reaction.model_dump()
