"""Test configuration and helpers."""

from datetime import datetime, timedelta, timezone

from gallery.domain.model import Comment
from gallery.domain.value import CommentId, PhotoId, UserId

BASE_TIME = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


def make_comment(
    comment_id: str,
    parent_id: str | None = None,
    photo_id: str = "p1",
    author: str = "Alice",
    text: str | None = None,
    minute: int = 0,
    reactions: dict[str, set[str]] | None = None,
) -> Comment:
    """Build a comment with predictable defaults.

    ``minute`` offsets created_at from a fixed base so ordering is explicit.
    """
    return Comment(
        id=CommentId(comment_id),
        photo_id=PhotoId(photo_id),
        author=author,
        text=text or f"comment {comment_id}",
        parent_id=CommentId(parent_id) if parent_id else None,
        created_at=BASE_TIME + timedelta(minutes=minute),
        reactions={
            emoji: frozenset(UserId(u) for u in users)
            for emoji, users in (reactions or {}).items()
        },
    )
