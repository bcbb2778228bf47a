"""Domain value objects for the gallery."""

from gallery.domain.value.identifiers import (
    CommentId,
    PhotoId,
    UserId,
    new_comment_id,
)
from gallery.domain.value.reactions import (
    ReactionMap,
    group_reactions,
    normalize_reactions,
    toggle_reactor,
)
from gallery.domain.value.types import (
    DEFAULT_REACTIONS,
    AuthorName,
    Emoji,
    UserRole,
)

__all__ = [
    # Identifiers
    "CommentId",
    "PhotoId",
    "UserId",
    "new_comment_id",
    # Reactions
    "ReactionMap",
    "group_reactions",
    "normalize_reactions",
    "toggle_reactor",
    # Types
    "DEFAULT_REACTIONS",
    "AuthorName",
    "Emoji",
    "UserRole",
]
