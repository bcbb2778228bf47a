"""Comment entity.

Comments are attached to a photo and may reply to another comment on the
same photo, forming threads of unlimited depth.
"""

from datetime import datetime, timezone
from typing import Dict, FrozenSet, Optional

from pydantic import Field, field_validator

from gallery.domain.model.common import DomainModel
from gallery.domain.value import CommentId, PhotoId, UserId
from gallery.domain.value.reactions import normalize_reactions, toggle_reactor


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Comment(DomainModel):
    """Comment entity.

    Threading is expressed only through ``parent_id`` (None for top-level).
    ``reactions`` is a derived view over the reaction records of this
    comment; empty reactor sets never appear in it.
    """

    id: CommentId
    photo_id: PhotoId
    author: str = Field(min_length=1, max_length=255)
    text: str = Field(min_length=1, max_length=10000)
    parent_id: Optional[CommentId] = None
    created_at: datetime = Field(default_factory=utcnow)
    reactions: Dict[str, FrozenSet[UserId]] = Field(default_factory=dict)

    @field_validator("reactions")
    @classmethod
    def drop_empty_reactions(
        cls, v: Dict[str, FrozenSet[UserId]]
    ) -> Dict[str, FrozenSet[UserId]]:
        return normalize_reactions(v)

    @property
    def is_reply(self) -> bool:
        return self.parent_id is not None

    def with_reaction_toggled(self, emoji: str, user_id: UserId) -> "Comment":
        """Return a copy with ``user_id`` flipped in the ``emoji`` reactor set."""
        return self.model_copy(
            update={"reactions": toggle_reactor(self.reactions, emoji, user_id)}
        )
