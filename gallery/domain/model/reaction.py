"""Reaction entity.

A reaction records that one user reacted to one comment with one emoji.
The (comment_id, emoji, user_id) triple is the identity of the record.
"""

from datetime import datetime
from typing import Tuple

from pydantic import Field

from gallery.domain.model.comment import utcnow
from gallery.domain.model.common import DomainModel
from gallery.domain.value import CommentId, UserId


class Reaction(DomainModel):
    """Reaction record."""

    comment_id: CommentId
    emoji: str = Field(min_length=1, max_length=32)
    user_id: UserId
    created_at: datetime = Field(default_factory=utcnow)

    @property
    def key(self) -> Tuple[CommentId, str, UserId]:
        return (self.comment_id, self.emoji, self.user_id)
