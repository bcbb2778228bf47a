"""Shared in-memory storage for the in-memory repositories."""

from dataclasses import dataclass, field
from typing import Tuple

from gallery.domain.model import Comment, Reaction
from gallery.domain.value import CommentId, PhotoId, UserId

ReactionKey = Tuple[CommentId, str, UserId]


@dataclass
class InMemoryDatabase:
    """Tables shared by the in-memory repositories of one container.

    Dicts keep insertion order, which stands in for creation order.
    """

    photos: set[PhotoId] = field(default_factory=set)
    comments: dict[CommentId, Comment] = field(default_factory=dict)
    reactions: dict[ReactionKey, Reaction] = field(default_factory=dict)

    def add_photo(self, photo_id: PhotoId) -> None:
        self.photos.add(photo_id)

    def snapshot(self) -> "InMemoryDatabase":
        return InMemoryDatabase(
            photos=set(self.photos),
            comments=dict(self.comments),
            reactions=dict(self.reactions),
        )

    def restore(self, snapshot: "InMemoryDatabase") -> None:
        self.photos = set(snapshot.photos)
        self.comments = dict(snapshot.comments)
        self.reactions = dict(snapshot.reactions)
