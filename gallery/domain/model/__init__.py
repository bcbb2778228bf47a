"""Domain model entities for the gallery."""

from gallery.domain.model.comment import Comment
from gallery.domain.model.reaction import Reaction

__all__ = [
    "Comment",
    "Reaction",
]
