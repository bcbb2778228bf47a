"""Strongly typed identifiers for gallery entities.

Identifiers are opaque string tokens. Photo and user ids come from the
catalog and the identity provider; comment ids are minted on creation.
"""

from typing import NewType
from uuid import uuid4

PhotoId = NewType("PhotoId", str)
CommentId = NewType("CommentId", str)
UserId = NewType("UserId", str)


def new_comment_id() -> CommentId:
    """Mint a fresh comment identifier."""
    return CommentId(uuid4().hex)
