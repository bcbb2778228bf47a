"""Client-side components of the gallery discussion UI."""

from .factory import GalleryClient
from .feed import FeedPoller
from .optimistic import (
    MutationRevertedError,
    OptimisticOutcome,
    OptimisticUpdateCoordinator,
)
from .session import CurrentUser
from .state import LocalState
from .thread import CommentThreadView, toggle_comment_reaction

__all__ = [
    "CommentThreadView",
    "CurrentUser",
    "FeedPoller",
    "GalleryClient",
    "LocalState",
    "MutationRevertedError",
    "OptimisticOutcome",
    "OptimisticUpdateCoordinator",
    "toggle_comment_reaction",
]
