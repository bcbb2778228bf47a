"""Domain services."""

from .base import Service
from .cascade_delete_service import CascadeDeleteService
from .comment_service import CommentService
from .comment_tree import CommentTreeNode, build_comment_forest, count_nodes, iter_forest
from .feed_service import FeedService, clamp_feed_limit
from .reaction_service import ReactionService

__all__ = [
    "CascadeDeleteService",
    "CommentService",
    "CommentTreeNode",
    "FeedService",
    "ReactionService",
    "Service",
    "build_comment_forest",
    "clamp_feed_limit",
    "count_nodes",
    "iter_forest",
]
