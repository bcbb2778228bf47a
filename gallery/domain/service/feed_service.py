"""Latest-activity feed across all photos."""

import logfire

from gallery.domain.model.comment import Comment
from gallery.domain.repository import CommentRepository

from .base import Service

DEFAULT_FEED_LIMIT = 5
MAX_FEED_LIMIT = 20


def clamp_feed_limit(
    limit: int | None,
    default: int = DEFAULT_FEED_LIMIT,
    maximum: int = MAX_FEED_LIMIT,
) -> int:
    """Normalize a requested feed size.

    Missing or non-positive requests fall back to ``default``; anything
    above ``maximum`` is capped.
    """
    if limit is None or limit <= 0:
        limit = default
    return min(limit, maximum)


class FeedService(Service):
    """Domain service for the most-recent-comments feed."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        default_limit: int = DEFAULT_FEED_LIMIT,
        max_limit: int = MAX_FEED_LIMIT,
    ) -> None:
        """Initialize feed service.

        Args:
            comment_repository: Comment repository
            default_limit: Feed size when the caller does not ask for one
            max_limit: Upper bound on the feed size
        """
        self.comment_repository = comment_repository
        self.default_limit = default_limit
        self.max_limit = max_limit

    async def get_latest(self, limit: int | None = None) -> list[Comment]:
        """Get the newest comments across every photo.

        Args:
            limit: Requested number of comments

        Returns:
            At most ``max_limit`` comments, newest first, with reactions
        """
        effective = clamp_feed_limit(limit, self.default_limit, self.max_limit)
        with logfire.span(
            "feed_service.get_latest", requested=limit, limit=effective
        ):
            comments = await self.comment_repository.find_latest(effective)
            logfire.info("Latest comments retrieved", count=len(comments))
            return comments
