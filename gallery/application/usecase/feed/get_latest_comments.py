"""Get latest comments use case."""

from pydantic import BaseModel

from gallery.domain.error import ValidationError
from gallery.domain.service import FeedService

from ..base import BaseUseCase
from ..comment.get_comments import CommentItem


class GetLatestCommentsRequest(BaseModel):
    """Get latest comments request.

    ``limit`` is kept as received so malformed values can be reported.
    """

    limit: str | int | None = None


class GetLatestCommentsResponse(BaseModel):
    """Get latest comments response."""

    comments: list[CommentItem]
    total: int


def parse_limit(raw: str | int | None) -> int | None:
    """Parse a requested feed size.

    Raises:
        ValidationError: If the value is not an integer
    """
    if raw is None or isinstance(raw, int):
        return raw
    raw = raw.strip()
    if not raw:
        return None
    try:
        return int(raw)
    except ValueError as e:
        raise ValidationError(f"Invalid limit: {raw!r}") from e


class GetLatestCommentsUseCase(BaseUseCase):
    """Use case for the cross-photo latest activity feed."""

    def __init__(self, feed_service: FeedService) -> None:
        self.feed_service = feed_service

    async def execute(
        self, request: GetLatestCommentsRequest
    ) -> GetLatestCommentsResponse:
        """Execute get latest comments flow.

        Returns:
            Newest comments first, each with its full reaction map

        Raises:
            ValidationError: If the limit is not numeric
        """
        comments = await self.feed_service.get_latest(parse_limit(request.limit))
        items = [CommentItem.from_domain(comment) for comment in comments]
        return GetLatestCommentsResponse(comments=items, total=len(items))
