"""HTTP client for the gallery comment API.

Used by the client-side components (thread view, feed poller). Responses
are converted back into domain ``Comment`` models.
"""

from abc import ABC, abstractmethod
from typing import Any

import httpx
import logfire

from gallery.adapter.error import ApiResponseError, NetworkFailureError
from gallery.config import ClientSettings
from gallery.domain.model import Comment
from gallery.domain.value import CommentId, PhotoId, UserId


def comment_from_payload(payload: dict[str, Any]) -> Comment:
    """Convert an API comment item into a domain comment."""
    return Comment(
        id=CommentId(payload["comment_id"]),
        photo_id=PhotoId(payload["photo_id"]),
        author=payload["author"],
        text=payload["text"],
        parent_id=CommentId(payload["parent_id"]) if payload.get("parent_id") else None,
        created_at=payload["created_at"],
        reactions={
            emoji: frozenset(UserId(user_id) for user_id in users)
            for emoji, users in (payload.get("reactions") or {}).items()
        },
    )


class GalleryApiClient(ABC):
    """Base class for gallery API clients.

    Provides type distinction for client-side components and their fakes.
    """

    @abstractmethod
    async def list_comments(self, photo_id: PhotoId) -> list[Comment]:
        """List a photo's comments, oldest first."""
        pass

    @abstractmethod
    async def latest_comments(self, limit: int) -> list[Comment]:
        """Fetch the newest comments across all photos."""
        pass

    @abstractmethod
    async def post_comment(
        self,
        photo_id: PhotoId,
        author: str,
        text: str,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Post a comment or reply."""
        pass

    @abstractmethod
    async def toggle_reaction(
        self, comment_id: CommentId, emoji: str, user_id: UserId
    ) -> None:
        """Toggle a reaction; the server only acknowledges."""
        pass

    @abstractmethod
    async def delete_comment(self, comment_id: CommentId) -> None:
        """Delete a comment and its replies."""
        pass


class HttpGalleryApiClient(GalleryApiClient):
    """Gallery API client over ``httpx.AsyncClient``.

    Transport problems raise ``NetworkFailureError``; error statuses raise
    ``ApiResponseError`` carrying the server's ``detail``.
    """

    def __init__(
        self,
        base_url: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            base_url: API root, e.g. http://localhost:8000
            timeout: Per-request timeout in seconds
            transport: Optional transport override
        """
        self._client = httpx.AsyncClient(
            base_url=base_url, timeout=timeout, transport=transport
        )

    @classmethod
    def from_settings(cls, settings: ClientSettings) -> "HttpGalleryApiClient":
        return cls(base_url=settings.base_url, timeout=settings.timeout_seconds)

    async def aclose(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "HttpGalleryApiClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        try:
            response = await self._client.request(method, url, **kwargs)
        except httpx.TransportError as e:
            logfire.warn("Gallery API unreachable", method=method, url=url, error=str(e))
            raise NetworkFailureError(f"{method} {url} failed: {e}") from e

        if response.is_error:
            try:
                detail = response.json().get("detail", response.text)
            except ValueError:
                detail = response.text
            logfire.warn(
                "Gallery API error",
                method=method,
                url=url,
                status_code=response.status_code,
                detail=str(detail),
            )
            raise ApiResponseError(response.status_code, str(detail))
        return response

    async def list_comments(self, photo_id: PhotoId) -> list[Comment]:
        response = await self._request("GET", f"/photos/{photo_id}/comments")
        return [comment_from_payload(item) for item in response.json()["comments"]]

    async def latest_comments(self, limit: int) -> list[Comment]:
        response = await self._request(
            "GET", "/comments/latest", params={"limit": limit}
        )
        return [comment_from_payload(item) for item in response.json()["comments"]]

    async def post_comment(
        self,
        photo_id: PhotoId,
        author: str,
        text: str,
        parent_id: CommentId | None = None,
    ) -> Comment:
        response = await self._request(
            "POST",
            f"/photos/{photo_id}/comments",
            json={"author": author, "text": text, "parent_id": parent_id},
        )
        return comment_from_payload(response.json())

    async def toggle_reaction(
        self, comment_id: CommentId, emoji: str, user_id: UserId
    ) -> None:
        await self._request(
            "POST",
            f"/comments/{comment_id}/reactions",
            json={"emoji": emoji, "user_id": user_id},
        )

    async def delete_comment(self, comment_id: CommentId) -> None:
        await self._request("DELETE", f"/comments/{comment_id}")
