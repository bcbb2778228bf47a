"""Wiring of the client-side components from application settings."""

from dataclasses import dataclass

from gallery.adapter.gallery_api import GalleryApiClient, HttpGalleryApiClient
from gallery.client.feed import FeedPoller
from gallery.client.session import CurrentUser
from gallery.client.thread import CommentThreadView
from gallery.config import Settings


@dataclass
class GalleryClient:
    """API client plus the views built on it, sharing one connection pool."""

    api: GalleryApiClient
    thread: CommentThreadView
    feed: FeedPoller

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        current_user: CurrentUser,
        api: GalleryApiClient | None = None,
    ) -> "GalleryClient":
        """Build the client for ``current_user``.

        Args:
            settings: Application settings; ``client`` and ``feed`` are used
            current_user: Signed-in user from the session provider
            api: Optional API client override
        """
        api = api or HttpGalleryApiClient.from_settings(settings.client)
        return cls(
            api=api,
            thread=CommentThreadView(api, current_user),
            feed=FeedPoller.from_settings(api.latest_comments, settings.feed),
        )

    async def aclose(self) -> None:
        await self.feed.aclose()
        if isinstance(self.api, HttpGalleryApiClient):
            await self.api.aclose()

    async def __aenter__(self) -> "GalleryClient":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()
