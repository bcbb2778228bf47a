"""Gallery API client."""

from .client import GalleryApiClient, HttpGalleryApiClient, comment_from_payload

__all__ = [
    "GalleryApiClient",
    "HttpGalleryApiClient",
    "comment_from_payload",
]
