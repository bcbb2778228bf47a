"""Photo catalog interface.

The catalog itself is managed elsewhere; comments only need to know
whether a photo exists.
"""

from abc import ABC, abstractmethod

from gallery.domain.value import PhotoId


class PhotoRepository(ABC):
    """Read-only view over the photo catalog."""

    @abstractmethod
    async def exists(self, photo_id: PhotoId) -> bool:
        """Check whether a photo is in the catalog."""
        pass
