"""In-memory photo catalog for testing."""

from gallery.domain.repository.photo import PhotoRepository
from gallery.domain.value import PhotoId

from .database import InMemoryDatabase


class InMemoryPhotoRepository(PhotoRepository):
    """Photo catalog backed by the in-memory database's photo set."""

    def __init__(self, database: InMemoryDatabase | None = None) -> None:
        self.database = database or InMemoryDatabase()

    async def exists(self, photo_id: PhotoId) -> bool:
        return photo_id in self.database.photos
