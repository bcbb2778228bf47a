"""PostgreSQL implementation of the photo catalog view."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from gallery.domain.repository import PhotoRepository
from gallery.domain.value import PhotoId
from gallery.persistence.tables import photos_table


class PostgresPhotoRepository(PhotoRepository):
    """Checks photo existence against the catalog's photos table."""

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def exists(self, photo_id: PhotoId) -> bool:
        stmt = select(photos_table.c.id).where(photos_table.c.id == photo_id)
        result = await self.session.execute(stmt)
        return result.first() is not None
