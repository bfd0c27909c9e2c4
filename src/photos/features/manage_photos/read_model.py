import abc
from functools import partial

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.photos.dtos import PhotoDTO
from src.photos.repository.orm_models import Photo


class PhotoReadModel(abc.ABC):
    @abc.abstractmethod
    async def list_photos(self, active_only: bool = True) -> list[PhotoDTO]:
        """Photos in display order."""
        raise NotImplementedError


class SqlPhotoReadModel(PhotoReadModel):
    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self._session_overwrite = session_overwrite

    async def list_photos(self, active_only: bool = True) -> list[PhotoDTO]:
        query = select(Photo).order_by(Photo.display_order)
        if active_only:
            query = query.where(Photo.is_active.is_(True))
        async with self.async_session_manager(session_overwrite=self._session_overwrite) as session:
            result = await session.execute(query)
            return [photo.to_dto() for photo in result.scalars().all()]
