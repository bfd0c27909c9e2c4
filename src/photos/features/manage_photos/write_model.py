import logging
from abc import ABC, abstractmethod
from functools import partial
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.photos.dtos import InvalidPhotoDataError, PhotoDTO, PhotoNotFoundError
from src.photos.repository.orm_models import Photo

logger = logging.getLogger(__name__)


class PhotoWriteModel(ABC):
    @abstractmethod
    async def add_photo(self, url: str, alt: str, caption: str | None = None) -> PhotoDTO:
        """Append a photo to the gallery. Raises InvalidPhotoDataError."""
        raise NotImplementedError

    @abstractmethod
    async def delete_photo(self, photo_id: UUID) -> None:
        """Raises PhotoNotFoundError."""
        raise NotImplementedError


class SqlPhotoWriteModel(PhotoWriteModel):
    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self._session_overwrite = session_overwrite

    async def add_photo(self, url: str, alt: str, caption: str | None = None) -> PhotoDTO:
        url = (url or "").strip()
        alt = (alt or "").strip()
        if not url or not alt:
            raise InvalidPhotoDataError("URL and alt text are required")

        async with self.async_session_manager(session_overwrite=self._session_overwrite) as session:
            result = await session.execute(select(func.max(Photo.display_order)))
            max_order = result.scalar_one_or_none()
            if max_order is None:
                max_order = -1

            photo = Photo(
                url=url,
                alt=alt,
                caption=(caption or "").strip() or None,
                display_order=max_order + 1,
                is_active=True,
            )
            session.add(photo)
            await session.flush()
            logger.info("Added photo %s at position %d", photo.id, photo.display_order)
            return photo.to_dto()

    async def delete_photo(self, photo_id: UUID) -> None:
        async with self.async_session_manager(session_overwrite=self._session_overwrite) as session:
            result = await session.execute(select(Photo).where(Photo.id == photo_id))
            photo = result.scalar_one_or_none()
            if photo is None:
                raise PhotoNotFoundError(photo_id)
            await session.delete(photo)
            await session.flush()
