import logging
from abc import ABC, abstractmethod
from functools import partial
from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.activities.dtos import (
    ActivityCreateDTO,
    ActivityDTO,
    ActivityNotFoundError,
    InvalidActivityDataError,
)
from src.activities.repository.orm_models import Activity, GuestActivityInterest
from src.config.database import async_session_manager

logger = logging.getLogger(__name__)


class ActivityWriteModel(ABC):
    @abstractmethod
    async def create_activity(self, data: ActivityCreateDTO) -> ActivityDTO:
        raise NotImplementedError

    @abstractmethod
    async def delete_activity(self, activity_id: UUID) -> None:
        """Delete the activity and every interest in it."""
        raise NotImplementedError


class SqlActivityWriteModel(ActivityWriteModel):
    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self._session_overwrite = session_overwrite

    async def create_activity(self, data: ActivityCreateDTO) -> ActivityDTO:
        name = (data.name or "").strip()
        if not name:
            raise InvalidActivityDataError("Name is required")

        async with self.async_session_manager(session_overwrite=self._session_overwrite) as session:
            result = await session.execute(select(func.max(Activity.display_order)))
            max_order = result.scalar_one_or_none() or 0

            activity = Activity(
                name=name,
                description=data.description,
                emoji=data.emoji,
                address=data.address,
                image_url=data.image_url,
                latitude=data.latitude,
                longitude=data.longitude,
                is_venue=data.is_venue,
                venue_type=data.venue_type,
                display_order=max_order + 1,
            )
            session.add(activity)
            await session.flush()
            logger.info("Created activity %s (%s)", activity.id, activity.name)
            return activity.to_dto()

    async def delete_activity(self, activity_id: UUID) -> None:
        async with self.async_session_manager(session_overwrite=self._session_overwrite) as session:
            result = await session.execute(select(Activity).where(Activity.id == activity_id))
            activity = result.scalar_one_or_none()
            if activity is None:
                raise ActivityNotFoundError(activity_id)
            await session.execute(
                delete(GuestActivityInterest).where(GuestActivityInterest.activity_id == activity_id)
            )
            await session.delete(activity)
            await session.flush()
