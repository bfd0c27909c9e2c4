"""Write model for creating, updating and deleting events.

Marking an event as default (on create or on update) invites every guest to
it in the same transaction.
"""

import logging
from abc import ABC, abstractmethod
from functools import partial
from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.events.dtos import EventCreateDTO, EventDTO, EventUpdateDTO, InvalidEventDataError
from src.events.fan_out import fan_out_default_event
from src.events.repository.orm_models import Event, GuestEventInvite
from src.events.repository.queries import get_event

logger = logging.getLogger(__name__)


class EventWriteModel(ABC):
    @abstractmethod
    async def create_event(self, data: EventCreateDTO) -> EventDTO:
        """Create an event at the end of the display order."""
        raise NotImplementedError

    @abstractmethod
    async def update_event(self, event_id: UUID, update: EventUpdateDTO) -> EventDTO:
        """Apply the supplied fields. Raises EventNotFoundError or InvalidEventDataError."""
        raise NotImplementedError

    @abstractmethod
    async def delete_event(self, event_id: UUID) -> None:
        """Delete an event and its invites. Raises EventNotFoundError."""
        raise NotImplementedError


class SqlEventWriteModel(EventWriteModel):
    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self._session_overwrite = session_overwrite

    async def create_event(self, data: EventCreateDTO) -> EventDTO:
        name = (data.name or "").strip()
        if not name:
            raise InvalidEventDataError("Name is required")

        async with self.async_session_manager(session_overwrite=self._session_overwrite) as session:
            result = await session.execute(select(func.max(Event.display_order)))
            max_order = result.scalar_one_or_none() or 0

            event = Event(
                name=name,
                description=data.description,
                event_date=data.event_date,
                start_time=data.start_time,
                end_time=data.end_time,
                location_name=data.location_name,
                location_address=data.location_address,
                latitude=data.latitude,
                longitude=data.longitude,
                is_default=data.is_default,
                display_order=max_order + 1,
            )
            session.add(event)
            await session.flush()

            if event.is_default:
                await fan_out_default_event(session, event.id)

            logger.info("Created event %s (%s)", event.id, event.name)
            return event.to_dto()

    async def update_event(self, event_id: UUID, update: EventUpdateDTO) -> EventDTO:
        changes = update.provided()
        if not changes:
            raise InvalidEventDataError("No fields to update")
        if "name" in changes:
            changes["name"] = (changes["name"] or "").strip()
            if not changes["name"]:
                raise InvalidEventDataError("Name is required")
        if changes.get("is_default") is None:
            changes.pop("is_default", None)
        if changes.get("display_order") is None:
            changes.pop("display_order", None)

        async with self.async_session_manager(session_overwrite=self._session_overwrite) as session:
            event = await get_event(session, event_id)
            for name, value in changes.items():
                setattr(event, name, value)
            await session.flush()

            # fan-out only adds missing rows, so re-sending is_default=true is harmless
            if changes.get("is_default") is True:
                await fan_out_default_event(session, event.id)

            return event.to_dto()

    async def delete_event(self, event_id: UUID) -> None:
        async with self.async_session_manager(session_overwrite=self._session_overwrite) as session:
            event = await get_event(session, event_id)
            await session.execute(delete(GuestEventInvite).where(GuestEventInvite.event_id == event.id))
            await session.delete(event)
            await session.flush()
            logger.info("Deleted event %s", event_id)
