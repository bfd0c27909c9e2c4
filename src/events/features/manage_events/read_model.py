import abc
from functools import partial
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.events.dtos import EventDTO, EventWithCountsDTO
from src.events.repository.orm_models import Event, GuestEventInvite
from src.guests.dtos import RSVPStatus
from src.guests.repository.orm_models import Guest


class EventReadModel(abc.ABC):
    @abc.abstractmethod
    async def list_events(self) -> list[EventWithCountsDTO]:
        """
        Events by display order then date, with invite/confirmed/declined counts.
        Default events count every guest's own RSVP, other events their invite rows.
        """
        raise NotImplementedError

    @abc.abstractmethod
    async def get_event(self, event_id: UUID) -> EventDTO | None:
        raise NotImplementedError


class SqlEventReadModel(EventReadModel):
    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self._session_overwrite = session_overwrite

    async def list_events(self) -> list[EventWithCountsDTO]:
        async with self.async_session_manager(session_overwrite=self._session_overwrite) as session:
            result = await session.execute(
                select(Event).order_by(Event.display_order, Event.event_date.nulls_last())
            )
            events = result.scalars().all()

            guest_counts = await self._guest_counts(session)
            invite_counts = await self._invite_counts(session)

            listed = []
            for event in events:
                if event.is_default:
                    counts = guest_counts
                else:
                    counts = invite_counts.get(event.id, {})
                listed.append(
                    EventWithCountsDTO(
                        event=event.to_dto(),
                        invite_count=sum(counts.values()),
                        confirmed_count=counts.get(RSVPStatus.YES, 0),
                        declined_count=counts.get(RSVPStatus.NO, 0),
                    )
                )
            return listed

    async def get_event(self, event_id: UUID) -> EventDTO | None:
        async with self.async_session_manager(session_overwrite=self._session_overwrite) as session:
            result = await session.execute(select(Event).where(Event.id == event_id))
            event = result.scalar_one_or_none()
            return event.to_dto() if event else None

    async def _guest_counts(self, session: AsyncSession) -> dict[RSVPStatus, int]:
        result = await session.execute(
            select(Guest.rsvp_status, func.count()).group_by(Guest.rsvp_status)
        )
        return {status: count for status, count in result.all()}

    async def _invite_counts(self, session: AsyncSession) -> dict[UUID, dict[RSVPStatus, int]]:
        result = await session.execute(
            select(GuestEventInvite.event_id, GuestEventInvite.rsvp_status, func.count()).group_by(
                GuestEventInvite.event_id, GuestEventInvite.rsvp_status
            )
        )
        counts: dict[UUID, dict[RSVPStatus, int]] = {}
        for event_id, status, count in result.all():
            counts.setdefault(event_id, {})[status] = count
        return counts
