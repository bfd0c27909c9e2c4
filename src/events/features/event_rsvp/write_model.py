"""Write model for guests answering a single event invite."""

import logging
from abc import ABC, abstractmethod
from functools import partial
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.email_service.base import EmailServiceBase
from src.events.dtos import EventRSVPDTO, NotInvitedError
from src.events.repository.orm_models import Event, GuestEventInvite
from src.events.repository.queries import get_event
from src.guests.dtos import InviteCodeNotFoundError, RSVPStatus
from src.guests.invite_code import parse_invite_code
from src.guests.repository.orm_models import Guest
from src.guests.repository.queries import get_primary_by_code

logger = logging.getLogger(__name__)


class EventRSVPWriteModel(ABC):
    @abstractmethod
    async def get_event_rsvp(self, invite_code: str, event_id: UUID) -> EventRSVPDTO:
        """
        The primary guest's invite to the event.
        Raises InvalidInviteCodeError, InviteCodeNotFoundError, EventNotFoundError or NotInvitedError.
        """
        raise NotImplementedError

    @abstractmethod
    async def submit_event_rsvp(self, invite_code: str, event_id: UUID, attending: bool) -> EventRSVPDTO:
        """Record yes/no on the invite. Same errors as get_event_rsvp."""
        raise NotImplementedError


class SqlEventRSVPWriteModel(EventRSVPWriteModel):
    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(
        self,
        session_overwrite: AsyncSession | None = None,
        email_service: EmailServiceBase | None = None,
        notify_address: str | None = None,
    ) -> None:
        self._session_overwrite = session_overwrite
        self._email_service = email_service
        self._notify_address = notify_address

    async def get_event_rsvp(self, invite_code: str, event_id: UUID) -> EventRSVPDTO:
        async with self.async_session_manager(session_overwrite=self._session_overwrite) as session:
            guest, event, invite = await self._load_invite(session, invite_code, event_id)
            return self._to_dto(guest, event, invite)

    async def submit_event_rsvp(self, invite_code: str, event_id: UUID, attending: bool) -> EventRSVPDTO:
        async with self.async_session_manager(session_overwrite=self._session_overwrite) as session:
            guest, event, invite = await self._load_invite(session, invite_code, event_id)
            invite.rsvp_status = RSVPStatus.YES if attending else RSVPStatus.NO
            await session.flush()
            result = self._to_dto(guest, event, invite)

        logger.info("Guest %s answered %s to event %s", result.guest_id, result.rsvp_status.value, event_id)
        await self._notify(result)
        return result

    async def _load_invite(
        self, session: AsyncSession, invite_code: str, event_id: UUID
    ) -> tuple[Guest, Event, GuestEventInvite]:
        invite_code = parse_invite_code(invite_code)
        guest = await get_primary_by_code(session, invite_code)
        if guest is None:
            raise InviteCodeNotFoundError(invite_code)
        event = await get_event(session, event_id)

        result = await session.execute(
            select(GuestEventInvite).where(
                GuestEventInvite.guest_id == guest.id,
                GuestEventInvite.event_id == event.id,
            )
        )
        invite = result.scalar_one_or_none()
        if invite is None:
            raise NotInvitedError(guest.id, event.id)
        return guest, event, invite

    @staticmethod
    def _to_dto(guest: Guest, event: Event, invite: GuestEventInvite) -> EventRSVPDTO:
        return EventRSVPDTO(
            guest_id=guest.id,
            guest_name=" ".join(part for part in (guest.first_name, guest.last_name) if part),
            event=event.to_dto(),
            rsvp_status=invite.rsvp_status,
        )

    async def _notify(self, result: EventRSVPDTO) -> None:
        if not (self._email_service and self._notify_address):
            return
        try:
            await self._email_service.send_event_rsvp_notification(
                to_address=self._notify_address,
                guest_name=result.guest_name,
                event_name=result.event.name,
                attending="Yes" if result.rsvp_status == RSVPStatus.YES else "No",
            )
        except Exception:
            logger.exception("Failed to send event RSVP notification for guest %s", result.guest_id)
