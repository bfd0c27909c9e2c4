"""Write model that emails the invite of a non-default event to invited guests."""

import logging
from abc import ABC, abstractmethod
from datetime import UTC, date, datetime, time
from functools import partial
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.email_service.base import EmailServiceBase
from src.events.dtos import DefaultEventInvitesError, EventDTO, InvalidEventDataError, NotInvitedError
from src.events.repository.orm_models import GuestEventInvite
from src.events.repository.queries import get_event
from src.events.urls import EVENT_RSVP_PAGE_URL
from src.guests.dtos import BulkEmailResultDTO, EmailSendErrorDTO
from src.guests.repository.orm_models import Guest

logger = logging.getLogger(__name__)


def format_event_time(value: time | None) -> str:
    """12-hour clock, e.g. ``7:30 PM``."""
    if value is None:
        return "TBD"
    hour = value.hour % 12 or 12
    suffix = "PM" if value.hour >= 12 else "AM"
    return f"{hour}:{value.minute:02d} {suffix}"


def format_event_date(value: date | None) -> str:
    if value is None:
        return "TBD"
    return f"{value:%A, %B} {value.day}, {value.year}"


def format_event_location(event: EventDTO) -> str:
    parts = [part for part in (event.location_name, event.location_address) if part]
    return ", ".join(parts) or "TBD"


class EventInviteSendWriteModel(ABC):
    @abstractmethod
    async def send_event_invites(self, event_id: UUID, guest_ids: list[UUID]) -> BulkEmailResultDTO:
        """
        Email the event invite to the given invited guests and record it on each invite.
        Raises EventNotFoundError, DefaultEventInvitesError, InvalidEventDataError or NotInvitedError.
        """
        raise NotImplementedError


class SqlEventInviteSendWriteModel(EventInviteSendWriteModel):
    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(
        self,
        email_service: EmailServiceBase,
        session_overwrite: AsyncSession | None = None,
        frontend_url: str = "",
    ) -> None:
        self._email_service = email_service
        self._session_overwrite = session_overwrite
        self._frontend_url = frontend_url

    async def send_event_invites(self, event_id: UUID, guest_ids: list[UUID]) -> BulkEmailResultDTO:
        if not guest_ids:
            raise InvalidEventDataError("guest_ids must be a non-empty list")

        async with self.async_session_manager(session_overwrite=self._session_overwrite) as session:
            event = await get_event(session, event_id)
            if event.is_default:
                raise DefaultEventInvitesError(event_id)
            event_dto = event.to_dto()

            result = await session.execute(
                select(Guest, GuestEventInvite)
                .join(GuestEventInvite, GuestEventInvite.guest_id == Guest.id)
                .where(GuestEventInvite.event_id == event_id, Guest.id.in_(guest_ids))
                .order_by(Guest.first_name)
            )
            recipients = [(guest.to_dto(), invite.id) for guest, invite in result.all()]

        if not recipients:
            raise NotInvitedError(guest_ids[0], event_id)
        without_email = [g.full_name for g, _ in recipients if not (g.email and "@" in g.email)]
        if without_email:
            raise InvalidEventDataError(
                f"These guests do not have a valid email: {', '.join(without_email)}"
            )

        errors: list[EmailSendErrorDTO] = []
        sent = 0
        for guest, invite_id in recipients:
            try:
                await self._email_service.send_event_invitation(
                    to_address=guest.email,
                    guest_name=guest.full_name,
                    event_name=event_dto.name,
                    event_date=format_event_date(event_dto.event_date),
                    event_time=format_event_time(event_dto.start_time),
                    event_location=format_event_location(event_dto),
                    event_description=event_dto.description or "",
                    rsvp_url=EVENT_RSVP_PAGE_URL.format(
                        frontend_url=self._frontend_url,
                        invite_code=guest.invite_code,
                        event_id=event_dto.id,
                    ),
                )
            except Exception:
                logger.exception("Failed to send event %s invite to guest %s", event_id, guest.id)
                errors.append(
                    EmailSendErrorDTO(guest_id=guest.id, name=guest.full_name, error="Failed to send email")
                )
                continue
            await self._record_sent(invite_id)
            sent += 1

        logger.info("Sent %d of %d invites for event %s", sent, len(recipients), event_id)
        return BulkEmailResultDTO(sent_count=sent, total=len(recipients), errors=errors)

    async def _record_sent(self, invite_id: UUID) -> None:
        async with self.async_session_manager(session_overwrite=self._session_overwrite) as session:
            result = await session.execute(select(GuestEventInvite).where(GuestEventInvite.id == invite_id))
            invite = result.scalar_one()
            invite.email_sent = True
            invite.email_sent_at = datetime.now(UTC)
            invite.email_resend_count = (invite.email_resend_count or 0) + 1
            await session.flush()
