import abc
from functools import partial
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.events.dtos import EventInvitesDTO, InviteCountsDTO, InviteeDTO
from src.events.repository.orm_models import Event, GuestEventInvite
from src.guests.dtos import RSVPStatus
from src.guests.repository.orm_models import Guest


class InviteReadModel(abc.ABC):
    @abc.abstractmethod
    async def get_event_invites(self, event_id: UUID) -> EventInvitesDTO | None:
        """Every primary guest with their invite state for the event, plus totals."""
        raise NotImplementedError


class SqlInviteReadModel(InviteReadModel):
    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self._session_overwrite = session_overwrite

    async def get_event_invites(self, event_id: UUID) -> EventInvitesDTO | None:
        async with self.async_session_manager(session_overwrite=self._session_overwrite) as session:
            result = await session.execute(select(Event).where(Event.id == event_id))
            event = result.scalar_one_or_none()
            if event is None:
                return None

            rows = await session.execute(
                select(Guest, GuestEventInvite)
                .outerjoin(
                    GuestEventInvite,
                    (GuestEventInvite.guest_id == Guest.id) & (GuestEventInvite.event_id == event_id),
                )
                .where(Guest.is_plus_one.is_(False))
                .order_by(Guest.first_name, Guest.last_name)
            )

            invitees = []
            for guest, invite in rows.all():
                invitees.append(
                    InviteeDTO(
                        guest_id=guest.id,
                        first_name=guest.first_name,
                        last_name=guest.last_name,
                        email=guest.email,
                        invite_code=guest.invite_code,
                        invited=invite is not None,
                        rsvp_status=invite.rsvp_status if invite else None,
                        email_sent=invite.email_sent if invite else False,
                        email_sent_at=invite.email_sent_at if invite else None,
                        email_resend_count=invite.email_resend_count if invite else 0,
                    )
                )

            invited = [i for i in invitees if i.invited]
            counts = InviteCountsDTO(
                total=len(invitees),
                invited=len(invited),
                email_sent=sum(1 for i in invited if i.email_sent),
                confirmed=sum(1 for i in invited if i.rsvp_status == RSVPStatus.YES),
                declined=sum(1 for i in invited if i.rsvp_status == RSVPStatus.NO),
                pending=sum(1 for i in invited if i.rsvp_status == RSVPStatus.PENDING),
            )
            return EventInvitesDTO(event=event.to_dto(), invitees=invitees, counts=counts)
