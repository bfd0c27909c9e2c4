"""Write model for bulk guest emails.

Recipients are checked up front and the whole batch is rejected if one of
them cannot receive the email. After that every guest is sent separately: a
failed delivery is logged and reported, and the rest of the batch goes on.
"""

import logging
from abc import ABC, abstractmethod
from datetime import UTC, datetime
from functools import partial
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.email_service.base import EmailServiceBase
from src.guests.dtos import (
    BulkEmailResultDTO,
    EmailSendErrorDTO,
    GuestDTO,
    GuestNotFoundError,
    InvalidGuestDataError,
    RSVPStatus,
)
from src.guests.repository.orm_models import Guest
from src.guests.repository.queries import get_guest
from src.guests.urls import ACTIVITIES_PAGE_URL, RSVP_PAGE_URL

logger = logging.getLogger(__name__)


def has_valid_email(guest: GuestDTO) -> bool:
    return bool(guest.email and "@" in guest.email)


class InvitationSendWriteModel(ABC):
    @abstractmethod
    async def send_invitations(self, guest_ids: list[UUID]) -> BulkEmailResultDTO:
        """Email the wedding invitation and bump number_of_resends per guest."""
        raise NotImplementedError

    @abstractmethod
    async def send_activities_emails(self, guest_ids: list[UUID]) -> BulkEmailResultDTO:
        """Email the things-to-do list and record it on each guest."""
        raise NotImplementedError


class SqlInvitationSendWriteModel(InvitationSendWriteModel):
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

    async def send_invitations(self, guest_ids: list[UUID]) -> BulkEmailResultDTO:
        guests = await self._load_recipients(guest_ids)
        already_confirmed = [g.full_name for g in guests if g.rsvp_status == RSVPStatus.YES]
        if already_confirmed:
            raise InvalidGuestDataError(
                f"These guests have already RSVP'd yes: {', '.join(already_confirmed)}"
            )

        errors: list[EmailSendErrorDTO] = []
        sent = 0
        for guest in guests:
            try:
                await self._email_service.send_invitation(
                    to_address=guest.email,
                    guest_name=guest.full_name,
                    invite_code=guest.invite_code,
                    rsvp_url=RSVP_PAGE_URL.format(
                        frontend_url=self._frontend_url, invite_code=guest.invite_code
                    ),
                )
            except Exception:
                logger.exception("Failed to send invitation to guest %s", guest.id)
                errors.append(
                    EmailSendErrorDTO(guest_id=guest.id, name=guest.full_name, error="Failed to send email")
                )
                continue
            await self._record_invitation(guest.id)
            sent += 1

        logger.info("Sent %d of %d invitations", sent, len(guests))
        return BulkEmailResultDTO(sent_count=sent, total=len(guests), errors=errors)

    async def send_activities_emails(self, guest_ids: list[UUID]) -> BulkEmailResultDTO:
        guests = await self._load_recipients(guest_ids)

        errors: list[EmailSendErrorDTO] = []
        sent = 0
        for guest in guests:
            try:
                await self._email_service.send_activities_email(
                    to_address=guest.email,
                    guest_name=guest.full_name,
                    activities_url=ACTIVITIES_PAGE_URL.format(
                        frontend_url=self._frontend_url, invite_code=guest.invite_code
                    ),
                )
            except Exception:
                logger.exception("Failed to send activities email to guest %s", guest.id)
                errors.append(
                    EmailSendErrorDTO(guest_id=guest.id, name=guest.full_name, error="Failed to send email")
                )
                continue
            await self._record_activities_email(guest.id)
            sent += 1

        logger.info("Sent %d of %d activities emails", sent, len(guests))
        return BulkEmailResultDTO(sent_count=sent, total=len(guests), errors=errors)

    async def _load_recipients(self, guest_ids: list[UUID]) -> list[GuestDTO]:
        if not guest_ids:
            raise InvalidGuestDataError("guest_ids must be a non-empty list")

        async with self.async_session_manager(session_overwrite=self._session_overwrite) as session:
            result = await session.execute(
                select(Guest)
                .where(Guest.id.in_(guest_ids), Guest.is_plus_one.is_(False))
                .order_by(Guest.first_name)
            )
            guests = [guest.to_dto() for guest in result.scalars().all()]

        if not guests:
            raise GuestNotFoundError()

        without_email = [g.full_name for g in guests if not has_valid_email(g)]
        if without_email:
            raise InvalidGuestDataError(
                f"These guests do not have a valid email: {', '.join(without_email)}"
            )
        return guests

    async def _record_invitation(self, guest_id: UUID) -> None:
        async with self.async_session_manager(session_overwrite=self._session_overwrite) as session:
            guest = await get_guest(session, guest_id)
            guest.number_of_resends = (guest.number_of_resends or 0) + 1
            await session.flush()

    async def _record_activities_email(self, guest_id: UUID) -> None:
        async with self.async_session_manager(session_overwrite=self._session_overwrite) as session:
            guest = await get_guest(session, guest_id)
            guest.activities_email_sent = True
            guest.activities_email_sent_at = datetime.now(UTC)
            guest.activities_email_resend_count = (guest.activities_email_resend_count or 0) + 1
            await session.flush()
