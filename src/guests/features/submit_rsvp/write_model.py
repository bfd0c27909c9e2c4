"""Write model for a guest answering the main wedding RSVP.

The primary guest answers for the whole party. When the primary declines, an
existing plus-one is declined too. When the primary attends with a named
plus-one, the plus-one row is created (if the invitation allows one) or
updated through the plus-one reconciliation.
"""

import logging
from abc import ABC, abstractmethod
from functools import partial

from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.email_service.base import EmailServiceBase
from src.guests.dtos import (
    GuestWithPlusOneDTO,
    InvalidGuestDataError,
    InviteCodeNotFoundError,
    RSVPStatus,
    RSVPSubmissionDTO,
)
from src.guests.features.reconcile_plus_one.write_model import PlusOneWriteModel, SqlPlusOneWriteModel
from src.guests.invite_code import parse_invite_code
from src.guests.repository.orm_models import Guest
from src.guests.repository.queries import get_plus_one, get_primary_by_code

logger = logging.getLogger(__name__)

CONTACT_FIELDS = ("email", "phone_number", "whatsapp", "preferred_contact_method", "mailing_address")


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    return value.strip() or None


class RSVPWriteModel(ABC):
    @abstractmethod
    async def submit_rsvp(self, submission: RSVPSubmissionDTO) -> GuestWithPlusOneDTO:
        """
        Record the party's answer.
        Raises InvalidInviteCodeError, InviteCodeNotFoundError or InvalidGuestDataError.
        """
        raise NotImplementedError


class SqlRSVPWriteModel(RSVPWriteModel):
    """SQL implementation of RSVP write model."""

    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(
        self,
        session_overwrite: AsyncSession | None = None,
        email_service: EmailServiceBase | None = None,
        plus_one_write_model: PlusOneWriteModel | None = None,
        notify_address: str | None = None,
    ) -> None:
        self._session_overwrite = session_overwrite
        self._email_service = email_service
        self._plus_one_write_model = plus_one_write_model or SqlPlusOneWriteModel()
        self._notify_address = notify_address

    async def submit_rsvp(self, submission: RSVPSubmissionDTO) -> GuestWithPlusOneDTO:
        invite_code = parse_invite_code(submission.invite_code)

        async with self.async_session_manager(session_overwrite=self._session_overwrite) as session:
            primary = await get_primary_by_code(session, invite_code)
            if primary is None:
                raise InviteCodeNotFoundError(invite_code)

            primary.rsvp_status = RSVPStatus.YES if submission.attending else RSVPStatus.NO
            primary.dietary_restrictions = (
                _clean(submission.dietary_restrictions) if submission.attending else None
            )
            if submission.under21 is not None:
                primary.under21 = submission.under21
            for name in CONTACT_FIELDS:
                value = getattr(submission, name)
                if value is not None:
                    setattr(primary, name, _clean(value) if isinstance(value, str) else value)

            plus_one = await get_plus_one(session, primary.id)

            if not submission.attending:
                if plus_one is not None:
                    self._decline(plus_one)
            elif submission.plus_one_attending:
                plus_one = await self._accept_plus_one(session, primary, plus_one, submission)
            elif submission.plus_one_attending is False and plus_one is not None:
                self._decline(plus_one)

            await session.flush()
            result = GuestWithPlusOneDTO(
                guest=primary.to_dto(),
                plus_one=plus_one.to_dto() if plus_one else None,
            )

        logger.info(
            "RSVP %s for party %s (plus-one: %s)",
            result.guest.rsvp_status.value,
            invite_code,
            result.plus_one.rsvp_status.value if result.plus_one else "none",
        )
        await self._notify(result)
        return result

    async def _accept_plus_one(
        self,
        session: AsyncSession,
        primary: Guest,
        plus_one: Guest | None,
        submission: RSVPSubmissionDTO,
    ) -> Guest:
        first_name = _clean(submission.plus_one_first_name)
        if first_name:
            if not primary.plus_one_allowed:
                raise InvalidGuestDataError("This invitation does not include a plus one")
            await session.flush()
            self._plus_one_write_model.set_session_overwrite(session)
            await self._plus_one_write_model.reconcile(
                primary.id,
                plus_one_first_name=first_name,
                plus_one_last_name=submission.plus_one_last_name,
            )
            plus_one = await get_plus_one(session, primary.id)
        if plus_one is None:
            raise InvalidGuestDataError("Plus one first name is required")

        plus_one.rsvp_status = RSVPStatus.YES
        plus_one.dietary_restrictions = _clean(submission.plus_one_dietary_restrictions)
        if submission.plus_one_email is not None:
            plus_one.email = _clean(submission.plus_one_email)
        if submission.plus_one_under21 is not None:
            plus_one.under21 = submission.plus_one_under21
        return plus_one

    @staticmethod
    def _decline(plus_one: Guest) -> None:
        plus_one.rsvp_status = RSVPStatus.NO
        plus_one.dietary_restrictions = None

    async def _notify(self, result: GuestWithPlusOneDTO) -> None:
        if not (self._email_service and self._notify_address):
            return
        guest = result.guest
        plus_one = result.plus_one
        try:
            await self._email_service.send_rsvp_notification(
                to_address=self._notify_address,
                guest_name=guest.full_name,
                attending="Yes" if guest.rsvp_status == RSVPStatus.YES else "No",
                dietary=guest.dietary_restrictions or "None",
                plus_one=(
                    f"{plus_one.full_name} ({plus_one.rsvp_status.value})" if plus_one else "None"
                ),
            )
        except Exception:
            logger.exception("Failed to send RSVP notification for guest %s", guest.id)
