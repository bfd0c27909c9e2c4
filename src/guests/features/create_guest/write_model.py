"""Write model for creating primary guests.

Assigns a fresh invite code, creates the plus-one when one is allowed, invites
the new rows to every default event and sends the invitation email.
Returns DTOs instead of ORM models.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from functools import partial

from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.email_service.base import EmailServiceBase
from src.events.fan_out import invite_to_default_events
from src.guests.dtos import (
    GuestCreateDTO,
    GuestWithPlusOneDTO,
    InvalidGuestDataError,
    InviteCodeGenerationError,
    RSVPStatus,
)
from src.guests.features.reconcile_plus_one.write_model import PlusOneWriteModel, SqlPlusOneWriteModel
from src.guests.invite_code import generate_invite_code
from src.guests.repository.orm_models import Guest
from src.guests.repository.queries import invite_code_exists
from src.guests.urls import RSVP_PAGE_URL

logger = logging.getLogger(__name__)

MAX_INVITE_CODE_ATTEMPTS = 10


def _clean(value: str | None) -> str | None:
    if value is None:
        return None
    value = value.strip()
    return value or None


class GuestCreateWriteModel(ABC):
    """Abstract base class for guest creation write operations."""

    @abstractmethod
    async def create_guest(self, data: GuestCreateDTO, send_email: bool = True) -> GuestWithPlusOneDTO:
        """Create a primary guest (and plus-one when allowed). Returns DTO.

        Raises InvalidGuestDataError when first_name is empty and
        InviteCodeGenerationError when no unused code could be found.
        """
        raise NotImplementedError


class SqlGuestCreateWriteModel(GuestCreateWriteModel):
    """SQL implementation of guest creation write operations."""

    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(
        self,
        session_overwrite: AsyncSession | None = None,
        email_service: EmailServiceBase | None = None,
        plus_one_write_model: PlusOneWriteModel | None = None,
        code_generator: Callable[[], str] = generate_invite_code,
        frontend_url: str = "",
    ) -> None:
        self.session_overwrite = session_overwrite
        self.email_service = email_service
        self.plus_one_write_model = plus_one_write_model or SqlPlusOneWriteModel()
        self.code_generator = code_generator
        self.frontend_url = frontend_url

    async def create_guest(self, data: GuestCreateDTO, send_email: bool = True) -> GuestWithPlusOneDTO:
        first_name = _clean(data.first_name)
        if not first_name:
            raise InvalidGuestDataError("First name is required")

        async with self.async_session_manager(session_overwrite=self.session_overwrite) as session:
            invite_code = await self._unique_invite_code(session)

            guest = Guest(
                first_name=first_name,
                last_name=_clean(data.last_name),
                email=_clean(data.email),
                phone_number=_clean(data.phone_number),
                whatsapp=_clean(data.whatsapp),
                preferred_contact_method=data.preferred_contact_method,
                side=data.side,
                list=data.list,
                family=data.family,
                rsvp_status=RSVPStatus.PENDING,
                plus_one_allowed=data.plus_one_allowed,
                is_plus_one=False,
                primary_guest_id=None,
                mailing_address=_clean(data.mailing_address),
                physical_invite_sent=data.physical_invite_sent,
                dietary_restrictions=_clean(data.dietary_restrictions),
                under21=data.under21,
                notes=_clean(data.notes),
                invite_code=invite_code,
                number_of_resends=0,
            )
            session.add(guest)
            await session.flush()

            self.plus_one_write_model.set_session_overwrite(session)
            reconciled = await self.plus_one_write_model.reconcile(
                guest.id,
                plus_one_first_name=data.plus_one_first_name,
                plus_one_last_name=data.plus_one_last_name,
            )

            new_ids = [guest.id]
            if reconciled.plus_one is not None:
                new_ids.append(reconciled.plus_one.id)
            await invite_to_default_events(session, new_ids)

            result = GuestWithPlusOneDTO(guest=guest.to_dto(), plus_one=reconciled.plus_one)

        logger.info("Created guest %s with invite code %s", result.guest.id, invite_code)

        if send_email and self.email_service and result.guest.email:
            await self._send_invitation(result)

        return result

    async def _unique_invite_code(self, session: AsyncSession) -> str:
        for _ in range(MAX_INVITE_CODE_ATTEMPTS):
            code = self.code_generator()
            if not await invite_code_exists(session, code):
                return code
        raise InviteCodeGenerationError("Failed to generate unique invite code")

    async def _send_invitation(self, result: GuestWithPlusOneDTO) -> None:
        guest = result.guest
        try:
            await self.email_service.send_invitation(
                to_address=guest.email,
                guest_name=guest.full_name,
                invite_code=guest.invite_code,
                rsvp_url=RSVP_PAGE_URL.format(
                    frontend_url=self.frontend_url, invite_code=guest.invite_code
                ),
            )
        except Exception:
            # the guest exists either way, the invitation can be resent later
            logger.exception("Failed to send invitation email to guest %s", guest.id)
