"""Write model linking an authenticated identity to a guest row."""

import logging
from abc import ABC, abstractmethod
from functools import partial
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.auth.identity import Identity
from src.config.database import async_session_manager
from src.guests.dtos import GuestAlreadyLinkedError, GuestDTO, InviteCodeNotFoundError
from src.guests.invite_code import parse_invite_code
from src.guests.repository.orm_models import Guest
from src.guests.repository.queries import get_guest, get_party_rows

logger = logging.getLogger(__name__)


class IdentityLinkWriteModel(ABC):
    @abstractmethod
    async def link_by_invite_code(self, invite_code: str, identity: Identity) -> GuestDTO:
        """
        Link the identity to the party row whose email matches it, or to the
        primary guest when none does.
        Raises InviteCodeNotFoundError or GuestAlreadyLinkedError.
        """
        raise NotImplementedError

    @abstractmethod
    async def link_guest(self, guest_id: UUID, external_user_id: str) -> GuestDTO:
        """Link a known guest row. Raises GuestNotFoundError or GuestAlreadyLinkedError."""
        raise NotImplementedError


class SqlIdentityLinkWriteModel(IdentityLinkWriteModel):
    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self._session_overwrite = session_overwrite

    async def link_by_invite_code(self, invite_code: str, identity: Identity) -> GuestDTO:
        invite_code = parse_invite_code(invite_code)
        async with self.async_session_manager(session_overwrite=self._session_overwrite) as session:
            rows = await get_party_rows(session, invite_code)
            if not rows:
                raise InviteCodeNotFoundError(invite_code)

            candidate = self._pick_candidate(rows, identity.email)
            self._link(candidate, identity.user_id)
            await session.flush()
            return candidate.to_dto()

    async def link_guest(self, guest_id: UUID, external_user_id: str) -> GuestDTO:
        async with self.async_session_manager(session_overwrite=self._session_overwrite) as session:
            guest = await get_guest(session, guest_id)
            self._link(guest, external_user_id)
            await session.flush()
            return guest.to_dto()

    @staticmethod
    def _pick_candidate(rows: list[Guest], email: str | None) -> Guest:
        if email:
            email = email.strip().lower()
            for row in rows:
                if row.email and row.email.strip().lower() == email:
                    return row
        for row in rows:
            if not row.is_plus_one:
                return row
        return rows[0]

    @staticmethod
    def _link(guest: Guest, external_user_id: str) -> None:
        if guest.external_user_id and guest.external_user_id != external_user_id:
            raise GuestAlreadyLinkedError(guest.id)
        if guest.external_user_id != external_user_id:
            guest.external_user_id = external_user_id
            logger.info("Linked guest %s to user %s", guest.id, external_user_id)
