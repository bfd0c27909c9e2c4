import logging
from abc import ABC, abstractmethod
from functools import partial

from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.guests.dtos import ContactInfoDTO, GuestDTO, InvalidGuestDataError, InviteCodeNotFoundError
from src.guests.invite_code import parse_invite_code
from src.guests.repository.queries import get_party_rows

logger = logging.getLogger(__name__)


class ContactInfoWriteModel(ABC):
    @abstractmethod
    async def update_contact_info(self, invite_code: str, contact: ContactInfoDTO) -> list[GuestDTO]:
        """Apply the supplied contact fields to every guest of the party."""
        raise NotImplementedError


class SqlContactInfoWriteModel(ContactInfoWriteModel):
    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self._session_overwrite = session_overwrite

    async def update_contact_info(self, invite_code: str, contact: ContactInfoDTO) -> list[GuestDTO]:
        invite_code = parse_invite_code(invite_code)
        changes = {
            name: (value.strip() or None) if isinstance(value, str) else value
            for name, value in contact.provided().items()
        }
        if not changes:
            raise InvalidGuestDataError("No fields to update")

        async with self.async_session_manager(session_overwrite=self._session_overwrite) as session:
            rows = await get_party_rows(session, invite_code)
            if not rows:
                raise InviteCodeNotFoundError(invite_code)
            for row in rows:
                for name, value in changes.items():
                    setattr(row, name, value)
            await session.flush()
            logger.info("Updated contact info (%s) for party %s", ", ".join(sorted(changes)), invite_code)
            return [row.to_dto() for row in rows]
