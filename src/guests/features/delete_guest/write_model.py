import logging
from abc import ABC, abstractmethod
from functools import partial
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.guests.repository.queries import delete_guest_rows, get_guest, get_plus_one

logger = logging.getLogger(__name__)


class GuestDeleteWriteModel(ABC):
    @abstractmethod
    async def delete_guest(self, guest_id: UUID) -> None:
        """
        Delete a guest. Deleting a primary also deletes its plus-one; deleting a
        plus-one turns off plus_one_allowed on its primary.
        Raises GuestNotFoundError.
        """
        raise NotImplementedError


class SqlGuestDeleteWriteModel(GuestDeleteWriteModel):
    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self._session_overwrite = session_overwrite

    async def delete_guest(self, guest_id: UUID) -> None:
        async with self.async_session_manager(session_overwrite=self._session_overwrite) as session:
            guest = await get_guest(session, guest_id)

            if guest.is_plus_one:
                if guest.primary_guest_id is not None:
                    primary = await get_guest(session, guest.primary_guest_id)
                    primary.plus_one_allowed = False
                await delete_guest_rows(session, [guest.id])
                logger.info("Deleted plus-one %s", guest.id)
                return

            guest_ids = [guest.id]
            plus_one = await get_plus_one(session, guest.id)
            if plus_one is not None:
                guest_ids.append(plus_one.id)
            await delete_guest_rows(session, guest_ids)
            logger.info("Deleted guest %s and %d related rows", guest_id, len(guest_ids) - 1)
