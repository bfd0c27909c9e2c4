import abc
from functools import partial
from uuid import UUID

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.guests.dtos import GuestDTO, GuestWithPlusOneDTO
from src.guests.repository.orm_models import Guest
from src.guests.repository.queries import get_plus_one, get_primary_by_code


class GuestReadModel(abc.ABC):
    @abc.abstractmethod
    async def list_guests(self) -> list[GuestDTO]:
        """All guest rows, primaries and plus-ones, oldest first."""
        raise NotImplementedError

    @abc.abstractmethod
    async def get_guest_with_plus_one(self, guest_id: UUID) -> GuestWithPlusOneDTO | None:
        """A primary guest and its plus-one. None when the id is unknown or is a plus-one."""
        raise NotImplementedError

    @abc.abstractmethod
    async def get_party_by_code(self, invite_code: str) -> GuestWithPlusOneDTO | None:
        """The party sharing a normalized invite code."""
        raise NotImplementedError

    @abc.abstractmethod
    async def get_party_by_external_user_id(self, external_user_id: str) -> GuestWithPlusOneDTO | None:
        """The party of whichever guest row is linked to the identity."""
        raise NotImplementedError

    @abc.abstractmethod
    async def find_primary_by_email(self, email: str) -> GuestDTO | None:
        """Case-insensitive email match among primary guests."""
        raise NotImplementedError


class SqlGuestReadModel(GuestReadModel):
    """SQL implementation of guest read model."""

    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self._session_overwrite = session_overwrite

    async def list_guests(self) -> list[GuestDTO]:
        async with self.async_session_manager(session_overwrite=self._session_overwrite) as session:
            result = await session.execute(
                select(Guest).order_by(Guest.created_at, Guest.is_plus_one, Guest.first_name)
            )
            return [guest.to_dto() for guest in result.scalars().all()]

    async def get_guest_with_plus_one(self, guest_id: UUID) -> GuestWithPlusOneDTO | None:
        async with self.async_session_manager(session_overwrite=self._session_overwrite) as session:
            result = await session.execute(
                select(Guest).where(Guest.id == guest_id, Guest.is_plus_one.is_(False))
            )
            guest = result.scalar_one_or_none()
            if guest is None:
                return None
            return await self._with_plus_one(session, guest)

    async def get_party_by_code(self, invite_code: str) -> GuestWithPlusOneDTO | None:
        async with self.async_session_manager(session_overwrite=self._session_overwrite) as session:
            primary = await get_primary_by_code(session, invite_code)
            if primary is None:
                return None
            return await self._with_plus_one(session, primary)

    async def get_party_by_external_user_id(self, external_user_id: str) -> GuestWithPlusOneDTO | None:
        async with self.async_session_manager(session_overwrite=self._session_overwrite) as session:
            result = await session.execute(
                select(Guest).where(Guest.external_user_id == external_user_id).limit(1)
            )
            linked = result.scalar_one_or_none()
            if linked is None:
                return None
            primary = await get_primary_by_code(session, linked.invite_code)
            if primary is None:
                return None
            return await self._with_plus_one(session, primary)

    async def find_primary_by_email(self, email: str) -> GuestDTO | None:
        async with self.async_session_manager(session_overwrite=self._session_overwrite) as session:
            result = await session.execute(
                select(Guest)
                .where(
                    func.lower(Guest.email) == email.strip().lower(),
                    Guest.is_plus_one.is_(False),
                )
                .limit(1)
            )
            guest = result.scalar_one_or_none()
            return guest.to_dto() if guest else None

    async def _with_plus_one(self, session: AsyncSession, primary: Guest) -> GuestWithPlusOneDTO:
        plus_one = await get_plus_one(session, primary.id)
        return GuestWithPlusOneDTO(
            guest=primary.to_dto(),
            plus_one=plus_one.to_dto() if plus_one else None,
        )
