"""Write model for hand-picked invites of non-default events."""

import logging
from abc import ABC, abstractmethod
from functools import partial
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.events.dtos import DefaultEventInvitesError, InvalidEventDataError
from src.events.fan_out import add_missing_invites
from src.events.repository.orm_models import Event, GuestEventInvite
from src.events.repository.queries import get_event
from src.guests.repository.orm_models import Guest

logger = logging.getLogger(__name__)


class InviteWriteModel(ABC):
    @abstractmethod
    async def add_invites(self, event_id: UUID, guest_ids: list[UUID]) -> int:
        """Invite the guests that are not invited yet. Returns how many were added."""
        raise NotImplementedError

    @abstractmethod
    async def remove_invites(self, event_id: UUID, guest_ids: list[UUID]) -> int:
        """Remove the guests' invites. Returns how many were removed."""
        raise NotImplementedError


class SqlInviteWriteModel(InviteWriteModel):
    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self._session_overwrite = session_overwrite

    async def add_invites(self, event_id: UUID, guest_ids: list[UUID]) -> int:
        if not guest_ids:
            raise InvalidEventDataError("guest_ids must be a non-empty list")
        async with self.async_session_manager(session_overwrite=self._session_overwrite) as session:
            await self._get_managed_event(session, event_id)
            result = await session.execute(select(Guest.id).where(Guest.id.in_(guest_ids)))
            added = await add_missing_invites(session, event_id, result.scalars().all())
            logger.info("Added %d invites to event %s", added, event_id)
            return added

    async def remove_invites(self, event_id: UUID, guest_ids: list[UUID]) -> int:
        if not guest_ids:
            raise InvalidEventDataError("guest_ids must be a non-empty list")
        async with self.async_session_manager(session_overwrite=self._session_overwrite) as session:
            await self._get_managed_event(session, event_id)
            result = await session.execute(
                delete(GuestEventInvite).where(
                    GuestEventInvite.event_id == event_id,
                    GuestEventInvite.guest_id.in_(guest_ids),
                )
            )
            logger.info("Removed %d invites from event %s", result.rowcount, event_id)
            return result.rowcount

    async def _get_managed_event(self, session: AsyncSession, event_id: UUID) -> Event:
        event = await get_event(session, event_id)
        if event.is_default:
            raise DefaultEventInvitesError(event_id)
        return event
