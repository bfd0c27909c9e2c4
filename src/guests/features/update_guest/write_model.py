"""Write model for partial updates of a primary guest.

Only the fields present on the GuestUpdateDTO are written. The primary row
and its plus-one are changed in the same transaction: if the plus-one write
fails, nothing is committed.
"""

import logging
from abc import ABC, abstractmethod
from functools import partial
from typing import Any
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.guests.dtos import (
    UNSET,
    GuestUpdateDTO,
    GuestWithPlusOneDTO,
    InvalidGuestDataError,
)
from src.guests.features.reconcile_plus_one.write_model import PlusOneWriteModel, SqlPlusOneWriteModel
from src.guests.repository.queries import get_primary_guest

logger = logging.getLogger(__name__)

BOOLEAN_FIELDS = {"family", "physical_invite_sent", "under21"}
REQUIRED_FIELDS = {"first_name", "list", "rsvp_status"}


def clean_field(name: str, value: Any) -> Any:
    """Turn an incoming value into what gets stored: blank strings become None."""
    if isinstance(value, str):
        value = value.strip() or None
    if name in BOOLEAN_FIELDS:
        return bool(value)
    if name in REQUIRED_FIELDS and value is None:
        raise InvalidGuestDataError(f"{name} cannot be empty")
    return value


class GuestUpdateWriteModel(ABC):
    """Abstract base class for guest update write operations."""

    @abstractmethod
    async def update_guest(self, guest_id: UUID, update: GuestUpdateDTO) -> GuestWithPlusOneDTO:
        """
        Merge the supplied fields over the stored guest and reconcile its plus-one.
        Raises GuestNotFoundError, InvalidGuestDataError or PlusOneReconciliationError.
        """
        raise NotImplementedError


class SqlGuestUpdateWriteModel(GuestUpdateWriteModel):
    """SQL implementation of guest update write operations."""

    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(
        self,
        session_overwrite: AsyncSession | None = None,
        plus_one_write_model: PlusOneWriteModel | None = None,
    ) -> None:
        self._session_overwrite = session_overwrite
        self._plus_one_write_model = plus_one_write_model or SqlPlusOneWriteModel()

    async def update_guest(self, guest_id: UUID, update: GuestUpdateDTO) -> GuestWithPlusOneDTO:
        # validate everything before touching the row
        changes = {name: clean_field(name, value) for name, value in update.guest_fields().items()}

        async with self.async_session_manager(session_overwrite=self._session_overwrite) as session:
            guest = await get_primary_guest(session, guest_id)

            for name, value in changes.items():
                setattr(guest, name, value)
            if update.plus_one_allowed is not UNSET:
                guest.plus_one_allowed = bool(update.plus_one_allowed)
            await session.flush()

            # list, family and side are pushed to an existing plus-one on every update
            self._plus_one_write_model.set_session_overwrite(session)
            reconciled = await self._plus_one_write_model.reconcile(
                guest.id,
                plus_one_first_name=update.plus_one_first_name or None,
                plus_one_last_name=update.plus_one_last_name or None,
                rename=update.renames_plus_one(),
            )

            logger.info(
                "Updated guest %s (%s), plus-one %s",
                guest.id,
                ", ".join(sorted(update.provided())) or "no fields",
                reconciled.action,
            )
            return GuestWithPlusOneDTO(guest=guest.to_dto(), plus_one=reconciled.plus_one)
