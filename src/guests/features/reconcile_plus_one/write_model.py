"""Write model that keeps a primary guest's plus-one row consistent.

The stored ``plus_one_allowed`` flag of the primary decides what happens:

    no plus-one, allowed        -> create one
    has plus-one, allowed       -> update its names and grouping
    has plus-one, not allowed   -> delete it
    no plus-one, not allowed    -> nothing

Because it works from stored state, reconciling twice is the same as once.
Returns DTOs instead of ORM models.
"""

import logging
from abc import ABC, abstractmethod
from functools import partial
from uuid import UUID

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from src.config.database import async_session_manager
from src.events.fan_out import invite_to_default_events
from src.guests.dtos import (
    PLUS_ONE_PLACEHOLDER_LAST_NAME,
    InvalidGuestDataError,
    PlusOneReconcileDTO,
    PlusOneReconciliationError,
    RSVPStatus,
)
from src.guests.repository.orm_models import Guest
from src.guests.repository.queries import delete_guest_rows, get_guest, get_plus_one

logger = logging.getLogger(__name__)


def plus_one_name(
    primary: Guest, first_name: str | None, last_name: str | None
) -> tuple[str, str | None]:
    """Name for a plus-one: the supplied one, or "<primary full name> - Plus One"."""
    first_name = (first_name or "").strip()
    if first_name:
        return first_name, (last_name or "").strip() or None
    full_name = " ".join(part for part in (primary.first_name, primary.last_name) if part)
    return full_name, PLUS_ONE_PLACEHOLDER_LAST_NAME


class PlusOneWriteModel(ABC):
    """Abstract base class for plus-one reconciliation."""

    @abstractmethod
    async def reconcile(
        self,
        primary_guest_id: UUID,
        plus_one_first_name: str | None = None,
        plus_one_last_name: str | None = None,
        rename: bool = True,
    ) -> PlusOneReconcileDTO:
        """
        Create, update or delete the plus-one of a primary guest.
        With rename=False an existing plus-one keeps its names unless it still
        carries the placeholder name.
        Raises PlusOneReconciliationError when the plus-one write fails.
        """
        raise NotImplementedError

    @abstractmethod
    def set_session_overwrite(self, session: AsyncSession) -> None:
        """
        Set the session to use for database operations.
        """
        raise NotImplementedError


class SqlPlusOneWriteModel(PlusOneWriteModel):
    """SQL implementation of plus-one reconciliation."""

    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self._session_overwrite = session_overwrite

    def set_session_overwrite(self, session: AsyncSession) -> None:
        self._session_overwrite = session

    async def reconcile(
        self,
        primary_guest_id: UUID,
        plus_one_first_name: str | None = None,
        plus_one_last_name: str | None = None,
        rename: bool = True,
    ) -> PlusOneReconcileDTO:
        async with self.async_session_manager(session_overwrite=self._session_overwrite) as session:
            primary = await get_guest(session, primary_guest_id)
            if primary.is_plus_one:
                raise InvalidGuestDataError("A plus-one cannot have their own plus-one")

            plus_one = await get_plus_one(session, primary.id)

            if primary.plus_one_allowed and plus_one is None:
                action = "create"
            elif primary.plus_one_allowed:
                action = "update"
            elif plus_one is not None:
                action = "delete"
            else:
                return PlusOneReconcileDTO(action="none")

            try:
                if action == "create":
                    plus_one = self._create_plus_one(
                        session, primary, plus_one_first_name, plus_one_last_name
                    )
                    await session.flush()
                    await invite_to_default_events(session, [plus_one.id])
                elif action == "update":
                    self._update_plus_one(
                        primary, plus_one, plus_one_first_name, plus_one_last_name, rename
                    )
                else:
                    await delete_guest_rows(session, [plus_one.id])
                    plus_one = None
                await session.flush()
            except SQLAlchemyError as e:
                logger.exception("Plus-one %s failed for guest %s", action, primary.id)
                raise PlusOneReconciliationError(primary.id, action) from e

            logger.info("Plus-one %sd for guest %s", action, primary.id)
            return PlusOneReconcileDTO(
                action=f"{action}d",
                plus_one=plus_one.to_dto() if plus_one else None,
            )

    def _create_plus_one(
        self,
        session: AsyncSession,
        primary: Guest,
        first_name: str | None,
        last_name: str | None,
    ) -> Guest:
        plus_one_first, plus_one_last = plus_one_name(primary, first_name, last_name)
        plus_one = Guest(
            first_name=plus_one_first,
            last_name=plus_one_last,
            email=None,
            invite_code=primary.invite_code,
            side=primary.side,
            list=primary.list,
            family=primary.family,
            rsvp_status=RSVPStatus.PENDING,
            plus_one_allowed=False,
            is_plus_one=True,
            primary_guest_id=primary.id,
            physical_invite_sent=False,
            number_of_resends=0,
        )
        session.add(plus_one)
        return plus_one

    def _update_plus_one(
        self,
        primary: Guest,
        plus_one: Guest,
        first_name: str | None,
        last_name: str | None,
        rename: bool,
    ) -> None:
        if rename or plus_one.last_name == PLUS_ONE_PLACEHOLDER_LAST_NAME:
            plus_one.first_name, plus_one.last_name = plus_one_name(primary, first_name, last_name)
        plus_one.invite_code = primary.invite_code
        plus_one.side = primary.side
        plus_one.list = primary.list
        plus_one.family = primary.family
        plus_one.plus_one_allowed = False
