import logging
from abc import ABC, abstractmethod
from datetime import date
from functools import partial
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.activities.dtos import ActivityNotFoundError, InterestStatus
from src.activities.repository.orm_models import Activity, GuestActivityInterest
from src.config.database import async_session_manager
from src.guests.dtos import InviteCodeNotFoundError
from src.guests.repository.queries import get_party_rows

logger = logging.getLogger(__name__)


class InterestWriteModel(ABC):
    @abstractmethod
    async def set_interest(
        self,
        invite_code: str,
        activity_id: UUID,
        status: InterestStatus | None,
        planned_date: date | None = None,
    ) -> None:
        """Set a party's interest in an activity. A None status removes it.

        Raises InviteCodeNotFoundError or ActivityNotFoundError.
        """
        raise NotImplementedError


class SqlInterestWriteModel(InterestWriteModel):
    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self._session_overwrite = session_overwrite

    async def set_interest(
        self,
        invite_code: str,
        activity_id: UUID,
        status: InterestStatus | None,
        planned_date: date | None = None,
    ) -> None:
        async with self.async_session_manager(session_overwrite=self._session_overwrite) as session:
            party = await get_party_rows(session, invite_code)
            if not party:
                raise InviteCodeNotFoundError(invite_code)

            result = await session.execute(select(Activity.id).where(Activity.id == activity_id))
            if result.scalar_one_or_none() is None:
                raise ActivityNotFoundError(activity_id)

            if status is None:
                await session.execute(
                    delete(GuestActivityInterest).where(
                        GuestActivityInterest.activity_id == activity_id,
                        GuestActivityInterest.invite_code == invite_code,
                    )
                )
                logger.info("Party %s dropped interest in activity %s", invite_code, activity_id)
                return

            result = await session.execute(
                select(GuestActivityInterest).where(
                    GuestActivityInterest.activity_id == activity_id,
                    GuestActivityInterest.invite_code == invite_code,
                )
            )
            existing = list(result.scalars().all())
            if existing:
                for interest in existing:
                    interest.status = status
                    interest.planned_date = planned_date
            else:
                session.add_all(
                    GuestActivityInterest(
                        guest_id=guest.id,
                        activity_id=activity_id,
                        invite_code=invite_code,
                        status=status,
                        planned_date=planned_date,
                    )
                    for guest in party
                )
            await session.flush()
