"""Read model for the things-to-do page.

Interest rows are stored per guest but shown per party, so rows are grouped
by invite code and labelled with the first names of the guests sharing it.
"""

import abc
from collections import defaultdict
from functools import partial

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.activities.dtos import ActivityDTO, ActivityWithInterestDTO, InterestedPartyDTO
from src.activities.repository.orm_models import Activity, GuestActivityInterest
from src.config.database import async_session_manager
from src.guests.repository.orm_models import Guest


class ActivityReadModel(abc.ABC):
    @abc.abstractmethod
    async def list_activities(self, invite_code: str | None = None) -> list[ActivityWithInterestDTO]:
        """Activities in display order with the interested parties.

        When an invite code is given, that party's own status is filled in.
        """
        raise NotImplementedError

    @abc.abstractmethod
    async def list_venues(self) -> list[ActivityDTO]:
        raise NotImplementedError


class SqlActivityReadModel(ActivityReadModel):
    async_session_manager = staticmethod(partial(async_session_manager))

    def __init__(self, session_overwrite: AsyncSession | None = None) -> None:
        self._session_overwrite = session_overwrite

    async def list_activities(self, invite_code: str | None = None) -> list[ActivityWithInterestDTO]:
        async with self.async_session_manager(session_overwrite=self._session_overwrite) as session:
            result = await session.execute(select(Activity).order_by(Activity.display_order, Activity.name))
            activities = [activity.to_dto() for activity in result.scalars().all()]

            result = await session.execute(
                select(GuestActivityInterest, Guest.first_name)
                .join(Guest, Guest.id == GuestActivityInterest.guest_id)
                .order_by(GuestActivityInterest.invite_code, Guest.is_plus_one, Guest.first_name)
            )
            rows = result.all()

        # activity id -> invite code -> (status, planned_date, names)
        grouped: dict = defaultdict(dict)
        for interest, first_name in rows:
            party = grouped[interest.activity_id].setdefault(
                interest.invite_code,
                {"status": interest.status, "planned_date": interest.planned_date, "names": []},
            )
            party["names"].append(first_name)

        activities_with_interest = []
        for activity in activities:
            parties = grouped.get(activity.id, {})
            mine = parties.get(invite_code) if invite_code else None
            activities_with_interest.append(
                ActivityWithInterestDTO(
                    activity=activity,
                    interested_parties=[
                        InterestedPartyDTO(
                            invite_code=code,
                            names=party["names"],
                            status=party["status"],
                            planned_date=party["planned_date"],
                        )
                        for code, party in parties.items()
                    ],
                    my_status=mine["status"] if mine else None,
                    my_planned_date=mine["planned_date"] if mine else None,
                )
            )
        return activities_with_interest

    async def list_venues(self) -> list[ActivityDTO]:
        async with self.async_session_manager(session_overwrite=self._session_overwrite) as session:
            result = await session.execute(
                select(Activity).where(Activity.is_venue.is_(True)).order_by(Activity.display_order)
            )
            return [activity.to_dto() for activity in result.scalars().all()]
