"""Tests for activity interest and the things-to-do listing."""

from uuid import uuid4

import pytest

from src.activities.dtos import ActivityCreateDTO, ActivityNotFoundError, InterestStatus
from src.activities.features.browse_activities.read_model import SqlActivityReadModel
from src.activities.features.manage_activities.write_model import SqlActivityWriteModel
from src.activities.features.set_interest.write_model import SqlInterestWriteModel
from src.config.database import async_session_maker
from src.guests.dtos import GuestCreateDTO, InviteCodeNotFoundError
from src.guests.features.create_guest.write_model import SqlGuestCreateWriteModel


async def _setup(db_session):
    party = await SqlGuestCreateWriteModel(session_overwrite=db_session).create_guest(
        GuestCreateDTO(first_name="John", plus_one_allowed=True, plus_one_first_name="Jane")
    )
    activity = await SqlActivityWriteModel(session_overwrite=db_session).create_activity(
        ActivityCreateDTO(name="Kayaking", emoji="🛶")
    )
    return party, activity


async def test_interest_is_grouped_by_party():
    async with async_session_maker() as db_session:
        party, activity = await _setup(db_session)
        code = party.guest.invite_code
        write_model = SqlInterestWriteModel(session_overwrite=db_session)

        await write_model.set_interest(code, activity.id, InterestStatus.INTERESTED)
        await write_model.set_interest(code, activity.id, InterestStatus.COMMITTED)

        listed = await SqlActivityReadModel(session_overwrite=db_session).list_activities(code)
        await db_session.rollback()

    assert len(listed) == 1
    kayaking = listed[0]
    assert kayaking.my_status == InterestStatus.COMMITTED
    assert len(kayaking.interested_parties) == 1
    assert kayaking.interested_parties[0].invite_code == code
    assert kayaking.interested_parties[0].names == ["John", "Jane"]


async def test_clearing_interest():
    async with async_session_maker() as db_session:
        party, activity = await _setup(db_session)
        code = party.guest.invite_code
        write_model = SqlInterestWriteModel(session_overwrite=db_session)
        await write_model.set_interest(code, activity.id, InterestStatus.INTERESTED)

        await write_model.set_interest(code, activity.id, None)

        listed = await SqlActivityReadModel(session_overwrite=db_session).list_activities(code)
        await db_session.rollback()

    assert listed[0].interested_parties == []
    assert listed[0].my_status is None


async def test_interest_unknown_code_or_activity():
    async with async_session_maker() as db_session:
        party, _ = await _setup(db_session)
        write_model = SqlInterestWriteModel(session_overwrite=db_session)

        with pytest.raises(InviteCodeNotFoundError):
            await write_model.set_interest("ZZZZ-ZZZZ", uuid4(), InterestStatus.INTERESTED)
        with pytest.raises(ActivityNotFoundError):
            await write_model.set_interest(party.guest.invite_code, uuid4(), InterestStatus.INTERESTED)
        await db_session.rollback()


async def test_venues_and_deleting_activities():
    async with async_session_maker() as db_session:
        party, activity = await _setup(db_session)
        write_model = SqlActivityWriteModel(session_overwrite=db_session)
        venue = await write_model.create_activity(
            ActivityCreateDTO(name="The Barn", is_venue=True, venue_type="reception")
        )
        await SqlInterestWriteModel(session_overwrite=db_session).set_interest(
            party.guest.invite_code, activity.id, InterestStatus.INTERESTED
        )

        await write_model.delete_activity(activity.id)

        read_model = SqlActivityReadModel(session_overwrite=db_session)
        venues = await read_model.list_venues()
        listed = await read_model.list_activities()
        await db_session.rollback()

    assert [v.id for v in venues] == [venue.id]
    assert [a.activity.id for a in listed] == [venue.id]
    assert venue.display_order == activity.display_order + 1
