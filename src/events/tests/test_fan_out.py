"""Tests for default event fan-out."""

from sqlalchemy import func, select

from src.config.database import async_session_maker
from src.events.dtos import EventCreateDTO, EventUpdateDTO
from src.events.fan_out import add_missing_invites, fan_out_default_event
from src.events.features.manage_events.write_model import SqlEventWriteModel
from src.events.repository.orm_models import GuestEventInvite
from src.guests.dtos import GuestCreateDTO
from src.guests.features.create_guest.write_model import SqlGuestCreateWriteModel


async def _invite_count(db_session, event_id):
    result = await db_session.execute(
        select(func.count()).select_from(GuestEventInvite).where(GuestEventInvite.event_id == event_id)
    )
    return result.scalar_one()


async def test_default_event_invites_existing_guests():
    async with async_session_maker() as db_session:
        create_model = SqlGuestCreateWriteModel(session_overwrite=db_session)
        await create_model.create_guest(GuestCreateDTO(first_name="John", plus_one_allowed=True))
        await create_model.create_guest(GuestCreateDTO(first_name="Mary"))

        event = await SqlEventWriteModel(session_overwrite=db_session).create_event(
            EventCreateDTO(name="Ceremony", is_default=True)
        )

        count = await _invite_count(db_session, event.id)
        await db_session.rollback()
        assert count == 3


async def test_fan_out_is_idempotent():
    async with async_session_maker() as db_session:
        await SqlGuestCreateWriteModel(session_overwrite=db_session).create_guest(
            GuestCreateDTO(first_name="John")
        )
        event = await SqlEventWriteModel(session_overwrite=db_session).create_event(
            EventCreateDTO(name="Ceremony", is_default=True)
        )

        added = await fan_out_default_event(db_session, event.id)

        count = await _invite_count(db_session, event.id)
        await db_session.rollback()
        assert added == 0
        assert count == 1


async def test_marking_event_default_fans_out():
    async with async_session_maker() as db_session:
        await SqlGuestCreateWriteModel(session_overwrite=db_session).create_guest(
            GuestCreateDTO(first_name="John")
        )
        write_model = SqlEventWriteModel(session_overwrite=db_session)
        event = await write_model.create_event(EventCreateDTO(name="Brunch"))
        before = await _invite_count(db_session, event.id)

        await write_model.update_event(event.id, EventUpdateDTO(is_default=True))

        after = await _invite_count(db_session, event.id)
        await db_session.rollback()
        assert before == 0
        assert after == 1


async def test_add_missing_invites_ignores_duplicates():
    async with async_session_maker() as db_session:
        party = await SqlGuestCreateWriteModel(session_overwrite=db_session).create_guest(
            GuestCreateDTO(first_name="John")
        )
        event = await SqlEventWriteModel(session_overwrite=db_session).create_event(
            EventCreateDTO(name="Brunch")
        )

        first = await add_missing_invites(db_session, event.id, [party.guest.id, party.guest.id])
        second = await add_missing_invites(db_session, event.id, [party.guest.id])

        await db_session.rollback()
        assert first == 1
        assert second == 0
