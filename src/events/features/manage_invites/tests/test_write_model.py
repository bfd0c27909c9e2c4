"""Tests for SqlInviteWriteModel and SqlInviteReadModel."""

from uuid import uuid4

import pytest

from src.config.database import async_session_maker
from src.events.dtos import DefaultEventInvitesError, EventCreateDTO, InvalidEventDataError
from src.events.features.manage_events.write_model import SqlEventWriteModel
from src.events.features.manage_invites.read_model import SqlInviteReadModel
from src.events.features.manage_invites.write_model import SqlInviteWriteModel
from src.guests.dtos import GuestCreateDTO
from src.guests.features.create_guest.write_model import SqlGuestCreateWriteModel


async def test_add_and_remove_invites():
    async with async_session_maker() as db_session:
        create_model = SqlGuestCreateWriteModel(session_overwrite=db_session)
        john = (await create_model.create_guest(GuestCreateDTO(first_name="John"))).guest
        mary = (await create_model.create_guest(GuestCreateDTO(first_name="Mary"))).guest
        brunch = await SqlEventWriteModel(session_overwrite=db_session).create_event(
            EventCreateDTO(name="Brunch")
        )
        write_model = SqlInviteWriteModel(session_overwrite=db_session)

        added = await write_model.add_invites(brunch.id, [john.id, mary.id, uuid4()])
        added_again = await write_model.add_invites(brunch.id, [john.id])
        removed = await write_model.remove_invites(brunch.id, [mary.id])
        invites = await SqlInviteReadModel(session_overwrite=db_session).get_event_invites(brunch.id)
        await db_session.rollback()

    assert added == 2
    assert added_again == 0
    assert removed == 1
    assert invites.counts.total == 2
    assert invites.counts.invited == 1
    assert invites.counts.pending == 1
    invited = {i.first_name: i.invited for i in invites.invitees}
    assert invited == {"John": True, "Mary": False}


async def test_default_event_invites_are_not_managed():
    async with async_session_maker() as db_session:
        wedding = await SqlEventWriteModel(session_overwrite=db_session).create_event(
            EventCreateDTO(name="Wedding", is_default=True)
        )
        write_model = SqlInviteWriteModel(session_overwrite=db_session)

        with pytest.raises(DefaultEventInvitesError):
            await write_model.add_invites(wedding.id, [uuid4()])
        with pytest.raises(DefaultEventInvitesError):
            await write_model.remove_invites(wedding.id, [uuid4()])
        await db_session.rollback()


async def test_invites_need_guest_ids():
    async with async_session_maker() as db_session:
        with pytest.raises(InvalidEventDataError):
            await SqlInviteWriteModel(session_overwrite=db_session).add_invites(uuid4(), [])
        await db_session.rollback()


async def test_invites_of_unknown_event():
    async with async_session_maker() as db_session:
        invites = await SqlInviteReadModel(session_overwrite=db_session).get_event_invites(uuid4())
        await db_session.rollback()
    assert invites is None
