"""Tests for SqlEventInviteSendWriteModel."""

from datetime import date, time

import pytest

from src.config.database import async_session_maker
from src.email_service.tests.inmemory_email_service import InMemoryEmailService
from src.events.dtos import DefaultEventInvitesError, EventCreateDTO, EventDTO, NotInvitedError
from src.events.features.manage_events.write_model import SqlEventWriteModel
from src.events.features.manage_invites.read_model import SqlInviteReadModel
from src.events.features.manage_invites.write_model import SqlInviteWriteModel
from src.events.features.send_event_invites.write_model import (
    SqlEventInviteSendWriteModel,
    format_event_date,
    format_event_location,
    format_event_time,
)
from src.guests.dtos import GuestCreateDTO
from src.guests.features.create_guest.write_model import SqlGuestCreateWriteModel


def test_format_event_time():
    assert format_event_time(time(19, 30)) == "7:30 PM"
    assert format_event_time(time(0, 5)) == "12:05 AM"
    assert format_event_time(time(12, 0)) == "12:00 PM"
    assert format_event_time(None) == "TBD"


def test_format_event_date():
    assert format_event_date(date(2026, 6, 13)) == "Saturday, June 13, 2026"
    assert format_event_date(None) == "TBD"


def test_format_event_location():
    event = EventDTO(id=None, name="Brunch", display_order=1, location_name="Cafe", location_address="1 Main St")
    assert format_event_location(event) == "Cafe, 1 Main St"
    assert format_event_location(EventDTO(id=None, name="Brunch", display_order=1)) == "TBD"


async def test_send_event_invites_records_sends():
    email_service = InMemoryEmailService(fail_for={"mary@example.com"})
    async with async_session_maker() as db_session:
        create_model = SqlGuestCreateWriteModel(session_overwrite=db_session)
        john = (await create_model.create_guest(GuestCreateDTO(first_name="John", email="john@example.com"))).guest
        mary = (await create_model.create_guest(GuestCreateDTO(first_name="Mary", email="mary@example.com"))).guest
        brunch = await SqlEventWriteModel(session_overwrite=db_session).create_event(
            EventCreateDTO(name="Brunch", start_time=time(11, 0))
        )
        await SqlInviteWriteModel(session_overwrite=db_session).add_invites(brunch.id, [john.id, mary.id])
        write_model = SqlEventInviteSendWriteModel(
            email_service, session_overwrite=db_session, frontend_url="https://wedding.example"
        )

        result = await write_model.send_event_invites(brunch.id, [john.id, mary.id])

        invites = await SqlInviteReadModel(session_overwrite=db_session).get_event_invites(brunch.id)
        await db_session.rollback()

    assert result.sent_count == 1
    assert result.total == 2
    assert [e.guest_id for e in result.errors] == [mary.id]
    sent = {i.first_name: (i.email_sent, i.email_resend_count) for i in invites.invitees}
    assert sent == {"John": (True, 1), "Mary": (False, 0)}
    message = email_service.sent_to("john@example.com")[0]
    assert str(brunch.id) in message["html"]
    assert f"https://wedding.example/events/rsvp?code={john.invite_code}&event={brunch.id}" in message["text"]
    assert "11:00 AM" in message["html"]


async def test_send_event_invites_for_default_event():
    async with async_session_maker() as db_session:
        wedding = await SqlEventWriteModel(session_overwrite=db_session).create_event(
            EventCreateDTO(name="Wedding", is_default=True)
        )
        john = (
            await SqlGuestCreateWriteModel(session_overwrite=db_session).create_guest(
                GuestCreateDTO(first_name="John", email="john@example.com")
            )
        ).guest
        write_model = SqlEventInviteSendWriteModel(InMemoryEmailService(), session_overwrite=db_session)

        with pytest.raises(DefaultEventInvitesError):
            await write_model.send_event_invites(wedding.id, [john.id])
        await db_session.rollback()


async def test_send_event_invites_to_uninvited_guest():
    async with async_session_maker() as db_session:
        john = (
            await SqlGuestCreateWriteModel(session_overwrite=db_session).create_guest(
                GuestCreateDTO(first_name="John", email="john@example.com")
            )
        ).guest
        brunch = await SqlEventWriteModel(session_overwrite=db_session).create_event(
            EventCreateDTO(name="Brunch")
        )
        write_model = SqlEventInviteSendWriteModel(InMemoryEmailService(), session_overwrite=db_session)

        with pytest.raises(NotInvitedError):
            await write_model.send_event_invites(brunch.id, [john.id])
        await db_session.rollback()
