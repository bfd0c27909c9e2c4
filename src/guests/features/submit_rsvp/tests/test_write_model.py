"""Tests for SqlRSVPWriteModel."""

import pytest

from src.config.database import async_session_maker
from src.email_service.tests.inmemory_email_service import InMemoryEmailService
from src.guests.dtos import (
    GuestCreateDTO,
    InvalidGuestDataError,
    InvalidInviteCodeError,
    InviteCodeNotFoundError,
    RSVPStatus,
    RSVPSubmissionDTO,
)
from src.guests.features.create_guest.write_model import SqlGuestCreateWriteModel
from src.guests.features.submit_rsvp.write_model import SqlRSVPWriteModel


async def _create_party(db_session, **kwargs):
    return await SqlGuestCreateWriteModel(session_overwrite=db_session).create_guest(
        GuestCreateDTO(first_name="John", **kwargs)
    )


async def test_attending_with_named_plus_one():
    async with async_session_maker() as db_session:
        party = await _create_party(db_session, plus_one_allowed=True)
        write_model = SqlRSVPWriteModel(session_overwrite=db_session)

        result = await write_model.submit_rsvp(
            RSVPSubmissionDTO(
                invite_code=party.guest.invite_code.lower(),
                attending=True,
                dietary_restrictions="vegetarian",
                plus_one_attending=True,
                plus_one_first_name="Jane",
                plus_one_last_name="Roe",
                plus_one_email="jane@example.com",
            )
        )

        await db_session.rollback()
        assert result.guest.rsvp_status == RSVPStatus.YES
        assert result.guest.dietary_restrictions == "vegetarian"
        assert result.plus_one.rsvp_status == RSVPStatus.YES
        assert result.plus_one.full_name == "Jane Roe"
        assert result.plus_one.email == "jane@example.com"


async def test_declining_declines_plus_one_and_drops_dietary():
    async with async_session_maker() as db_session:
        party = await _create_party(db_session, plus_one_allowed=True)
        write_model = SqlRSVPWriteModel(session_overwrite=db_session)

        result = await write_model.submit_rsvp(
            RSVPSubmissionDTO(
                invite_code=party.guest.invite_code,
                attending=False,
                dietary_restrictions="vegan",
            )
        )

        await db_session.rollback()
        assert result.guest.rsvp_status == RSVPStatus.NO
        assert result.guest.dietary_restrictions is None
        assert result.plus_one.rsvp_status == RSVPStatus.NO


async def test_plus_one_not_allowed():
    async with async_session_maker() as db_session:
        party = await _create_party(db_session)
        write_model = SqlRSVPWriteModel(session_overwrite=db_session)

        with pytest.raises(InvalidGuestDataError):
            await write_model.submit_rsvp(
                RSVPSubmissionDTO(
                    invite_code=party.guest.invite_code,
                    attending=True,
                    plus_one_attending=True,
                    plus_one_first_name="Jane",
                )
            )
        await db_session.rollback()


async def test_unknown_and_malformed_codes():
    async with async_session_maker() as db_session:
        write_model = SqlRSVPWriteModel(session_overwrite=db_session)

        with pytest.raises(InviteCodeNotFoundError):
            await write_model.submit_rsvp(RSVPSubmissionDTO(invite_code="ZZZZ-ZZZZ", attending=True))
        with pytest.raises(InvalidInviteCodeError):
            await write_model.submit_rsvp(RSVPSubmissionDTO(invite_code="nope", attending=True))
        await db_session.rollback()


async def test_notification_is_sent_to_couple():
    email_service = InMemoryEmailService()
    async with async_session_maker() as db_session:
        party = await _create_party(db_session)
        write_model = SqlRSVPWriteModel(
            session_overwrite=db_session,
            email_service=email_service,
            notify_address="couple@example.com",
        )

        await write_model.submit_rsvp(RSVPSubmissionDTO(invite_code=party.guest.invite_code, attending=True))

        await db_session.rollback()
    assert len(email_service.sent_to("couple@example.com")) == 1
