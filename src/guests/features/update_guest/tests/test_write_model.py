"""Tests for SqlGuestUpdateWriteModel."""

from uuid import uuid4

import pytest

from src.config.database import async_session_maker
from src.guests.dtos import (
    GuestCreateDTO,
    GuestNotFoundError,
    GuestUpdateDTO,
    InvalidGuestDataError,
    RSVPStatus,
)
from src.guests.features.create_guest.write_model import SqlGuestCreateWriteModel
from src.guests.features.update_guest.write_model import SqlGuestUpdateWriteModel, clean_field


def test_clean_field_blanks_become_none():
    assert clean_field("email", "   ") is None
    assert clean_field("notes", " keep ") == "keep"


def test_clean_field_booleans():
    assert clean_field("under21", None) is False
    assert clean_field("family", 1) is True


def test_clean_field_required_fields():
    with pytest.raises(InvalidGuestDataError):
        clean_field("first_name", "  ")


async def test_update_guest_only_touches_supplied_fields():
    async with async_session_maker() as db_session:
        created = await SqlGuestCreateWriteModel(session_overwrite=db_session).create_guest(
            GuestCreateDTO(first_name="John", email="john@example.com", notes="table 4")
        )
        write_model = SqlGuestUpdateWriteModel(session_overwrite=db_session)

        result = await write_model.update_guest(
            created.guest.id, GuestUpdateDTO(rsvp_status=RSVPStatus.YES, notes=None)
        )

        await db_session.rollback()
        assert result.guest.rsvp_status == RSVPStatus.YES
        assert result.guest.notes is None
        assert result.guest.email == "john@example.com"
        assert result.guest.invite_code == created.guest.invite_code


async def test_update_guest_unknown_id():
    async with async_session_maker() as db_session:
        write_model = SqlGuestUpdateWriteModel(session_overwrite=db_session)

        with pytest.raises(GuestNotFoundError):
            await write_model.update_guest(uuid4(), GuestUpdateDTO(first_name="Nobody"))
        await db_session.rollback()


async def test_update_guest_rejects_plus_one_row():
    async with async_session_maker() as db_session:
        created = await SqlGuestCreateWriteModel(session_overwrite=db_session).create_guest(
            GuestCreateDTO(first_name="John", plus_one_allowed=True)
        )
        write_model = SqlGuestUpdateWriteModel(session_overwrite=db_session)

        with pytest.raises(GuestNotFoundError):
            await write_model.update_guest(created.plus_one.id, GuestUpdateDTO(first_name="Jane"))
        await db_session.rollback()
