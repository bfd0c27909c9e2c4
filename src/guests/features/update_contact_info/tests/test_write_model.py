"""Tests for SqlContactInfoWriteModel."""

import pytest

from src.config.database import async_session_maker
from src.guests.dtos import (
    ContactInfoDTO,
    ContactMethod,
    GuestCreateDTO,
    InvalidGuestDataError,
    InviteCodeNotFoundError,
)
from src.guests.features.create_guest.write_model import SqlGuestCreateWriteModel
from src.guests.features.update_contact_info.write_model import SqlContactInfoWriteModel


async def test_contact_info_applies_to_whole_party():
    async with async_session_maker() as db_session:
        party = await SqlGuestCreateWriteModel(session_overwrite=db_session).create_guest(
            GuestCreateDTO(first_name="John", plus_one_allowed=True, phone_number="555-0100")
        )
        write_model = SqlContactInfoWriteModel(session_overwrite=db_session)

        rows = await write_model.update_contact_info(
            party.guest.invite_code,
            ContactInfoDTO(mailing_address=" 1 Main St ", preferred_contact_method=ContactMethod.TEXT),
        )

        await db_session.rollback()
        assert len(rows) == 2
        assert {row.mailing_address for row in rows} == {"1 Main St"}
        assert {row.preferred_contact_method for row in rows} == {ContactMethod.TEXT}
        primary = next(row for row in rows if not row.is_plus_one)
        assert primary.phone_number == "555-0100"


async def test_contact_info_requires_a_field():
    async with async_session_maker() as db_session:
        write_model = SqlContactInfoWriteModel(session_overwrite=db_session)

        with pytest.raises(InvalidGuestDataError):
            await write_model.update_contact_info("ABCD-2345", ContactInfoDTO())
        await db_session.rollback()


async def test_contact_info_unknown_code():
    async with async_session_maker() as db_session:
        write_model = SqlContactInfoWriteModel(session_overwrite=db_session)

        with pytest.raises(InviteCodeNotFoundError):
            await write_model.update_contact_info("ZZZZ-ZZZZ", ContactInfoDTO(whatsapp="+1555"))
        await db_session.rollback()
