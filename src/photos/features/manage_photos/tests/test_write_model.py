"""Tests for SqlPhotoWriteModel and SqlPhotoReadModel."""

from uuid import uuid4

import pytest
from sqlalchemy import update

from src.config.database import async_session_maker
from src.photos.dtos import InvalidPhotoDataError, PhotoNotFoundError
from src.photos.features.manage_photos.read_model import SqlPhotoReadModel
from src.photos.features.manage_photos.write_model import SqlPhotoWriteModel
from src.photos.repository.orm_models import Photo


async def test_photos_start_at_zero_and_append():
    async with async_session_maker() as db_session:
        write_model = SqlPhotoWriteModel(session_overwrite=db_session)

        first = await write_model.add_photo("https://img.example/1.jpg", "Us at the beach")
        second = await write_model.add_photo(" https://img.example/2.jpg ", "Engagement", caption="  ")

        await db_session.rollback()
    assert first.display_order == 0
    assert second.display_order == 1
    assert second.url == "https://img.example/2.jpg"
    assert second.caption is None


async def test_add_photo_requires_url_and_alt():
    async with async_session_maker() as db_session:
        write_model = SqlPhotoWriteModel(session_overwrite=db_session)

        with pytest.raises(InvalidPhotoDataError) as exc_info:
            await write_model.add_photo("https://img.example/1.jpg", " ")
        await db_session.rollback()
    assert str(exc_info.value) == "URL and alt text are required"


async def test_public_listing_hides_inactive_photos():
    async with async_session_maker() as db_session:
        write_model = SqlPhotoWriteModel(session_overwrite=db_session)
        shown = await write_model.add_photo("https://img.example/1.jpg", "Shown")
        hidden = await write_model.add_photo("https://img.example/2.jpg", "Hidden")
        await db_session.execute(update(Photo).where(Photo.id == hidden.id).values(is_active=False))
        read_model = SqlPhotoReadModel(session_overwrite=db_session)

        public = await read_model.list_photos()
        everything = await read_model.list_photos(active_only=False)
        await db_session.rollback()

    assert [p.id for p in public] == [shown.id]
    assert [p.id for p in everything] == [shown.id, hidden.id]


async def test_delete_photo():
    async with async_session_maker() as db_session:
        write_model = SqlPhotoWriteModel(session_overwrite=db_session)
        photo = await write_model.add_photo("https://img.example/1.jpg", "Bye")

        await write_model.delete_photo(photo.id)
        remaining = await SqlPhotoReadModel(session_overwrite=db_session).list_photos(active_only=False)
        with pytest.raises(PhotoNotFoundError):
            await write_model.delete_photo(uuid4())
        await db_session.rollback()

    assert remaining == []
