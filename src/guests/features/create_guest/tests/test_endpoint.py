import pytest

from src.guests.dtos import GuestCreateDTO, GuestWithPlusOneDTO, InvalidGuestDataError
from src.guests.features.create_guest.router import get_guest_create_write_model
from src.guests.features.create_guest.write_model import GuestCreateWriteModel
from src.guests.tests.inmemory_models import create_test_guest
from src.guests.urls import ADMIN_GUESTS_URL


class RecordingCreateWriteModel(GuestCreateWriteModel):
    def __init__(self):
        self.created: list[GuestCreateDTO] = []

    async def create_guest(self, data, send_email=True):
        if not data.first_name.strip():
            raise InvalidGuestDataError("First name is required")
        self.created.append(data)
        guest = create_test_guest(first_name=data.first_name, email=data.email)
        return GuestWithPlusOneDTO(guest=guest, plus_one=None)


@pytest.mark.asyncio
async def test_create_guest_blank_email_and_contact_method_are_stored_as_null(client_factory):
    write_model = RecordingCreateWriteModel()

    async with client_factory({get_guest_create_write_model: lambda: write_model}, as_admin=True) as client:
        response = await client.post(
            ADMIN_GUESTS_URL, json={"first_name": "Ann", "email": "", "preferred_contact_method": ""}
        )

    assert response.status_code == 201
    assert write_model.created[0].email is None
    assert write_model.created[0].preferred_contact_method is None
    assert response.json()["guest"]["email"] is None


@pytest.mark.asyncio
async def test_create_guest_keeps_valid_email(client_factory):
    write_model = RecordingCreateWriteModel()

    async with client_factory({get_guest_create_write_model: lambda: write_model}, as_admin=True) as client:
        response = await client.post(
            ADMIN_GUESTS_URL,
            json={"first_name": "Ann", "email": "ann@example.com", "preferred_contact_method": "whatsapp"},
        )

    assert response.status_code == 201
    assert write_model.created[0].email == "ann@example.com"
    assert write_model.created[0].preferred_contact_method == "whatsapp"


@pytest.mark.asyncio
async def test_create_guest_validation_error(client_factory):
    write_model = RecordingCreateWriteModel()

    async with client_factory({get_guest_create_write_model: lambda: write_model}, as_admin=True) as client:
        response = await client.post(ADMIN_GUESTS_URL, json={"first_name": " "})

    assert response.status_code == 400
