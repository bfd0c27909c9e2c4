import pytest

from src.guests.features.verify_invite_code.router import get_guest_read_model
from src.guests.tests.inmemory_models import (
    InMemoryGuestReadModel,
    InMemoryGuestStore,
    create_test_guest,
    create_test_plus_one,
)
from src.guests.urls import RSVP_VERIFY_URL


@pytest.fixture
def john():
    return create_test_guest(first_name="John", invite_code="JOHN-2345")


@pytest.fixture
def read_model(john):
    return InMemoryGuestReadModel(InMemoryGuestStore([john, create_test_plus_one(john)]))


@pytest.mark.asyncio
async def test_verify_invite_code_success(client_factory, read_model, john):
    async with client_factory({get_guest_read_model: lambda: read_model}) as client:
        response = await client.get(RSVP_VERIFY_URL, params={"code": " john-2345 "})

    assert response.status_code == 200
    data = response.json()
    assert data["invite_code"] == "JOHN-2345"
    assert data["primary_guest"]["id"] == str(john.id)
    assert data["primary_guest"]["rsvp_status"] == "pending"
    assert data["plus_one"]["first_name"] == "Jane"


@pytest.mark.asyncio
async def test_verify_invite_code_malformed(client_factory, read_model):
    async with client_factory({get_guest_read_model: lambda: read_model}) as client:
        response = await client.get(RSVP_VERIFY_URL, params={"code": "nope"})

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_verify_invite_code_unknown(client_factory, read_model):
    async with client_factory({get_guest_read_model: lambda: read_model}) as client:
        response = await client.get(RSVP_VERIFY_URL, params={"code": "ZZZZ-ZZZZ"})

    assert response.status_code == 404
    assert response.json()["detail"] == "Invalid invite code"
