from uuid import uuid4

import pytest

from src.events.dtos import DefaultEventInvitesError, EventNotFoundError
from src.events.features.manage_invites.router import get_invite_write_model
from src.events.features.manage_invites.write_model import InviteWriteModel
from src.events.urls import ADMIN_EVENT_INVITES_URL

BRUNCH_ID = uuid4()
WEDDING_ID = uuid4()


class InMemoryInviteWriteModel(InviteWriteModel):
    def __init__(self):
        self.invites: set = set()

    def _check(self, event_id):
        if event_id == WEDDING_ID:
            raise DefaultEventInvitesError(event_id)
        if event_id != BRUNCH_ID:
            raise EventNotFoundError(event_id)

    async def add_invites(self, event_id, guest_ids):
        self._check(event_id)
        new = set(guest_ids) - self.invites
        self.invites |= new
        return len(new)

    async def remove_invites(self, event_id, guest_ids):
        self._check(event_id)
        removed = self.invites & set(guest_ids)
        self.invites -= removed
        return len(removed)


@pytest.fixture
def write_model():
    return InMemoryInviteWriteModel()


@pytest.mark.asyncio
async def test_add_and_remove_invites(client_factory, write_model):
    guest_ids = [str(uuid4()), str(uuid4())]

    async with client_factory({get_invite_write_model: lambda: write_model}, as_admin=True) as client:
        added = await client.post(ADMIN_EVENT_INVITES_URL.format(event_id=BRUNCH_ID), json={"guest_ids": guest_ids})
        removed = await client.request(
            "DELETE", ADMIN_EVENT_INVITES_URL.format(event_id=BRUNCH_ID), json={"guest_ids": guest_ids[:1]}
        )

    assert added.json() == {"success": True, "added_count": 2, "total_requested": 2}
    assert removed.json() == {"success": True, "removed_count": 1}


@pytest.mark.asyncio
async def test_default_event_invites_conflict(client_factory, write_model):
    async with client_factory({get_invite_write_model: lambda: write_model}, as_admin=True) as client:
        response = await client.post(
            ADMIN_EVENT_INVITES_URL.format(event_id=WEDDING_ID), json={"guest_ids": [str(uuid4())]}
        )

    assert response.status_code == 409
    assert response.json()["detail"] == "Cannot manage invites for default events"


@pytest.mark.asyncio
async def test_unknown_event(client_factory, write_model):
    async with client_factory({get_invite_write_model: lambda: write_model}, as_admin=True) as client:
        response = await client.post(ADMIN_EVENT_INVITES_URL.format(event_id=uuid4()), json={"guest_ids": [str(uuid4())]})

    assert response.status_code == 404
