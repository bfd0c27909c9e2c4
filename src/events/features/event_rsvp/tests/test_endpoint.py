from uuid import uuid4

import pytest

from src.events.dtos import EventDTO, EventNotFoundError, EventRSVPDTO, NotInvitedError
from src.events.features.event_rsvp.router import get_event_rsvp_write_model
from src.events.features.event_rsvp.write_model import EventRSVPWriteModel
from src.events.urls import EVENT_RSVP_SUBMIT_URL, EVENT_RSVP_VERIFY_URL
from src.guests.dtos import InviteCodeNotFoundError, RSVPStatus
from src.guests.invite_code import parse_invite_code

BRUNCH = EventDTO(id=uuid4(), name="Brunch", display_order=1)


class InMemoryEventRSVPWriteModel(EventRSVPWriteModel):
    def __init__(self, invited_codes: set[str]):
        self.invited_codes = invited_codes
        self.answers: dict[str, RSVPStatus] = {}

    def _check(self, invite_code, event_id):
        code = parse_invite_code(invite_code)
        if code == "ZZZZ-ZZZZ":
            raise InviteCodeNotFoundError(code)
        if event_id != BRUNCH.id:
            raise EventNotFoundError(event_id)
        if code not in self.invited_codes:
            raise NotInvitedError(uuid4(), event_id)
        return code

    async def get_event_rsvp(self, invite_code, event_id):
        code = self._check(invite_code, event_id)
        return EventRSVPDTO(
            guest_id=uuid4(),
            guest_name="John Doe",
            event=BRUNCH,
            rsvp_status=self.answers.get(code, RSVPStatus.PENDING),
        )

    async def submit_event_rsvp(self, invite_code, event_id, attending):
        code = self._check(invite_code, event_id)
        self.answers[code] = RSVPStatus.YES if attending else RSVPStatus.NO
        return await self.get_event_rsvp(code, event_id)


@pytest.fixture
def overrides():
    write_model = InMemoryEventRSVPWriteModel({"JOHN-2345"})
    return {get_event_rsvp_write_model: lambda: write_model}


@pytest.mark.asyncio
async def test_verify_event_rsvp(client_factory, overrides):
    async with client_factory(overrides) as client:
        response = await client.get(EVENT_RSVP_VERIFY_URL, params={"code": "john-2345", "event": str(BRUNCH.id)})

    assert response.status_code == 200
    assert response.json()["event"]["name"] == "Brunch"
    assert response.json()["rsvp_status"] == "pending"


@pytest.mark.asyncio
async def test_submit_event_rsvp_messages(client_factory, overrides):
    async with client_factory(overrides) as client:
        yes = await client.post(
            EVENT_RSVP_SUBMIT_URL, json={"code": "JOHN-2345", "event_id": str(BRUNCH.id), "attending": True}
        )
        no = await client.post(
            EVENT_RSVP_SUBMIT_URL, json={"code": "JOHN-2345", "event_id": str(BRUNCH.id), "attending": False}
        )

    assert yes.json()["message"] == "Thank you for confirming your attendance!"
    assert no.json()["message"] == "Thank you for letting us know."
    assert no.json()["rsvp_status"] == "no"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "code, event_id, status_code",
    [
        ("nope", BRUNCH.id, 400),
        ("ZZZZ-ZZZZ", BRUNCH.id, 404),
        ("JOHN-2345", uuid4(), 404),
        ("MARY-2345", BRUNCH.id, 403),
    ],
)
async def test_event_rsvp_errors(client_factory, overrides, code, event_id, status_code):
    async with client_factory(overrides) as client:
        response = await client.post(
            EVENT_RSVP_SUBMIT_URL, json={"code": code, "event_id": str(event_id), "attending": True}
        )

    assert response.status_code == status_code
