from uuid import uuid4

import pytest

from src.guests.dtos import (
    GuestWithPlusOneDTO,
    InviteCodeNotFoundError,
    PlusOneReconciliationError,
    RSVPStatus,
    RSVPSubmissionDTO,
)
from src.guests.features.submit_rsvp.router import get_rsvp_write_model
from src.guests.features.submit_rsvp.write_model import RSVPWriteModel
from src.guests.tests.inmemory_models import create_test_guest
from src.guests.urls import RSVP_SUBMIT_URL


class RecordingRSVPWriteModel(RSVPWriteModel):
    def __init__(self, error: Exception | None = None):
        self.submissions: list[RSVPSubmissionDTO] = []
        self.error = error

    async def submit_rsvp(self, submission):
        self.submissions.append(submission)
        if self.error:
            raise self.error
        status = RSVPStatus.YES if submission.attending else RSVPStatus.NO
        return GuestWithPlusOneDTO(guest=create_test_guest(rsvp_status=status), plus_one=None)


@pytest.mark.asyncio
async def test_submit_rsvp(client_factory):
    write_model = RecordingRSVPWriteModel()

    async with client_factory({get_rsvp_write_model: lambda: write_model}) as client:
        response = await client.post(
            RSVP_SUBMIT_URL, json={"invite_code": "ABCD-2345", "attending": True, "email": ""}
        )

    assert response.status_code == 200
    assert response.json()["rsvp_status"] == "yes"
    assert write_model.submissions[0].email is None


@pytest.mark.asyncio
async def test_submit_rsvp_unknown_code(client_factory):
    write_model = RecordingRSVPWriteModel(error=InviteCodeNotFoundError("ABCD-2345"))

    async with client_factory({get_rsvp_write_model: lambda: write_model}) as client:
        response = await client.post(RSVP_SUBMIT_URL, json={"invite_code": "ABCD-2345", "attending": False})

    assert response.status_code == 404


@pytest.mark.asyncio
async def test_submit_rsvp_plus_one_failure_is_retryable(client_factory):
    write_model = RecordingRSVPWriteModel(error=PlusOneReconciliationError(uuid4(), "create"))

    async with client_factory({get_rsvp_write_model: lambda: write_model}) as client:
        response = await client.post(
            RSVP_SUBMIT_URL,
            json={
                "invite_code": "ABCD-2345",
                "attending": True,
                "plus_one_attending": True,
                "plus_one_first_name": "Jane",
            },
        )

    assert response.status_code == 500
    assert "please retry" in response.json()["detail"]
