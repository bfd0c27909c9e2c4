from uuid import uuid4

import pytest

from src.activities.dtos import ActivityDTO, ActivityWithInterestDTO, InterestedPartyDTO, InterestStatus
from src.activities.features.browse_activities.read_model import ActivityReadModel
from src.activities.features.browse_activities.router import get_activity_read_model
from src.activities.urls import ACTIVITIES_URL, VENUES_URL

KAYAKING = ActivityDTO(id=uuid4(), name="Kayaking", display_order=1)
BARN = ActivityDTO(id=uuid4(), name="The Barn", display_order=2, is_venue=True)


class InMemoryActivityReadModel(ActivityReadModel):
    def __init__(self):
        self.requested_codes = []

    async def list_activities(self, invite_code=None):
        self.requested_codes.append(invite_code)
        party = InterestedPartyDTO(invite_code="JOHN-2345", names=["John", "Jane"], status=InterestStatus.INTERESTED)
        mine = invite_code == "JOHN-2345"
        return [
            ActivityWithInterestDTO(
                activity=KAYAKING,
                interested_parties=[party],
                my_status=InterestStatus.INTERESTED if mine else None,
            )
        ]

    async def list_venues(self):
        return [BARN]


@pytest.fixture
def read_model():
    return InMemoryActivityReadModel()


@pytest.mark.asyncio
async def test_list_activities_with_code(client_factory, read_model):
    async with client_factory({get_activity_read_model: lambda: read_model}) as client:
        response = await client.get(ACTIVITIES_URL, params={"code": "john-2345"})

    assert response.status_code == 200
    activity = response.json()[0]
    assert activity["name"] == "Kayaking"
    assert activity["my_status"] == "interested"
    assert activity["interested_parties"][0]["names"] == ["John", "Jane"]
    assert read_model.requested_codes == ["JOHN-2345"]


@pytest.mark.asyncio
async def test_list_activities_with_malformed_code(client_factory, read_model):
    async with client_factory({get_activity_read_model: lambda: read_model}) as client:
        response = await client.get(ACTIVITIES_URL, params={"code": "nope"})

    assert response.status_code == 400


@pytest.mark.asyncio
async def test_list_venues(client_factory, read_model):
    async with client_factory({get_activity_read_model: lambda: read_model}) as client:
        response = await client.get(VENUES_URL)

    assert [v["name"] for v in response.json()] == ["The Barn"]
