from fastapi import APIRouter, Depends, HTTPException

from src.activities.features.browse_activities.read_model import ActivityReadModel, SqlActivityReadModel
from src.activities.schemas import ActivityResponse, ActivityWithInterestResponse
from src.activities.urls import ACTIVITIES_URL, VENUES_URL
from src.guests.dtos import InvalidInviteCodeError
from src.guests.invite_code import parse_invite_code

router = APIRouter()


def get_activity_read_model() -> ActivityReadModel:
    return SqlActivityReadModel()


@router.get(ACTIVITIES_URL, response_model=list[ActivityWithInterestResponse])
async def list_activities(
    code: str | None = None,
    read_model: ActivityReadModel = Depends(get_activity_read_model),
) -> list[ActivityWithInterestResponse]:
    invite_code = None
    if code:
        try:
            invite_code = parse_invite_code(code)
        except InvalidInviteCodeError:
            raise HTTPException(status_code=400, detail="Invite code must look like XXXX-XXXX")

    activities = await read_model.list_activities(invite_code)
    return [ActivityWithInterestResponse.from_dto(activity) for activity in activities]


@router.get(VENUES_URL, response_model=list[ActivityResponse])
async def list_venues(
    read_model: ActivityReadModel = Depends(get_activity_read_model),
) -> list[ActivityResponse]:
    venues = await read_model.list_venues()
    return [ActivityResponse.model_validate(venue) for venue in venues]
