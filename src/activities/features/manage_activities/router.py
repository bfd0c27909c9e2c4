from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel

from src.activities.dtos import ActivityCreateDTO, ActivityNotFoundError, InvalidActivityDataError
from src.activities.features.manage_activities.write_model import ActivityWriteModel, SqlActivityWriteModel
from src.activities.schemas import ActivityResponse
from src.activities.urls import ADMIN_ACTIVITIES_URL, ADMIN_ACTIVITY_URL
from src.auth.dependencies import require_admin

router = APIRouter(dependencies=[Depends(require_admin)])


class ActivityCreateRequest(BaseModel):
    name: str
    description: str | None = None
    emoji: str | None = None
    address: str | None = None
    image_url: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    is_venue: bool = False
    venue_type: str | None = None


def get_activity_write_model() -> ActivityWriteModel:
    return SqlActivityWriteModel()


@router.post(ADMIN_ACTIVITIES_URL, response_model=ActivityResponse, status_code=status.HTTP_201_CREATED)
async def create_activity(
    request: ActivityCreateRequest,
    write_model: ActivityWriteModel = Depends(get_activity_write_model),
) -> ActivityResponse:
    try:
        activity = await write_model.create_activity(ActivityCreateDTO(**request.model_dump()))
    except InvalidActivityDataError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return ActivityResponse.model_validate(activity)


@router.delete(ADMIN_ACTIVITY_URL, status_code=status.HTTP_204_NO_CONTENT)
async def delete_activity(
    activity_id: UUID,
    write_model: ActivityWriteModel = Depends(get_activity_write_model),
) -> None:
    try:
        await write_model.delete_activity(activity_id)
    except ActivityNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
