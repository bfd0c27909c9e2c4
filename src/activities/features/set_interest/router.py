from datetime import date
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from src.activities.dtos import ActivityNotFoundError, InterestStatus
from src.activities.features.set_interest.write_model import InterestWriteModel, SqlInterestWriteModel
from src.activities.urls import ACTIVITY_INTEREST_URL
from src.guests.dtos import InvalidInviteCodeError, InviteCodeNotFoundError
from src.guests.invite_code import parse_invite_code

router = APIRouter()


class InterestRequest(BaseModel):
    code: str
    status: InterestStatus | None = None
    planned_date: date | None = None


class InterestResponse(BaseModel):
    success: bool
    status: InterestStatus | None = None


def get_interest_write_model() -> InterestWriteModel:
    return SqlInterestWriteModel()


@router.put(ACTIVITY_INTEREST_URL, response_model=InterestResponse)
async def set_activity_interest(
    activity_id: UUID,
    request: InterestRequest,
    write_model: InterestWriteModel = Depends(get_interest_write_model),
) -> InterestResponse:
    """Mark the party as interested in or committed to an activity. A null status clears it."""
    try:
        invite_code = parse_invite_code(request.code)
        await write_model.set_interest(invite_code, activity_id, request.status, request.planned_date)
    except InvalidInviteCodeError:
        raise HTTPException(status_code=400, detail="Invite code must look like XXXX-XXXX")
    except InviteCodeNotFoundError:
        raise HTTPException(status_code=404, detail="Invalid invite code")
    except ActivityNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return InterestResponse(success=True, status=request.status)
