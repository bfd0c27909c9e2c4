from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from src.config.settings import settings
from src.email_service import get_email_service
from src.guests.dtos import (
    InvalidGuestDataError,
    InvalidInviteCodeError,
    InviteCodeNotFoundError,
    PlusOneReconciliationError,
    RSVPStatus,
    RSVPSubmissionDTO,
)
from src.guests.features.submit_rsvp.write_model import RSVPWriteModel, SqlRSVPWriteModel
from src.guests.schemas import OptionalContactMethod, OptionalEmail
from src.guests.urls import RSVP_SUBMIT_URL

router = APIRouter()


class RSVPSubmitRequest(BaseModel):
    invite_code: str
    attending: bool
    dietary_restrictions: str | None = None
    under21: bool | None = None
    email: OptionalEmail = None
    phone_number: str | None = None
    whatsapp: str | None = None
    preferred_contact_method: OptionalContactMethod = None
    mailing_address: str | None = None
    plus_one_attending: bool | None = None
    plus_one_first_name: str | None = None
    plus_one_last_name: str | None = None
    plus_one_email: OptionalEmail = None
    plus_one_dietary_restrictions: str | None = None
    plus_one_under21: bool | None = None


class RSVPSubmitResponse(BaseModel):
    success: bool
    message: str
    rsvp_status: RSVPStatus
    plus_one_rsvp_status: RSVPStatus | None = None


def get_rsvp_write_model() -> RSVPWriteModel:
    """Dependency to get RSVP write model instance."""
    return SqlRSVPWriteModel(
        email_service=get_email_service(),
        notify_address=settings.rsvp_email or None,
    )


@router.post(RSVP_SUBMIT_URL, response_model=RSVPSubmitResponse)
async def submit_rsvp(
    request: RSVPSubmitRequest,
    write_model: RSVPWriteModel = Depends(get_rsvp_write_model),
) -> RSVPSubmitResponse:
    """Record the party's answer to the wedding invitation."""
    try:
        result = await write_model.submit_rsvp(RSVPSubmissionDTO(**request.model_dump()))
    except InvalidInviteCodeError:
        raise HTTPException(status_code=400, detail="Invite code must look like XXXX-XXXX")
    except InviteCodeNotFoundError:
        raise HTTPException(status_code=404, detail="Invalid invite code")
    except InvalidGuestDataError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except PlusOneReconciliationError as e:
        raise HTTPException(status_code=500, detail=f"{e}. No changes were saved, please retry.")

    return RSVPSubmitResponse(
        success=True,
        message="RSVP submitted successfully",
        rsvp_status=result.guest.rsvp_status,
        plus_one_rsvp_status=result.plus_one.rsvp_status if result.plus_one else None,
    )
