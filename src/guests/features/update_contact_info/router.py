from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from src.guests.dtos import (
    ContactInfoDTO,
    InvalidGuestDataError,
    InvalidInviteCodeError,
    InviteCodeNotFoundError,
)
from src.guests.features.update_contact_info.write_model import (
    ContactInfoWriteModel,
    SqlContactInfoWriteModel,
)
from src.guests.schemas import OptionalContactMethod
from src.guests.urls import RSVP_CONTACT_URL

router = APIRouter()


class ContactInfoRequest(BaseModel):
    invite_code: str
    mailing_address: str | None = None
    phone_number: str | None = None
    whatsapp: str | None = None
    preferred_contact_method: OptionalContactMethod = None


class ContactInfoResponse(BaseModel):
    success: bool
    updated_guests: int


def get_contact_info_write_model() -> ContactInfoWriteModel:
    """Dependency to get contact info write model instance."""
    return SqlContactInfoWriteModel()


@router.post(RSVP_CONTACT_URL, response_model=ContactInfoResponse)
async def update_contact_info(
    request: ContactInfoRequest,
    write_model: ContactInfoWriteModel = Depends(get_contact_info_write_model),
) -> ContactInfoResponse:
    """Update contact details for everyone sharing the invite code."""
    contact = ContactInfoDTO(**request.model_dump(exclude_unset=True, exclude={"invite_code"}))
    try:
        guests = await write_model.update_contact_info(request.invite_code, contact)
    except InvalidInviteCodeError:
        raise HTTPException(status_code=400, detail="Invite code must look like XXXX-XXXX")
    except InviteCodeNotFoundError:
        raise HTTPException(status_code=404, detail="Invalid invite code")
    except InvalidGuestDataError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return ContactInfoResponse(success=True, updated_guests=len(guests))
