from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel

from src.auth.dependencies import require_admin
from src.config.settings import settings
from src.email_service import get_email_service
from src.guests.dtos import (
    GuestCreateDTO,
    GuestList,
    InvalidGuestDataError,
    InviteCodeGenerationError,
    Side,
)
from src.guests.features.create_guest.write_model import GuestCreateWriteModel, SqlGuestCreateWriteModel
from src.guests.schemas import GuestWithPlusOneResponse, OptionalContactMethod, OptionalEmail
from src.guests.urls import ADMIN_GUESTS_URL

router = APIRouter()


class GuestCreateRequest(BaseModel):
    first_name: str
    last_name: str | None = None
    email: OptionalEmail = None
    phone_number: str | None = None
    whatsapp: str | None = None
    preferred_contact_method: OptionalContactMethod = None
    side: Side | None = None
    family: bool = False
    plus_one_allowed: bool = False
    plus_one_first_name: str | None = None
    plus_one_last_name: str | None = None
    mailing_address: str | None = None
    physical_invite_sent: bool = False
    dietary_restrictions: str | None = None
    under21: bool = False
    notes: str | None = None
    send_email: bool = True
    list: GuestList = GuestList.A


def get_guest_create_write_model() -> GuestCreateWriteModel:
    """Dependency to get guest create write model instance."""
    return SqlGuestCreateWriteModel(
        email_service=get_email_service(),
        frontend_url=settings.frontend_url,
    )


@router.post(
    ADMIN_GUESTS_URL,
    response_model=GuestWithPlusOneResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_admin)],
)
async def create_guest(
    request: GuestCreateRequest,
    write_model: GuestCreateWriteModel = Depends(get_guest_create_write_model),
) -> GuestWithPlusOneResponse:
    """Create a primary guest with a fresh invite code, plus its plus-one when allowed."""
    data = GuestCreateDTO(**request.model_dump(exclude={"send_email"}))
    try:
        created = await write_model.create_guest(data, send_email=request.send_email)
    except InvalidGuestDataError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except InviteCodeGenerationError as e:
        raise HTTPException(status_code=500, detail=str(e))
    return GuestWithPlusOneResponse.from_dto(created)
