from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from src.auth.dependencies import require_admin
from src.guests.dtos import (
    GuestList,
    GuestNotFoundError,
    GuestUpdateDTO,
    InvalidGuestDataError,
    PlusOneReconciliationError,
    RSVPStatus,
    Side,
)
from src.guests.features.update_guest.write_model import GuestUpdateWriteModel, SqlGuestUpdateWriteModel
from src.guests.schemas import GuestWithPlusOneResponse, OptionalContactMethod, OptionalEmail
from src.guests.urls import ADMIN_GUEST_URL

router = APIRouter()


class GuestUpdateRequest(BaseModel):
    """Every field is optional. Omitted fields are left alone, null clears them."""

    first_name: str | None = None
    last_name: str | None = None
    email: OptionalEmail = None
    phone_number: str | None = None
    whatsapp: str | None = None
    preferred_contact_method: OptionalContactMethod = None
    side: Side | None = None
    family: bool | None = None
    rsvp_status: RSVPStatus | None = None
    plus_one_allowed: bool | None = None
    plus_one_first_name: str | None = None
    plus_one_last_name: str | None = None
    mailing_address: str | None = None
    physical_invite_sent: bool | None = None
    dietary_restrictions: str | None = None
    under21: bool | None = None
    notes: str | None = None
    list: GuestList | None = None


def get_guest_update_write_model() -> GuestUpdateWriteModel:
    """Dependency to get guest update write model instance."""
    return SqlGuestUpdateWriteModel()


@router.patch(
    ADMIN_GUEST_URL,
    response_model=GuestWithPlusOneResponse,
    dependencies=[Depends(require_admin)],
)
async def update_guest(
    guest_id: UUID,
    request: GuestUpdateRequest,
    write_model: GuestUpdateWriteModel = Depends(get_guest_update_write_model),
) -> GuestWithPlusOneResponse:
    """
    Partially update a primary guest.
    The plus-one is created, renamed or removed to match plus_one_allowed.
    """
    update = GuestUpdateDTO(**request.model_dump(exclude_unset=True))
    try:
        updated = await write_model.update_guest(guest_id, update)
    except GuestNotFoundError:
        raise HTTPException(status_code=404, detail="Guest not found")
    except InvalidGuestDataError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except PlusOneReconciliationError as e:
        raise HTTPException(status_code=500, detail=f"{e}. No changes were saved, please retry.")
    return GuestWithPlusOneResponse.from_dto(updated)
