from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException

from src.auth.dependencies import require_admin
from src.guests.repository.read_models import GuestReadModel, SqlGuestReadModel
from src.guests.schemas import GuestResponse, GuestWithPlusOneResponse
from src.guests.urls import ADMIN_GUEST_URL, ADMIN_GUESTS_URL

router = APIRouter(dependencies=[Depends(require_admin)])


def get_guest_read_model() -> GuestReadModel:
    """Dependency to get guest read model instance."""
    return SqlGuestReadModel()


@router.get(ADMIN_GUESTS_URL, response_model=list[GuestResponse])
async def list_guests(
    read_model: GuestReadModel = Depends(get_guest_read_model),
) -> list[GuestResponse]:
    guests = await read_model.list_guests()
    return [GuestResponse.model_validate(guest) for guest in guests]


@router.get(ADMIN_GUEST_URL, response_model=GuestWithPlusOneResponse)
async def get_guest(
    guest_id: UUID,
    read_model: GuestReadModel = Depends(get_guest_read_model),
) -> GuestWithPlusOneResponse:
    """A primary guest together with its plus-one (null when there is none)."""
    guest = await read_model.get_guest_with_plus_one(guest_id)
    if guest is None:
        raise HTTPException(status_code=404, detail="Guest not found")
    return GuestWithPlusOneResponse.from_dto(guest)
