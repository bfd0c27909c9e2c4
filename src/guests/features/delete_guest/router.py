from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status

from src.auth.dependencies import require_admin
from src.guests.dtos import GuestNotFoundError
from src.guests.features.delete_guest.write_model import GuestDeleteWriteModel, SqlGuestDeleteWriteModel
from src.guests.urls import ADMIN_GUEST_URL

router = APIRouter()


def get_guest_delete_write_model() -> GuestDeleteWriteModel:
    """Dependency to get guest delete write model instance."""
    return SqlGuestDeleteWriteModel()


@router.delete(
    ADMIN_GUEST_URL,
    status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_admin)],
)
async def delete_guest(
    guest_id: UUID,
    write_model: GuestDeleteWriteModel = Depends(get_guest_delete_write_model),
) -> None:
    try:
        await write_model.delete_guest(guest_id)
    except GuestNotFoundError:
        raise HTTPException(status_code=404, detail="Guest not found")
