from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from src.auth.dependencies import require_admin
from src.config.settings import settings
from src.email_service import get_email_service
from src.guests.dtos import GuestNotFoundError, InvalidGuestDataError
from src.guests.features.send_invitations.write_model import (
    InvitationSendWriteModel,
    SqlInvitationSendWriteModel,
)
from src.guests.schemas import BulkEmailResponse
from src.guests.urls import ADMIN_SEND_ACTIVITIES_EMAIL_URL, ADMIN_SEND_INVITATIONS_URL

router = APIRouter(dependencies=[Depends(require_admin)])


class BulkEmailRequest(BaseModel):
    guest_ids: list[UUID]


def get_invitation_send_write_model() -> InvitationSendWriteModel:
    """Dependency to get invitation send write model instance."""
    return SqlInvitationSendWriteModel(
        email_service=get_email_service(),
        frontend_url=settings.frontend_url,
    )


@router.post(ADMIN_SEND_INVITATIONS_URL, response_model=BulkEmailResponse)
async def send_invitations(
    request: BulkEmailRequest,
    write_model: InvitationSendWriteModel = Depends(get_invitation_send_write_model),
) -> BulkEmailResponse:
    """Send the wedding invitation to each selected guest; failures are reported per guest."""
    try:
        result = await write_model.send_invitations(request.guest_ids)
    except InvalidGuestDataError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except GuestNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return BulkEmailResponse.from_dto(result)


@router.post(ADMIN_SEND_ACTIVITIES_EMAIL_URL, response_model=BulkEmailResponse)
async def send_activities_email(
    request: BulkEmailRequest,
    write_model: InvitationSendWriteModel = Depends(get_invitation_send_write_model),
) -> BulkEmailResponse:
    try:
        result = await write_model.send_activities_emails(request.guest_ids)
    except InvalidGuestDataError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except GuestNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return BulkEmailResponse.from_dto(result)
