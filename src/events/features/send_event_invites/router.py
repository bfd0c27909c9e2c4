from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from src.auth.dependencies import require_admin
from src.config.settings import settings
from src.email_service import get_email_service
from src.events.dtos import (
    DefaultEventInvitesError,
    EventNotFoundError,
    InvalidEventDataError,
    NotInvitedError,
)
from src.events.features.send_event_invites.write_model import (
    EventInviteSendWriteModel,
    SqlEventInviteSendWriteModel,
)
from src.events.urls import ADMIN_EVENT_SEND_INVITES_URL
from src.guests.schemas import BulkEmailResponse

router = APIRouter()


class SendEventInvitesRequest(BaseModel):
    guest_ids: list[UUID]


def get_event_invite_send_write_model() -> EventInviteSendWriteModel:
    """Dependency to get event invite send write model instance."""
    return SqlEventInviteSendWriteModel(
        email_service=get_email_service(),
        frontend_url=settings.frontend_url,
    )


@router.post(
    ADMIN_EVENT_SEND_INVITES_URL,
    response_model=BulkEmailResponse,
    dependencies=[Depends(require_admin)],
)
async def send_event_invites(
    event_id: UUID,
    request: SendEventInvitesRequest,
    write_model: EventInviteSendWriteModel = Depends(get_event_invite_send_write_model),
) -> BulkEmailResponse:
    """Email the event invite to the selected invited guests."""
    try:
        result = await write_model.send_event_invites(event_id, request.guest_ids)
    except EventNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except NotInvitedError:
        raise HTTPException(status_code=404, detail="No invited guests found")
    except DefaultEventInvitesError:
        raise HTTPException(status_code=409, detail="Cannot send invites for default events")
    except InvalidEventDataError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return BulkEmailResponse.from_dto(result)
