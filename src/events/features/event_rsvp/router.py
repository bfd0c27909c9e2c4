from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from src.config.settings import settings
from src.email_service import get_email_service
from src.events.dtos import EventNotFoundError, EventRSVPDTO, NotInvitedError
from src.events.features.event_rsvp.write_model import EventRSVPWriteModel, SqlEventRSVPWriteModel
from src.events.schemas import EventResponse
from src.events.urls import EVENT_RSVP_SUBMIT_URL, EVENT_RSVP_VERIFY_URL
from src.guests.dtos import InvalidInviteCodeError, InviteCodeNotFoundError, RSVPStatus

router = APIRouter()


class EventRSVPResponse(BaseModel):
    guest_id: UUID
    guest_name: str
    event: EventResponse
    rsvp_status: RSVPStatus


class EventRSVPSubmitRequest(BaseModel):
    code: str
    event_id: UUID
    attending: bool


class EventRSVPSubmitResponse(BaseModel):
    success: bool
    message: str
    rsvp_status: RSVPStatus


def get_event_rsvp_write_model() -> EventRSVPWriteModel:
    """Dependency to get event RSVP write model instance."""
    return SqlEventRSVPWriteModel(
        email_service=get_email_service(),
        notify_address=settings.rsvp_email or None,
    )


def _to_http_error(e: Exception) -> HTTPException:
    if isinstance(e, InvalidInviteCodeError):
        return HTTPException(status_code=400, detail="Invite code must look like XXXX-XXXX")
    if isinstance(e, InviteCodeNotFoundError):
        return HTTPException(status_code=404, detail="Invalid invite code")
    if isinstance(e, EventNotFoundError):
        return HTTPException(status_code=404, detail="Event not found")
    return HTTPException(status_code=403, detail=str(e))


def _to_response(dto: EventRSVPDTO) -> EventRSVPResponse:
    return EventRSVPResponse(
        guest_id=dto.guest_id,
        guest_name=dto.guest_name,
        event=EventResponse.model_validate(dto.event),
        rsvp_status=dto.rsvp_status,
    )


@router.get(EVENT_RSVP_VERIFY_URL, response_model=EventRSVPResponse)
async def verify_event_rsvp(
    code: str,
    event: UUID,
    write_model: EventRSVPWriteModel = Depends(get_event_rsvp_write_model),
) -> EventRSVPResponse:
    """Check that the invite code's guest is invited to the event and show their answer."""
    try:
        rsvp = await write_model.get_event_rsvp(code, event)
    except (InvalidInviteCodeError, InviteCodeNotFoundError, EventNotFoundError, NotInvitedError) as e:
        raise _to_http_error(e)
    return _to_response(rsvp)


@router.post(EVENT_RSVP_SUBMIT_URL, response_model=EventRSVPSubmitResponse)
async def submit_event_rsvp(
    request: EventRSVPSubmitRequest,
    write_model: EventRSVPWriteModel = Depends(get_event_rsvp_write_model),
) -> EventRSVPSubmitResponse:
    try:
        rsvp = await write_model.submit_event_rsvp(request.code, request.event_id, request.attending)
    except (InvalidInviteCodeError, InviteCodeNotFoundError, EventNotFoundError, NotInvitedError) as e:
        raise _to_http_error(e)

    if rsvp.rsvp_status == RSVPStatus.YES:
        message = "Thank you for confirming your attendance!"
    else:
        message = "Thank you for letting us know."
    return EventRSVPSubmitResponse(success=True, message=message, rsvp_status=rsvp.rsvp_status)
