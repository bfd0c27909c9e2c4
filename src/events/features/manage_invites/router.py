from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from src.auth.dependencies import require_admin
from src.events.dtos import DefaultEventInvitesError, EventNotFoundError, InvalidEventDataError
from src.events.features.manage_invites.read_model import InviteReadModel, SqlInviteReadModel
from src.events.features.manage_invites.write_model import InviteWriteModel, SqlInviteWriteModel
from src.events.schemas import EventInvitesResponse
from src.events.urls import ADMIN_EVENT_INVITES_URL

router = APIRouter(dependencies=[Depends(require_admin)])


class InviteChangeRequest(BaseModel):
    guest_ids: list[UUID]


class InvitesAddedResponse(BaseModel):
    success: bool
    added_count: int
    total_requested: int


class InvitesRemovedResponse(BaseModel):
    success: bool
    removed_count: int


def get_invite_read_model() -> InviteReadModel:
    """Dependency to get invite read model instance."""
    return SqlInviteReadModel()


def get_invite_write_model() -> InviteWriteModel:
    """Dependency to get invite write model instance."""
    return SqlInviteWriteModel()


def _to_http_error(e: Exception) -> HTTPException:
    if isinstance(e, EventNotFoundError):
        return HTTPException(status_code=404, detail=str(e))
    if isinstance(e, DefaultEventInvitesError):
        return HTTPException(status_code=409, detail=str(e))
    return HTTPException(status_code=400, detail=str(e))


@router.get(ADMIN_EVENT_INVITES_URL, response_model=EventInvitesResponse)
async def get_event_invites(
    event_id: UUID,
    read_model: InviteReadModel = Depends(get_invite_read_model),
) -> EventInvitesResponse:
    invites = await read_model.get_event_invites(event_id)
    if invites is None:
        raise HTTPException(status_code=404, detail="Event not found")
    return EventInvitesResponse.from_dto(invites)


@router.post(ADMIN_EVENT_INVITES_URL, response_model=InvitesAddedResponse)
async def add_event_invites(
    event_id: UUID,
    request: InviteChangeRequest,
    write_model: InviteWriteModel = Depends(get_invite_write_model),
) -> InvitesAddedResponse:
    try:
        added = await write_model.add_invites(event_id, request.guest_ids)
    except (EventNotFoundError, DefaultEventInvitesError, InvalidEventDataError) as e:
        raise _to_http_error(e)
    return InvitesAddedResponse(success=True, added_count=added, total_requested=len(request.guest_ids))


@router.delete(ADMIN_EVENT_INVITES_URL, response_model=InvitesRemovedResponse)
async def remove_event_invites(
    event_id: UUID,
    request: InviteChangeRequest,
    write_model: InviteWriteModel = Depends(get_invite_write_model),
) -> InvitesRemovedResponse:
    try:
        removed = await write_model.remove_invites(event_id, request.guest_ids)
    except (EventNotFoundError, DefaultEventInvitesError, InvalidEventDataError) as e:
        raise _to_http_error(e)
    return InvitesRemovedResponse(success=True, removed_count=removed)
