from datetime import date, time
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel

from src.auth.dependencies import require_admin
from src.events.dtos import EventCreateDTO, EventNotFoundError, EventUpdateDTO, InvalidEventDataError
from src.events.features.manage_events.read_model import EventReadModel, SqlEventReadModel
from src.events.features.manage_events.write_model import EventWriteModel, SqlEventWriteModel
from src.events.schemas import EventResponse, EventWithCountsResponse
from src.events.urls import ADMIN_EVENT_URL, ADMIN_EVENTS_URL

router = APIRouter(dependencies=[Depends(require_admin)])


class EventCreateRequest(BaseModel):
    name: str
    description: str | None = None
    event_date: date | None = None
    start_time: time | None = None
    end_time: time | None = None
    location_name: str | None = None
    location_address: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    is_default: bool = False


class EventUpdateRequest(BaseModel):
    """Omitted fields are left alone."""

    name: str | None = None
    description: str | None = None
    event_date: date | None = None
    start_time: time | None = None
    end_time: time | None = None
    location_name: str | None = None
    location_address: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    is_default: bool | None = None
    display_order: int | None = None


def get_event_read_model() -> EventReadModel:
    """Dependency to get event read model instance."""
    return SqlEventReadModel()


def get_event_write_model() -> EventWriteModel:
    """Dependency to get event write model instance."""
    return SqlEventWriteModel()


@router.get(ADMIN_EVENTS_URL, response_model=list[EventWithCountsResponse])
async def list_events(
    read_model: EventReadModel = Depends(get_event_read_model),
) -> list[EventWithCountsResponse]:
    events = await read_model.list_events()
    return [EventWithCountsResponse.from_dto(event) for event in events]


@router.post(ADMIN_EVENTS_URL, response_model=EventResponse, status_code=status.HTTP_201_CREATED)
async def create_event(
    request: EventCreateRequest,
    write_model: EventWriteModel = Depends(get_event_write_model),
) -> EventResponse:
    """Create an event. A default event is immediately extended to every guest."""
    try:
        event = await write_model.create_event(EventCreateDTO(**request.model_dump()))
    except InvalidEventDataError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return EventResponse.model_validate(event)


@router.get(ADMIN_EVENT_URL, response_model=EventResponse)
async def get_event(
    event_id: UUID,
    read_model: EventReadModel = Depends(get_event_read_model),
) -> EventResponse:
    event = await read_model.get_event(event_id)
    if event is None:
        raise HTTPException(status_code=404, detail="Event not found")
    return EventResponse.model_validate(event)


@router.patch(ADMIN_EVENT_URL, response_model=EventResponse)
async def update_event(
    event_id: UUID,
    request: EventUpdateRequest,
    write_model: EventWriteModel = Depends(get_event_write_model),
) -> EventResponse:
    try:
        event = await write_model.update_event(
            event_id, EventUpdateDTO(**request.model_dump(exclude_unset=True))
        )
    except EventNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except InvalidEventDataError as e:
        raise HTTPException(status_code=400, detail=str(e))
    return EventResponse.model_validate(event)


@router.delete(ADMIN_EVENT_URL, status_code=status.HTTP_204_NO_CONTENT)
async def delete_event(
    event_id: UUID,
    write_model: EventWriteModel = Depends(get_event_write_model),
) -> None:
    try:
        await write_model.delete_event(event_id)
    except EventNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
