from datetime import date, datetime, time
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from src.events.dtos import EventInvitesDTO, EventWithCountsDTO
from src.guests.dtos import RSVPStatus


class EventResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    description: str | None = None
    event_date: date | None = None
    start_time: time | None = None
    end_time: time | None = None
    location_name: str | None = None
    location_address: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    is_default: bool
    display_order: int


class EventWithCountsResponse(EventResponse):
    invite_count: int
    confirmed_count: int
    declined_count: int

    @classmethod
    def from_dto(cls, dto: EventWithCountsDTO) -> "EventWithCountsResponse":
        return cls(
            **EventResponse.model_validate(dto.event).model_dump(),
            invite_count=dto.invite_count,
            confirmed_count=dto.confirmed_count,
            declined_count=dto.declined_count,
        )


class InviteeResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    guest_id: UUID
    first_name: str
    last_name: str | None = None
    email: str | None = None
    invite_code: str
    invited: bool
    rsvp_status: RSVPStatus | None = None
    email_sent: bool
    email_sent_at: datetime | None = None
    email_resend_count: int


class InviteCountsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    total: int
    invited: int
    email_sent: int
    confirmed: int
    declined: int
    pending: int


class EventInvitesResponse(BaseModel):
    event: EventResponse
    guests: list[InviteeResponse]
    counts: InviteCountsResponse

    @classmethod
    def from_dto(cls, dto: EventInvitesDTO) -> "EventInvitesResponse":
        return cls(
            event=EventResponse.model_validate(dto.event),
            guests=[InviteeResponse.model_validate(i) for i in dto.invitees],
            counts=InviteCountsResponse.model_validate(dto.counts),
        )
