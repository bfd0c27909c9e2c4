from dataclasses import dataclass, field, fields
from datetime import date, datetime, time
from typing import Any
from uuid import UUID

from src.guests.dtos import UNSET, RSVPStatus


class EventNotFoundError(Exception):
    """Raised when an event id does not match any row."""

    def __init__(self, event_id: UUID) -> None:
        self.event_id = event_id
        super().__init__("Event not found")


class InvalidEventDataError(Exception):
    pass


class DefaultEventInvitesError(Exception):
    """Raised when invites of a default event are managed by hand."""

    def __init__(self, event_id: UUID) -> None:
        self.event_id = event_id
        super().__init__("Cannot manage invites for default events")


class NotInvitedError(Exception):
    """Raised when a guest answers an event they have no invite row for."""

    def __init__(self, guest_id: UUID, event_id: UUID) -> None:
        self.guest_id = guest_id
        self.event_id = event_id
        super().__init__("You are not invited to this event")


@dataclass(frozen=True)
class EventDTO:
    id: UUID
    name: str
    display_order: int
    is_default: bool = False
    description: str | None = None
    event_date: date | None = None
    start_time: time | None = None
    end_time: time | None = None
    location_name: str | None = None
    location_address: str | None = None
    latitude: float | None = None
    longitude: float | None = None


@dataclass(frozen=True)
class EventWithCountsDTO:
    event: EventDTO
    invite_count: int = 0
    confirmed_count: int = 0
    declined_count: int = 0


@dataclass(frozen=True)
class EventCreateDTO:
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


@dataclass(frozen=True)
class EventUpdateDTO:
    """Partial event update; UNSET fields are left alone."""

    name: str = UNSET
    description: str | None = UNSET
    event_date: date | None = UNSET
    start_time: time | None = UNSET
    end_time: time | None = UNSET
    location_name: str | None = UNSET
    location_address: str | None = UNSET
    latitude: float | None = UNSET
    longitude: float | None = UNSET
    is_default: bool = UNSET
    display_order: int = UNSET

    def provided(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name) is not UNSET}


@dataclass(frozen=True)
class GuestEventInviteDTO:
    id: UUID
    guest_id: UUID
    event_id: UUID
    rsvp_status: RSVPStatus = RSVPStatus.PENDING
    email_sent: bool = False
    email_sent_at: datetime | None = None
    email_resend_count: int = 0


@dataclass(frozen=True)
class InviteeDTO:
    """A primary guest as seen from one event's invite list."""

    guest_id: UUID
    first_name: str
    last_name: str | None
    email: str | None
    invite_code: str
    invited: bool
    rsvp_status: RSVPStatus | None = None
    email_sent: bool = False
    email_sent_at: datetime | None = None
    email_resend_count: int = 0


@dataclass(frozen=True)
class InviteCountsDTO:
    total: int = 0
    invited: int = 0
    email_sent: int = 0
    confirmed: int = 0
    declined: int = 0
    pending: int = 0


@dataclass(frozen=True)
class EventInvitesDTO:
    event: EventDTO
    invitees: list[InviteeDTO] = field(default_factory=list)
    counts: InviteCountsDTO = field(default_factory=InviteCountsDTO)


@dataclass(frozen=True)
class EventRSVPDTO:
    """What a guest sees when answering an event invite."""

    guest_id: UUID
    guest_name: str
    event: EventDTO
    rsvp_status: RSVPStatus
