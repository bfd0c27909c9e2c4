from typing import Annotated, Any
from uuid import UUID

from pydantic import BaseModel, BeforeValidator, ConfigDict, EmailStr

from src.guests.dtos import (
    BulkEmailResultDTO,
    ContactMethod,
    GuestList,
    GuestWithPlusOneDTO,
    PartyDTO,
    RSVPStatus,
    Side,
)


def blank_to_none(value: Any) -> Any:
    """Treat an empty or whitespace-only string as an explicit null."""
    if isinstance(value, str) and not value.strip():
        return None
    return value


OptionalEmail = Annotated[EmailStr | None, BeforeValidator(blank_to_none)]
OptionalContactMethod = Annotated[ContactMethod | None, BeforeValidator(blank_to_none)]


class GuestResponse(BaseModel):
    """A guest row as returned to the admin back-office."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    first_name: str
    last_name: str | None = None
    email: str | None = None
    phone_number: str | None = None
    whatsapp: str | None = None
    preferred_contact_method: ContactMethod | None = None
    side: Side | None = None
    family: bool
    rsvp_status: RSVPStatus
    plus_one_allowed: bool
    is_plus_one: bool
    primary_guest_id: UUID | None = None
    mailing_address: str | None = None
    physical_invite_sent: bool
    dietary_restrictions: str | None = None
    under21: bool
    notes: str | None = None
    invite_code: str
    number_of_resends: int
    activities_email_sent: bool
    activities_email_resend_count: int
    list: GuestList


class GuestWithPlusOneResponse(BaseModel):
    guest: GuestResponse
    plus_one: GuestResponse | None = None

    @classmethod
    def from_dto(cls, dto: GuestWithPlusOneDTO) -> "GuestWithPlusOneResponse":
        return cls(
            guest=GuestResponse.model_validate(dto.guest),
            plus_one=GuestResponse.model_validate(dto.plus_one) if dto.plus_one else None,
        )


class PartyGuestResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    first_name: str
    last_name: str | None = None
    email: str | None = None
    rsvp_status: RSVPStatus


class PartyResponse(BaseModel):
    """The party behind an invite code or a logged-in visitor."""

    invite_code: str
    primary_guest: PartyGuestResponse
    plus_one: PartyGuestResponse | None = None
    is_logged_in: bool = False
    is_admin: bool = False

    @classmethod
    def from_dto(cls, dto: PartyDTO) -> "PartyResponse":
        return cls(
            invite_code=dto.invite_code,
            primary_guest=PartyGuestResponse.model_validate(dto.primary_guest),
            plus_one=PartyGuestResponse.model_validate(dto.plus_one) if dto.plus_one else None,
            is_logged_in=dto.is_logged_in,
            is_admin=dto.is_admin,
        )


class EmailErrorResponse(BaseModel):
    guest_id: UUID
    name: str
    error: str


class BulkEmailResponse(BaseModel):
    success: bool
    sent_count: int
    total: int
    errors: list[EmailErrorResponse] = []

    @classmethod
    def from_dto(cls, dto: BulkEmailResultDTO) -> "BulkEmailResponse":
        return cls(
            success=not dto.errors,
            sent_count=dto.sent_count,
            total=dto.total,
            errors=[
                EmailErrorResponse(guest_id=e.guest_id, name=e.name, error=e.error)
                for e in dto.errors
            ],
        )
