from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any
from uuid import UUID


class GuestNotFoundError(Exception):
    """Raised when a guest id (or every id of a batch) does not match any row."""

    def __init__(self, guest_id: UUID | None = None) -> None:
        self.guest_id = guest_id
        if guest_id is None:
            super().__init__("No guests found")
        else:
            super().__init__(f"Guest with ID {guest_id} not found")


class InvalidGuestDataError(Exception):
    """Raised when guest input fails validation before any write happens."""

    pass


class InvalidInviteCodeError(Exception):
    """Raised when a supplied invite code does not have the XXXX-XXXX shape."""

    def __init__(self, code: str) -> None:
        self.code = code
        super().__init__(f"Invite code '{code}' is malformed")


class InviteCodeNotFoundError(Exception):
    """Raised when an invite code matches no party."""

    def __init__(self, code: str) -> None:
        self.code = code
        super().__init__("Invalid invite code")


class InviteCodeGenerationError(Exception):
    """Raised when no unused invite code could be found."""

    pass


class GuestAlreadyLinkedError(Exception):
    """Raised when a guest is already linked to a different identity."""

    def __init__(self, guest_id: UUID) -> None:
        self.guest_id = guest_id
        super().__init__("Guest already linked to another user")


class PlusOneReconciliationError(Exception):
    """Raised when the plus-one write fails after the primary guest was changed.

    The whole update is rolled back, so retrying the same update is safe.
    """

    def __init__(self, guest_id: UUID, action: str) -> None:
        self.guest_id = guest_id
        self.action = action
        super().__init__(f"Could not {action} plus-one for guest {guest_id}")


class RSVPStatus(str, Enum):
    PENDING = "pending"
    YES = "yes"
    NO = "no"


class Side(str, Enum):
    BRIDE = "bride"
    GROOM = "groom"
    BOTH = "both"


class GuestList(str, Enum):
    A = "a"
    B = "b"
    C = "c"


class ContactMethod(str, Enum):
    EMAIL = "email"
    TEXT = "text"
    WHATSAPP = "whatsapp"
    PHONE_CALL = "phone_call"
    NONE = "none"


class _Unset:
    """Marker for a field that was not supplied in a partial update."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()

PLUS_ONE_PLACEHOLDER_LAST_NAME = "- Plus One"


@dataclass(frozen=True)
class GuestDTO:
    """DTO for a single guest row, primary or plus-one."""

    id: UUID
    first_name: str
    invite_code: str
    last_name: str | None = None
    email: str | None = None
    phone_number: str | None = None
    whatsapp: str | None = None
    preferred_contact_method: ContactMethod | None = None
    side: Side | None = None
    list: GuestList = GuestList.A
    family: bool = False
    rsvp_status: RSVPStatus = RSVPStatus.PENDING
    plus_one_allowed: bool = False
    is_plus_one: bool = False
    primary_guest_id: UUID | None = None
    mailing_address: str | None = None
    physical_invite_sent: bool = False
    dietary_restrictions: str | None = None
    under21: bool = False
    notes: str | None = None
    number_of_resends: int = 0
    activities_email_sent: bool = False
    activities_email_resend_count: int = 0
    external_user_id: str | None = None

    @property
    def full_name(self) -> str:
        return " ".join(part for part in (self.first_name, self.last_name) if part)


@dataclass(frozen=True)
class GuestWithPlusOneDTO:
    """A primary guest together with its plus-one row, if any."""

    guest: GuestDTO
    plus_one: GuestDTO | None = None


@dataclass(frozen=True)
class PartyGuestDTO:
    """The slice of a guest exposed to the RSVP pages."""

    id: UUID
    first_name: str
    last_name: str | None
    email: str | None
    rsvp_status: RSVPStatus

    @classmethod
    def from_guest(cls, guest: GuestDTO) -> "PartyGuestDTO":
        return cls(
            id=guest.id,
            first_name=guest.first_name,
            last_name=guest.last_name,
            email=guest.email,
            rsvp_status=guest.rsvp_status,
        )


@dataclass(frozen=True)
class PartyDTO:
    """A primary guest and optional plus-one resolved for the current visitor."""

    invite_code: str
    primary_guest: PartyGuestDTO
    plus_one: PartyGuestDTO | None = None
    is_logged_in: bool = False
    is_admin: bool = False


@dataclass(frozen=True)
class GuestCreateDTO:
    """Input for creating a primary guest."""

    first_name: str
    last_name: str | None = None
    email: str | None = None
    phone_number: str | None = None
    whatsapp: str | None = None
    preferred_contact_method: ContactMethod | None = None
    side: Side | None = None
    list: GuestList = GuestList.A
    family: bool = False
    plus_one_allowed: bool = False
    plus_one_first_name: str | None = None
    plus_one_last_name: str | None = None
    mailing_address: str | None = None
    physical_invite_sent: bool = False
    dietary_restrictions: str | None = None
    under21: bool = False
    notes: str | None = None


@dataclass(frozen=True)
class GuestUpdateDTO:
    """Partial update of a primary guest.

    Fields left as UNSET keep their stored value; fields set to None (or an
    empty string) clear nullable columns.
    """

    first_name: str = UNSET
    last_name: str | None = UNSET
    email: str | None = UNSET
    phone_number: str | None = UNSET
    whatsapp: str | None = UNSET
    preferred_contact_method: ContactMethod | None = UNSET
    side: Side | None = UNSET
    list: GuestList = UNSET
    family: bool = UNSET
    rsvp_status: RSVPStatus = UNSET
    plus_one_allowed: bool = UNSET
    plus_one_first_name: str | None = UNSET
    plus_one_last_name: str | None = UNSET
    mailing_address: str | None = UNSET
    physical_invite_sent: bool = UNSET
    dietary_restrictions: str | None = UNSET
    under21: bool = UNSET
    notes: str | None = UNSET

    PLUS_ONE_FIELDS = ("plus_one_allowed", "plus_one_first_name", "plus_one_last_name")

    def provided(self) -> dict[str, Any]:
        """Return only the fields that were supplied."""
        return {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name) is not UNSET}

    def guest_fields(self) -> dict[str, Any]:
        """Supplied fields that map onto guest columns."""
        return {k: v for k, v in self.provided().items() if k not in self.PLUS_ONE_FIELDS}

    def renames_plus_one(self) -> bool:
        return self.plus_one_first_name is not UNSET or self.plus_one_last_name is not UNSET


@dataclass(frozen=True)
class PlusOneReconcileDTO:
    """Outcome of one reconciliation pass."""

    action: str  # "created", "updated", "deleted" or "none"
    plus_one: GuestDTO | None = None


@dataclass(frozen=True)
class RSVPSubmissionDTO:
    """A guest-submitted RSVP for the main wedding."""

    invite_code: str
    attending: bool
    dietary_restrictions: str | None = None
    under21: bool | None = None
    email: str | None = None
    phone_number: str | None = None
    whatsapp: str | None = None
    preferred_contact_method: ContactMethod | None = None
    mailing_address: str | None = None
    plus_one_attending: bool | None = None
    plus_one_first_name: str | None = None
    plus_one_last_name: str | None = None
    plus_one_email: str | None = None
    plus_one_dietary_restrictions: str | None = None
    plus_one_under21: bool | None = None


@dataclass(frozen=True)
class ContactInfoDTO:
    mailing_address: str | None = UNSET
    phone_number: str | None = UNSET
    whatsapp: str | None = UNSET
    preferred_contact_method: ContactMethod | None = UNSET

    def provided(self) -> dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self) if getattr(self, f.name) is not UNSET}


@dataclass(frozen=True)
class EmailSendErrorDTO:
    guest_id: UUID
    name: str
    error: str


@dataclass(frozen=True)
class BulkEmailResultDTO:
    """Result of a bulk email run; one failing recipient does not stop the rest."""

    sent_count: int
    total: int
    errors: list[EmailSendErrorDTO] = field(default_factory=list)
