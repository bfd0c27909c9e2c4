from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from uuid import UUID


class ActivityNotFoundError(Exception):
    def __init__(self, activity_id: UUID) -> None:
        self.activity_id = activity_id
        super().__init__("Activity not found")


class InvalidActivityDataError(Exception):
    pass


class InterestStatus(str, Enum):
    INTERESTED = "interested"
    COMMITTED = "committed"


@dataclass(frozen=True)
class ActivityDTO:
    id: UUID
    name: str
    display_order: int = 0
    description: str | None = None
    emoji: str | None = None
    address: str | None = None
    image_url: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    is_venue: bool = False
    venue_type: str | None = None


@dataclass(frozen=True)
class ActivityCreateDTO:
    name: str
    description: str | None = None
    emoji: str | None = None
    address: str | None = None
    image_url: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    is_venue: bool = False
    venue_type: str | None = None


@dataclass(frozen=True)
class InterestedPartyDTO:
    """A party that marked an activity, named by the guests sharing its code."""

    invite_code: str
    names: list[str]
    status: InterestStatus
    planned_date: date | None = None


@dataclass(frozen=True)
class ActivityWithInterestDTO:
    activity: ActivityDTO
    interested_parties: list[InterestedPartyDTO] = field(default_factory=list)
    my_status: InterestStatus | None = None
    my_planned_date: date | None = None
