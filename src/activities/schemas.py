from datetime import date
from uuid import UUID

from pydantic import BaseModel, ConfigDict

from src.activities.dtos import ActivityWithInterestDTO, InterestStatus


class ActivityResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    name: str
    description: str | None = None
    emoji: str | None = None
    address: str | None = None
    image_url: str | None = None
    latitude: float | None = None
    longitude: float | None = None
    is_venue: bool
    venue_type: str | None = None
    display_order: int


class InterestedPartyResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    invite_code: str
    names: list[str]
    status: InterestStatus
    planned_date: date | None = None


class ActivityWithInterestResponse(ActivityResponse):
    interested_parties: list[InterestedPartyResponse]
    my_status: InterestStatus | None = None
    my_planned_date: date | None = None

    @classmethod
    def from_dto(cls, dto: ActivityWithInterestDTO) -> "ActivityWithInterestResponse":
        return cls(
            **ActivityResponse.model_validate(dto.activity).model_dump(),
            interested_parties=[InterestedPartyResponse.model_validate(p) for p in dto.interested_parties],
            my_status=dto.my_status,
            my_planned_date=dto.my_planned_date,
        )
