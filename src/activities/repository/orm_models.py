from datetime import date
from uuid import UUID

from sqlalchemy import Boolean, Date, Enum, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from src.activities.dtos import ActivityDTO, InterestStatus
from src.config.table_names import TableNames
from src.models.base import Base, TimeStamp


class Activity(Base, TimeStamp):
    __tablename__ = TableNames.ACTIVITIES.value

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    emoji: Mapped[str | None] = mapped_column(String(16), nullable=True)
    address: Mapped[str | None] = mapped_column(Text, nullable=True)
    image_url: Mapped[str | None] = mapped_column(Text, nullable=True)
    latitude: Mapped[float | None] = mapped_column(Float, nullable=True)
    longitude: Mapped[float | None] = mapped_column(Float, nullable=True)
    is_venue: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    venue_type: Mapped[str | None] = mapped_column(String(50), nullable=True)
    display_order: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    def to_dto(self) -> ActivityDTO:
        return ActivityDTO(
            id=self.id,
            name=self.name,
            display_order=self.display_order,
            description=self.description,
            emoji=self.emoji,
            address=self.address,
            image_url=self.image_url,
            latitude=self.latitude,
            longitude=self.longitude,
            is_venue=self.is_venue,
            venue_type=self.venue_type,
        )

    def __repr__(self) -> str:
        return f"<Activity {self.name}>"


class GuestActivityInterest(Base, TimeStamp):
    __tablename__ = TableNames.GUEST_ACTIVITY_INTERESTS.value

    guest_id: Mapped[UUID] = mapped_column(
        ForeignKey(f"{TableNames.GUESTS.value}.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    activity_id: Mapped[UUID] = mapped_column(
        ForeignKey(f"{TableNames.ACTIVITIES.value}.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    invite_code: Mapped[str] = mapped_column(String(9), nullable=False, index=True)
    status: Mapped[InterestStatus] = mapped_column(
        Enum(
            InterestStatus,
            name="interest_status_enum",
            values_callable=lambda x: [e.value for e in x],
        ),
        default=InterestStatus.INTERESTED,
        nullable=False,
    )
    planned_date: Mapped[date | None] = mapped_column(Date, nullable=True)

    def __repr__(self) -> str:
        return f"<GuestActivityInterest {self.invite_code} -> {self.activity_id} ({self.status})>"
