from datetime import date, datetime, time
from uuid import UUID

from sqlalchemy import (
    Boolean,
    Date,
    DateTime,
    Enum,
    Float,
    ForeignKey,
    Integer,
    String,
    Text,
    Time,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column

from src.config.table_names import TableNames
from src.events.dtos import EventDTO, GuestEventInviteDTO
from src.guests.dtos import RSVPStatus
from src.models.base import Base, TimeStamp


class Event(Base, TimeStamp):
    __tablename__ = TableNames.EVENTS.value

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str | None] = mapped_column(Text, nullable=True)
    event_date: Mapped[date | None] = mapped_column(Date, nullable=True)
    start_time: Mapped[time | None] = mapped_column(Time, nullable=True)
    end_time: Mapped[time | None] = mapped_column(Time, nullable=True)
    location_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    location_address: Mapped[str | None] = mapped_column(Text, nullable=True)
    latitude: Mapped[float | None] = mapped_column(Float, nullable=True)
    longitude: Mapped[float | None] = mapped_column(Float, nullable=True)
    # every guest is invited to a default event automatically
    is_default: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    display_order: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    def to_dto(self) -> EventDTO:
        return EventDTO(
            id=self.id,
            name=self.name,
            display_order=self.display_order,
            is_default=self.is_default,
            description=self.description,
            event_date=self.event_date,
            start_time=self.start_time,
            end_time=self.end_time,
            location_name=self.location_name,
            location_address=self.location_address,
            latitude=self.latitude,
            longitude=self.longitude,
        )

    def __repr__(self) -> str:
        return f"<Event {self.name}{' (default)' if self.is_default else ''}>"


class GuestEventInvite(Base, TimeStamp):
    __tablename__ = TableNames.GUEST_EVENT_INVITES.value
    __table_args__ = (UniqueConstraint("guest_id", "event_id", name="uq_guest_event_invite"),)

    guest_id: Mapped[UUID] = mapped_column(
        ForeignKey(f"{TableNames.GUESTS.value}.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    event_id: Mapped[UUID] = mapped_column(
        ForeignKey(f"{TableNames.EVENTS.value}.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    rsvp_status: Mapped[RSVPStatus] = mapped_column(
        Enum(
            RSVPStatus,
            name="invite_rsvp_status_enum",
            values_callable=lambda x: [e.value for e in x],
        ),
        default=RSVPStatus.PENDING,
        nullable=False,
    )
    email_sent: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    email_sent_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True, default=None
    )
    email_resend_count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    def to_dto(self) -> GuestEventInviteDTO:
        return GuestEventInviteDTO(
            id=self.id,
            guest_id=self.guest_id,
            event_id=self.event_id,
            rsvp_status=self.rsvp_status,
            email_sent=self.email_sent,
            email_sent_at=self.email_sent_at,
            email_resend_count=self.email_resend_count,
        )

    def __repr__(self) -> str:
        return f"<GuestEventInvite guest={self.guest_id} event={self.event_id} {self.rsvp_status}>"
