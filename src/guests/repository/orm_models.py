from datetime import datetime
from uuid import UUID

from sqlalchemy import Boolean, DateTime, Enum, ForeignKey, Index, Integer, String, Text, text
from sqlalchemy.orm import Mapped, mapped_column

from src.config.table_names import TableNames
from src.guests.dtos import ContactMethod, GuestDTO, GuestList, RSVPStatus, Side
from src.models.base import Base, TimeStamp


def _enum_values(enum_cls):
    return [e.value for e in enum_cls]


class Guest(Base, TimeStamp):
    __tablename__ = TableNames.GUESTS.value
    __table_args__ = (
        # a code belongs to exactly one party, plus-ones reuse their primary's code
        Index(
            "uq_guests_primary_invite_code",
            "invite_code",
            unique=True,
            postgresql_where=text("is_plus_one = false"),
            sqlite_where=text("is_plus_one = 0"),
        ),
    )

    first_name: Mapped[str] = mapped_column(String(255), nullable=False)
    last_name: Mapped[str | None] = mapped_column(String(255), nullable=True)

    # Contact
    email: Mapped[str | None] = mapped_column(String(255), nullable=True, index=True)
    phone_number: Mapped[str | None] = mapped_column(String(50), nullable=True)
    whatsapp: Mapped[str | None] = mapped_column(String(50), nullable=True)
    preferred_contact_method: Mapped[ContactMethod | None] = mapped_column(
        Enum(ContactMethod, name="contact_method_enum", values_callable=_enum_values),
        nullable=True,
    )

    # Grouping
    side: Mapped[Side | None] = mapped_column(
        Enum(Side, name="side_enum", values_callable=_enum_values), nullable=True
    )
    list: Mapped[GuestList] = mapped_column(
        Enum(GuestList, name="guest_list_enum", values_callable=_enum_values),
        default=GuestList.A,
        nullable=False,
    )
    family: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    rsvp_status: Mapped[RSVPStatus] = mapped_column(
        Enum(RSVPStatus, name="rsvp_status_enum", values_callable=_enum_values),
        default=RSVPStatus.PENDING,
        nullable=False,
    )

    # Plus-one relationship
    # plus_one_allowed only means something on a primary guest
    plus_one_allowed: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    is_plus_one: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    # unique: a primary guest has at most one plus-one row
    primary_guest_id: Mapped[UUID | None] = mapped_column(
        ForeignKey(f"{TableNames.GUESTS.value}.id", ondelete="CASCADE"),
        nullable=True,
        unique=True,
    )

    # Logistics
    mailing_address: Mapped[str | None] = mapped_column(Text, nullable=True)
    physical_invite_sent: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    dietary_restrictions: Mapped[str | None] = mapped_column(Text, nullable=True)
    under21: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)

    invite_code: Mapped[str] = mapped_column(String(9), nullable=False, index=True)

    # Email tracking
    number_of_resends: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    activities_email_sent: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    activities_email_sent_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True), nullable=True, default=None
    )
    activities_email_resend_count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    # Set once an authenticated session is matched to this guest
    external_user_id: Mapped[str | None] = mapped_column(String(255), nullable=True, index=True)

    def to_dto(self) -> GuestDTO:
        return GuestDTO(
            id=self.id,
            first_name=self.first_name,
            last_name=self.last_name,
            invite_code=self.invite_code,
            email=self.email,
            phone_number=self.phone_number,
            whatsapp=self.whatsapp,
            preferred_contact_method=self.preferred_contact_method,
            side=self.side,
            list=self.list,
            family=self.family,
            rsvp_status=self.rsvp_status,
            plus_one_allowed=self.plus_one_allowed,
            is_plus_one=self.is_plus_one,
            primary_guest_id=self.primary_guest_id,
            mailing_address=self.mailing_address,
            physical_invite_sent=self.physical_invite_sent,
            dietary_restrictions=self.dietary_restrictions,
            under21=self.under21,
            notes=self.notes,
            number_of_resends=self.number_of_resends,
            activities_email_sent=self.activities_email_sent,
            activities_email_resend_count=self.activities_email_resend_count,
            external_user_id=self.external_user_id,
        )

    def __repr__(self) -> str:
        return f"<Guest {self.first_name} {self.last_name or ''} ({self.invite_code})>"
