"""Create guests, events, invites, photos and activities tables.

Revision ID: 3f1c2a9b7d10
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""

from collections.abc import Sequence

import sqlalchemy as sa
import sqlalchemy_utils
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3f1c2a9b7d10"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None

RSVP_VALUES = ("pending", "yes", "no")


def _uuid():
    return sqlalchemy_utils.UUIDType(binary=False)


def _timestamps():
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.current_timestamp(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.current_timestamp(), nullable=False),
    ]


def upgrade() -> None:
    """Create every table."""
    op.create_table(
        "guests",
        sa.Column("id", _uuid(), nullable=False),
        sa.Column("first_name", sa.String(length=255), nullable=False),
        sa.Column("last_name", sa.String(length=255), nullable=True),
        sa.Column("email", sa.String(length=255), nullable=True),
        sa.Column("phone_number", sa.String(length=50), nullable=True),
        sa.Column("whatsapp", sa.String(length=50), nullable=True),
        sa.Column(
            "preferred_contact_method",
            sa.Enum("email", "text", "whatsapp", "phone_call", "none", name="contact_method_enum"),
            nullable=True,
        ),
        sa.Column("side", sa.Enum("bride", "groom", "both", name="side_enum"), nullable=True),
        sa.Column("list", sa.Enum("a", "b", "c", name="guest_list_enum"), nullable=False),
        sa.Column("family", sa.Boolean(), nullable=False),
        sa.Column("rsvp_status", sa.Enum(*RSVP_VALUES, name="rsvp_status_enum"), nullable=False),
        sa.Column("plus_one_allowed", sa.Boolean(), nullable=False),
        sa.Column("is_plus_one", sa.Boolean(), nullable=False),
        sa.Column("primary_guest_id", _uuid(), nullable=True),
        sa.Column("mailing_address", sa.Text(), nullable=True),
        sa.Column("physical_invite_sent", sa.Boolean(), nullable=False),
        sa.Column("dietary_restrictions", sa.Text(), nullable=True),
        sa.Column("under21", sa.Boolean(), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("invite_code", sa.String(length=9), nullable=False),
        sa.Column("number_of_resends", sa.Integer(), nullable=False),
        sa.Column("activities_email_sent", sa.Boolean(), nullable=False),
        sa.Column("activities_email_sent_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("activities_email_resend_count", sa.Integer(), nullable=False),
        sa.Column("external_user_id", sa.String(length=255), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["primary_guest_id"], ["guests.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("primary_guest_id"),
    )
    op.create_index("ix_guests_email", "guests", ["email"])
    op.create_index("ix_guests_invite_code", "guests", ["invite_code"])
    op.create_index("ix_guests_external_user_id", "guests", ["external_user_id"])
    op.create_index(
        "uq_guests_primary_invite_code",
        "guests",
        ["invite_code"],
        unique=True,
        postgresql_where=sa.text("is_plus_one = false"),
        sqlite_where=sa.text("is_plus_one = 0"),
    )

    op.create_table(
        "events",
        sa.Column("id", _uuid(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("event_date", sa.Date(), nullable=True),
        sa.Column("start_time", sa.Time(), nullable=True),
        sa.Column("end_time", sa.Time(), nullable=True),
        sa.Column("location_name", sa.String(length=255), nullable=True),
        sa.Column("location_address", sa.Text(), nullable=True),
        sa.Column("latitude", sa.Float(), nullable=True),
        sa.Column("longitude", sa.Float(), nullable=True),
        sa.Column("is_default", sa.Boolean(), nullable=False),
        sa.Column("display_order", sa.Integer(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "guest_event_invites",
        sa.Column("id", _uuid(), nullable=False),
        sa.Column("guest_id", _uuid(), nullable=False),
        sa.Column("event_id", _uuid(), nullable=False),
        sa.Column("rsvp_status", sa.Enum(*RSVP_VALUES, name="invite_rsvp_status_enum"), nullable=False),
        sa.Column("email_sent", sa.Boolean(), nullable=False),
        sa.Column("email_sent_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("email_resend_count", sa.Integer(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(["guest_id"], ["guests.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["event_id"], ["events.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("guest_id", "event_id", name="uq_guest_event_invite"),
    )
    op.create_index("ix_guest_event_invites_guest_id", "guest_event_invites", ["guest_id"])
    op.create_index("ix_guest_event_invites_event_id", "guest_event_invites", ["event_id"])

    op.create_table(
        "photos",
        sa.Column("id", _uuid(), nullable=False),
        sa.Column("url", sa.Text(), nullable=False),
        sa.Column("alt", sa.String(length=255), nullable=False),
        sa.Column("caption", sa.Text(), nullable=True),
        sa.Column("display_order", sa.Integer(), nullable=False),
        sa.Column("is_active", sa.Boolean(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "activities",
        sa.Column("id", _uuid(), nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("emoji", sa.String(length=16), nullable=True),
        sa.Column("address", sa.Text(), nullable=True),
        sa.Column("image_url", sa.Text(), nullable=True),
        sa.Column("latitude", sa.Float(), nullable=True),
        sa.Column("longitude", sa.Float(), nullable=True),
        sa.Column("is_venue", sa.Boolean(), nullable=False),
        sa.Column("venue_type", sa.String(length=50), nullable=True),
        sa.Column("display_order", sa.Integer(), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )

    op.create_table(
        "guest_activity_interests",
        sa.Column("id", _uuid(), nullable=False),
        sa.Column("guest_id", _uuid(), nullable=False),
        sa.Column("activity_id", _uuid(), nullable=False),
        sa.Column("invite_code", sa.String(length=9), nullable=False),
        sa.Column(
            "status",
            sa.Enum("interested", "committed", name="interest_status_enum"),
            nullable=False,
        ),
        sa.Column("planned_date", sa.Date(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(["guest_id"], ["guests.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["activity_id"], ["activities.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_guest_activity_interests_guest_id", "guest_activity_interests", ["guest_id"])
    op.create_index("ix_guest_activity_interests_activity_id", "guest_activity_interests", ["activity_id"])
    op.create_index("ix_guest_activity_interests_invite_code", "guest_activity_interests", ["invite_code"])


def downgrade() -> None:
    """Drop every table and enum type."""
    op.drop_table("guest_activity_interests")
    op.drop_table("activities")
    op.drop_table("photos")
    op.drop_table("guest_event_invites")
    op.drop_table("events")
    op.drop_index("uq_guests_primary_invite_code", table_name="guests")
    op.drop_table("guests")
    for enum_name in (
        "interest_status_enum",
        "invite_rsvp_status_enum",
        "rsvp_status_enum",
        "guest_list_enum",
        "side_enum",
        "contact_method_enum",
    ):
        sa.Enum(name=enum_name).drop(op.get_bind(), checkfirst=True)
