"""Materializes invite rows so every guest is invited to every default event.

All helpers take the caller's session so the inserts share its transaction.
Each one only inserts rows that are missing, which makes a retry a no-op.
"""

import logging
from collections.abc import Iterable
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.events.repository.orm_models import Event, GuestEventInvite
from src.guests.repository.orm_models import Guest

logger = logging.getLogger(__name__)


async def add_missing_invites(
    session: AsyncSession, event_id: UUID, guest_ids: Iterable[UUID]
) -> int:
    """Insert an invite for each guest that has none for this event. Returns the number added."""
    guest_ids = list(dict.fromkeys(guest_ids))
    if not guest_ids:
        return 0

    result = await session.execute(
        select(GuestEventInvite.guest_id).where(
            GuestEventInvite.event_id == event_id,
            GuestEventInvite.guest_id.in_(guest_ids),
        )
    )
    already_invited = set(result.scalars().all())

    new_invites = [
        GuestEventInvite(guest_id=guest_id, event_id=event_id)
        for guest_id in guest_ids
        if guest_id not in already_invited
    ]
    if new_invites:
        session.add_all(new_invites)
        await session.flush()
    return len(new_invites)


async def fan_out_default_event(session: AsyncSession, event_id: UUID) -> int:
    """Invite every guest row, primaries and plus-ones, to the event."""
    result = await session.execute(select(Guest.id))
    added = await add_missing_invites(session, event_id, result.scalars().all())
    logger.info("Fan-out for default event %s added %d invites", event_id, added)
    return added


async def invite_to_default_events(session: AsyncSession, guest_ids: Iterable[UUID]) -> int:
    """Give newly created guests their invites to the existing default events."""
    guest_ids = list(guest_ids)
    result = await session.execute(select(Event.id).where(Event.is_default.is_(True)))
    added = 0
    for event_id in result.scalars().all():
        added += await add_missing_invites(session, event_id, guest_ids)
    return added
