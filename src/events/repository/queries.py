from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.events.dtos import EventNotFoundError
from src.events.repository.orm_models import Event


async def get_event(session: AsyncSession, event_id: UUID) -> Event:
    result = await session.execute(select(Event).where(Event.id == event_id))
    event = result.scalar_one_or_none()
    if event is None:
        raise EventNotFoundError(event_id)
    return event
