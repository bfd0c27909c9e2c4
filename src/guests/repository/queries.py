"""Session-level lookups shared by the guest write models."""

from uuid import UUID

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.guests.dtos import GuestNotFoundError
from src.guests.repository.orm_models import Guest


async def get_guest(session: AsyncSession, guest_id: UUID) -> Guest:
    result = await session.execute(select(Guest).where(Guest.id == guest_id))
    guest = result.scalar_one_or_none()
    if guest is None:
        raise GuestNotFoundError(guest_id)
    return guest


async def get_primary_guest(session: AsyncSession, guest_id: UUID) -> Guest:
    result = await session.execute(
        select(Guest).where(Guest.id == guest_id, Guest.is_plus_one.is_(False))
    )
    guest = result.scalar_one_or_none()
    if guest is None:
        raise GuestNotFoundError(guest_id)
    return guest


async def get_plus_one(session: AsyncSession, primary_guest_id: UUID) -> Guest | None:
    result = await session.execute(
        select(Guest).where(
            Guest.primary_guest_id == primary_guest_id,
            Guest.is_plus_one.is_(True),
        )
    )
    return result.scalar_one_or_none()


async def get_primary_by_code(session: AsyncSession, invite_code: str) -> Guest | None:
    result = await session.execute(
        select(Guest).where(Guest.invite_code == invite_code, Guest.is_plus_one.is_(False))
    )
    return result.scalar_one_or_none()


async def get_party_rows(session: AsyncSession, invite_code: str) -> list[Guest]:
    """Every row sharing the code, primary first."""
    result = await session.execute(
        select(Guest)
        .where(Guest.invite_code == invite_code)
        .order_by(Guest.is_plus_one, Guest.first_name)
    )
    return list(result.scalars().all())


async def invite_code_exists(session: AsyncSession, invite_code: str) -> bool:
    result = await session.execute(
        select(func.count()).select_from(Guest).where(Guest.invite_code == invite_code)
    )
    return result.scalar_one() > 0


async def delete_guest_rows(session: AsyncSession, guest_ids: list[UUID]) -> None:
    """Delete guest rows together with their invites and activity interests."""
    # local imports: both modules depend on the guests table
    from src.activities.repository.orm_models import GuestActivityInterest
    from src.events.repository.orm_models import GuestEventInvite

    if not guest_ids:
        return
    await session.execute(
        delete(GuestActivityInterest).where(GuestActivityInterest.guest_id.in_(guest_ids))
    )
    await session.execute(delete(GuestEventInvite).where(GuestEventInvite.guest_id.in_(guest_ids)))
    # plus-ones first so no row is left pointing at a deleted primary
    await session.execute(
        delete(Guest).where(Guest.id.in_(guest_ids), Guest.is_plus_one.is_(True))
    )
    await session.execute(delete(Guest).where(Guest.id.in_(guest_ids)))
