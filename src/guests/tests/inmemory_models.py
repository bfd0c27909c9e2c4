"""In-memory models for testing - no database required."""

from dataclasses import replace
from uuid import UUID, uuid4

from src.auth.identity import Identity
from src.guests.dtos import (
    GuestAlreadyLinkedError,
    GuestDTO,
    GuestNotFoundError,
    GuestWithPlusOneDTO,
    InviteCodeNotFoundError,
)
from src.guests.features.link_identity.write_model import IdentityLinkWriteModel
from src.guests.repository.read_models import GuestReadModel


def create_test_guest(first_name="John", invite_code="ABCD-2345", **kwargs) -> GuestDTO:
    return GuestDTO(id=kwargs.pop("id", uuid4()), first_name=first_name, invite_code=invite_code, **kwargs)


def create_test_plus_one(primary: GuestDTO, first_name="Jane", **kwargs) -> GuestDTO:
    return create_test_guest(
        first_name=first_name,
        invite_code=primary.invite_code,
        is_plus_one=True,
        primary_guest_id=primary.id,
        **kwargs,
    )


class InMemoryGuestStore:
    """Guest rows shared between the in-memory read and write models."""

    def __init__(self, guests: list[GuestDTO] | None = None):
        self.guests: dict[UUID, GuestDTO] = {guest.id: guest for guest in guests or []}

    def party(self, primary: GuestDTO) -> GuestWithPlusOneDTO:
        plus_one = next(
            (g for g in self.guests.values() if g.is_plus_one and g.primary_guest_id == primary.id),
            None,
        )
        return GuestWithPlusOneDTO(guest=primary, plus_one=plus_one)

    def primaries(self) -> list[GuestDTO]:
        return [g for g in self.guests.values() if not g.is_plus_one]


class InMemoryGuestReadModel(GuestReadModel):
    def __init__(self, store: InMemoryGuestStore):
        self.store = store

    async def list_guests(self) -> list[GuestDTO]:
        return list(self.store.guests.values())

    async def get_guest_with_plus_one(self, guest_id: UUID) -> GuestWithPlusOneDTO | None:
        guest = self.store.guests.get(guest_id)
        if guest is None or guest.is_plus_one:
            return None
        return self.store.party(guest)

    async def get_party_by_code(self, invite_code: str) -> GuestWithPlusOneDTO | None:
        for guest in self.store.primaries():
            if guest.invite_code == invite_code:
                return self.store.party(guest)
        return None

    async def get_party_by_external_user_id(self, external_user_id: str) -> GuestWithPlusOneDTO | None:
        for guest in self.store.guests.values():
            if guest.external_user_id == external_user_id:
                primary = self.store.guests.get(guest.primary_guest_id) if guest.is_plus_one else guest
                return self.store.party(primary)
        return None

    async def find_primary_by_email(self, email: str) -> GuestDTO | None:
        email = email.strip().lower()
        for guest in self.store.primaries():
            if guest.email and guest.email.lower() == email:
                return guest
        return None


class InMemoryIdentityLinkWriteModel(IdentityLinkWriteModel):
    def __init__(self, store: InMemoryGuestStore):
        self.store = store
        self.links: list[tuple[UUID, str]] = []

    async def link_by_invite_code(self, invite_code: str, identity: Identity) -> GuestDTO:
        rows = [g for g in self.store.guests.values() if g.invite_code == invite_code]
        if not rows:
            raise InviteCodeNotFoundError(invite_code)
        primary = next(g for g in rows if not g.is_plus_one)
        return await self.link_guest(primary.id, identity.user_id)

    async def link_guest(self, guest_id: UUID, external_user_id: str) -> GuestDTO:
        guest = self.store.guests.get(guest_id)
        if guest is None:
            raise GuestNotFoundError(guest_id)
        if guest.external_user_id and guest.external_user_id != external_user_id:
            raise GuestAlreadyLinkedError(guest.id)
        guest = replace(guest, external_user_id=external_user_id)
        self.store.guests[guest.id] = guest
        self.links.append((guest.id, external_user_id))
        return guest
