"""Works out which party the current visitor belongs to.

Resolution order, first match wins:

1. an identity already linked to a guest row
2. an identity whose email matches a primary guest (the link is stored)
3. an explicit invite code
"""

import logging

from src.auth.identity import AdminPolicy, Identity
from src.guests.dtos import GuestWithPlusOneDTO, PartyDTO, PartyGuestDTO
from src.guests.features.link_identity.write_model import IdentityLinkWriteModel
from src.guests.invite_code import is_valid_invite_code, normalize_invite_code
from src.guests.repository.read_models import GuestReadModel

logger = logging.getLogger(__name__)


class PartyResolver:
    def __init__(
        self,
        read_model: GuestReadModel,
        link_write_model: IdentityLinkWriteModel,
        admin_policy: AdminPolicy,
    ) -> None:
        self._read_model = read_model
        self._link_write_model = link_write_model
        self._admin_policy = admin_policy

    async def resolve(self, identity: Identity | None, invite_code: str | None = None) -> PartyDTO | None:
        party = None
        if identity is not None:
            party = await self._read_model.get_party_by_external_user_id(identity.user_id)
            if party is None and identity.email:
                party = await self._match_by_email(identity)

        if party is None and invite_code:
            code = normalize_invite_code(invite_code)
            if is_valid_invite_code(code):
                party = await self._read_model.get_party_by_code(code)

        if party is None:
            return None

        return PartyDTO(
            invite_code=party.guest.invite_code,
            primary_guest=PartyGuestDTO.from_guest(party.guest),
            plus_one=PartyGuestDTO.from_guest(party.plus_one) if party.plus_one else None,
            is_logged_in=identity is not None,
            is_admin=identity is not None and self._admin_policy.is_admin(identity.email),
        )

    async def _match_by_email(self, identity: Identity) -> GuestWithPlusOneDTO | None:
        guest = await self._read_model.find_primary_by_email(identity.email)
        if guest is None:
            return None
        if guest.external_user_id and guest.external_user_id != identity.user_id:
            # belongs to someone else, fall through to the invite code
            return None
        await self._link_write_model.link_guest(guest.id, identity.user_id)
        logger.info("Auto-linked user %s to guest %s by email", identity.user_id, guest.id)
        return await self._read_model.get_party_by_code(guest.invite_code)
