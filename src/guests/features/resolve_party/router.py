from fastapi import APIRouter, Depends, HTTPException

from src.auth.dependencies import get_admin_policy, get_current_identity
from src.auth.identity import AdminPolicy, Identity
from src.guests.features.link_identity.write_model import SqlIdentityLinkWriteModel
from src.guests.features.resolve_party.resolver import PartyResolver
from src.guests.repository.read_models import SqlGuestReadModel
from src.guests.schemas import PartyResponse
from src.guests.urls import RSVP_PARTY_URL

router = APIRouter()


def get_party_resolver(policy: AdminPolicy = Depends(get_admin_policy)) -> PartyResolver:
    """Dependency to get the party resolver."""
    return PartyResolver(
        read_model=SqlGuestReadModel(),
        link_write_model=SqlIdentityLinkWriteModel(),
        admin_policy=policy,
    )


@router.get(RSVP_PARTY_URL, response_model=PartyResponse)
async def get_party(
    code: str | None = None,
    identity: Identity | None = Depends(get_current_identity),
    resolver: PartyResolver = Depends(get_party_resolver),
) -> PartyResponse:
    """
    Resolve the visitor's party from their login (linked or matched by email)
    or, failing that, from the invite code.
    """
    party = await resolver.resolve(identity, code)
    if party is None:
        raise HTTPException(status_code=404, detail="Guest not found")
    return PartyResponse.from_dto(party)
