from fastapi import APIRouter, Depends, HTTPException

from src.guests.dtos import InvalidInviteCodeError, PartyDTO, PartyGuestDTO
from src.guests.invite_code import parse_invite_code
from src.guests.repository.read_models import GuestReadModel, SqlGuestReadModel
from src.guests.schemas import PartyResponse
from src.guests.urls import RSVP_VERIFY_URL

router = APIRouter()


def get_guest_read_model() -> GuestReadModel:
    """Dependency to get guest read model instance."""
    return SqlGuestReadModel()


@router.get(RSVP_VERIFY_URL, response_model=PartyResponse)
async def verify_invite_code(
    code: str,
    read_model: GuestReadModel = Depends(get_guest_read_model),
) -> PartyResponse:
    """Look up the party behind an invite code. Case and surrounding spaces are ignored."""
    try:
        invite_code = parse_invite_code(code)
    except InvalidInviteCodeError:
        raise HTTPException(status_code=400, detail="Invite code must look like XXXX-XXXX")

    party = await read_model.get_party_by_code(invite_code)
    if party is None:
        raise HTTPException(status_code=404, detail="Invalid invite code")

    return PartyResponse.from_dto(
        PartyDTO(
            invite_code=party.guest.invite_code,
            primary_guest=PartyGuestDTO.from_guest(party.guest),
            plus_one=PartyGuestDTO.from_guest(party.plus_one) if party.plus_one else None,
        )
    )
