from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel

from src.auth.dependencies import require_identity
from src.auth.identity import Identity
from src.guests.dtos import GuestAlreadyLinkedError, InvalidInviteCodeError, InviteCodeNotFoundError
from src.guests.features.link_identity.write_model import (
    IdentityLinkWriteModel,
    SqlIdentityLinkWriteModel,
)
from src.guests.schemas import PartyGuestResponse
from src.guests.urls import RSVP_LINK_URL

router = APIRouter()


class LinkRequest(BaseModel):
    invite_code: str


def get_identity_link_write_model() -> IdentityLinkWriteModel:
    """Dependency to get identity link write model instance."""
    return SqlIdentityLinkWriteModel()


@router.post(RSVP_LINK_URL, response_model=PartyGuestResponse)
async def link_identity(
    request: LinkRequest,
    identity: Identity = Depends(require_identity),
    write_model: IdentityLinkWriteModel = Depends(get_identity_link_write_model),
) -> PartyGuestResponse:
    """Attach the logged-in account to a guest of the party behind the invite code."""
    try:
        guest = await write_model.link_by_invite_code(request.invite_code, identity)
    except InvalidInviteCodeError:
        raise HTTPException(status_code=400, detail="Invite code must look like XXXX-XXXX")
    except InviteCodeNotFoundError:
        raise HTTPException(status_code=404, detail="Invalid invite code")
    except GuestAlreadyLinkedError as e:
        raise HTTPException(status_code=409, detail=str(e))
    return PartyGuestResponse.model_validate(guest)
