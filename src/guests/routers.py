from fastapi import APIRouter

from .features.create_guest.router import router as create_guest_router
from .features.delete_guest.router import router as delete_guest_router
from .features.get_guest.router import router as get_guest_router
from .features.link_identity.router import router as link_identity_router
from .features.resolve_party.router import router as resolve_party_router
from .features.send_invitations.router import router as send_invitations_router
from .features.submit_rsvp.router import router as submit_rsvp_router
from .features.update_contact_info.router import router as update_contact_info_router
from .features.update_guest.router import router as update_guest_router
from .features.verify_invite_code.router import router as verify_invite_code_router

router = APIRouter()

# admin
router.include_router(send_invitations_router)
router.include_router(get_guest_router)
router.include_router(create_guest_router)
router.include_router(update_guest_router)
router.include_router(delete_guest_router)

# guest facing
router.include_router(verify_invite_code_router)
router.include_router(submit_rsvp_router)
router.include_router(update_contact_info_router)
router.include_router(resolve_party_router)
router.include_router(link_identity_router)
