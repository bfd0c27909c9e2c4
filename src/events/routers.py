from fastapi import APIRouter

from .features.event_rsvp.router import router as event_rsvp_router
from .features.manage_events.router import router as manage_events_router
from .features.manage_invites.router import router as manage_invites_router
from .features.send_event_invites.router import router as send_event_invites_router

router = APIRouter()

router.include_router(manage_events_router)
router.include_router(manage_invites_router)
router.include_router(send_event_invites_router)
router.include_router(event_rsvp_router)
