from fastapi import APIRouter

from .features.browse_activities.router import router as browse_activities_router
from .features.manage_activities.router import router as manage_activities_router
from .features.set_interest.router import router as set_interest_router

router = APIRouter()

router.include_router(browse_activities_router)
router.include_router(set_interest_router)
router.include_router(manage_activities_router)
