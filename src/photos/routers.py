from fastapi import APIRouter

from .features.manage_photos.router import router as manage_photos_router

router = APIRouter()

router.include_router(manage_photos_router)
