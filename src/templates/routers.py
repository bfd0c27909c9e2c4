from fastapi import APIRouter

from .features.manage_templates.router import router as manage_templates_router

router = APIRouter()

router.include_router(manage_templates_router)
