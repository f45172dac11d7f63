"""API routes for VisionTalk."""

from fastapi import APIRouter

from .analyze import router as analyze_router
from .export import router as export_router
from .meta import router as meta_router

api_router = APIRouter(prefix="/api")

api_router.include_router(analyze_router)
api_router.include_router(meta_router)
api_router.include_router(export_router)

__all__ = ["api_router"]
