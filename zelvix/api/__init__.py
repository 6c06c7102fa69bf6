"""API initialization"""

from fastapi import APIRouter

from .health import router as health_router
from .v1 import api_router as v1_router

# Mounted at the application root
router = APIRouter()
router.include_router(health_router, tags=["Health"])

__all__ = ["router", "v1_router"]
