"""API v1 routes aggregation"""

from fastapi import APIRouter

from .auth.router import router as auth_router
from .catalog.router import router as catalog_router
from .commerce.router import router as commerce_router
from .locations.router import router as locations_router
from .storefront.buynow import router as buynow_router
from .storefront.router import router as storefront_router
from .uploads.router import router as uploads_router
from .users.router import router as users_router

# Create v1 router
api_router = APIRouter()

# Include all routers
api_router.include_router(auth_router, prefix="/auth", tags=["Authentication"])
api_router.include_router(locations_router, tags=["Locations"])
api_router.include_router(catalog_router, tags=["Catalog"])
api_router.include_router(commerce_router, tags=["Commerce"])
api_router.include_router(users_router, prefix="/users", tags=["Users"])
api_router.include_router(uploads_router, prefix="/uploads", tags=["Uploads"])
api_router.include_router(storefront_router, prefix="/storefront", tags=["Storefront"])

# Export router
router = api_router

__all__ = ["api_router", "buynow_router", "router"]
