"""
Main FastAPI application
"""

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from slowapi.errors import RateLimitExceeded
from pathlib import Path
import logging

from zelvix.api import router as root_router
from zelvix.api.v1 import api_router, buynow_router
from zelvix.core.config import settings
from zelvix.core.events import lifespan
from zelvix.core.exceptions import register_exception_handlers
from zelvix.core.middleware import setup_middleware
from zelvix.middleware.rate_limit import limiter, rate_limit_exceeded_handler

logger = logging.getLogger(__name__)

def create_app() -> FastAPI:
    """Build the application with middleware, handlers and routes"""
    app = FastAPI(
        title=settings.APP_NAME,
        version=settings.APP_VERSION,
        description="Zelvix storefront and back-office API",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
        lifespan=lifespan,
    )

    # Rate limiter
    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

    register_exception_handlers(app)
    setup_middleware(app)

    # Routes
    app.include_router(root_router)
    app.include_router(api_router, prefix="/api/v1")
    app.include_router(buynow_router)

    # Uploaded images
    upload_dir = Path(settings.UPLOAD_DIR)
    upload_dir.mkdir(parents=True, exist_ok=True)
    app.mount(settings.UPLOAD_URL_PREFIX, StaticFiles(directory=upload_dir), name="uploads")

    @app.get("/")
    async def root():
        """Root endpoint"""
        return {
            "app": settings.APP_NAME,
            "version": settings.APP_VERSION,
            "docs": "/api/docs",
            "health": "/health",
        }

    return app

app = create_app()

if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "zelvix.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        workers=1 if settings.DEBUG else settings.WORKERS,
    )
