"""Health check endpoints"""

from fastapi import APIRouter
from datetime import datetime, timezone
from typing import Any, Dict
import logging

from zelvix.core.config import settings
from zelvix.core.database import check_connection

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get("/health")
async def health_check() -> Dict[str, Any]:
    """Basic health check"""
    return {
        "status": "healthy",
        "version": settings.APP_VERSION,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }

@router.get("/health/detailed")
async def detailed_health_check() -> Dict[str, Any]:
    """Health check including the database"""
    try:
        await check_connection()
        database_ok = True
    except Exception as e:
        logger.warning(f"Database health check failed: {e}")
        database_ok = False
    return {
        "status": "healthy" if database_ok else "unhealthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "components": {
            "database": {"status": "healthy" if database_ok else "unhealthy"},
        },
    }
