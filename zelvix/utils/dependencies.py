"""
Common dependencies for FastAPI
"""

from fastapi import Request

from zelvix.core.config import settings
from zelvix.core.exceptions import ForbiddenException
from zelvix.core.security import ADMIN_ROLE_COOKIE
from .pagination import PaginationParams

def get_pagination_params(request: Request) -> PaginationParams:
    """Get pagination parameters from query, tolerating bad values"""
    return PaginationParams.from_raw(
        request.query_params.get("page"),
        request.query_params.get("limit"),
    )

async def require_admin(request: Request) -> None:
    """Admin routes require the admin_role cookie when ADMIN_API_REQUIRES_ROLE is on"""
    if not settings.ADMIN_API_REQUIRES_ROLE:
        return
    if request.cookies.get(ADMIN_ROLE_COOKIE) != "admin":
        raise ForbiddenException("Admin access required")
