"""Security middleware: response headers and the checkout route guard"""

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import RedirectResponse
from typing import Sequence
from urllib.parse import quote
import logging

from zelvix.core.config import settings
from zelvix.core.security import USER_EMAIL_COOKIE, USER_ROLE_COOKIE

logger = logging.getLogger(__name__)

DOCS_PREFIXES = ("/api/docs", "/api/redoc", "/openapi.json")

class SecurityMiddleware(BaseHTTPMiddleware):
    """Security headers on every response"""

    async def dispatch(self, request: Request, call_next):
        response = await call_next(request)

        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["X-XSS-Protection"] = "1; mode=block"
        response.headers["Referrer-Policy"] = "strict-origin-when-cross-origin"

        if request.url.path.startswith(DOCS_PREFIXES):
            # Swagger and ReDoc pull assets from CDNs
            response.headers["Content-Security-Policy"] = (
                "default-src 'self' 'unsafe-inline' https: data: blob:; "
                "img-src 'self' data: https:"
            )
        else:
            response.headers["Content-Security-Policy"] = (
                "default-src 'self'; "
                "img-src 'self' data: https:; "
                "connect-src 'self' https:"
            )

        return response

def login_redirect_target(request: Request) -> str:
    """Login path carrying the original path and query as ?next="""
    target = request.url.path
    if request.url.query:
        target = f"{target}?{request.url.query}"
    return f"{settings.LOGIN_PATH}?next={quote(target, safe='')}"

def is_protected(path: str, prefixes: Sequence[str]) -> bool:
    return any(path == prefix or path.startswith(prefix.rstrip("/") + "/") for prefix in prefixes)

class CheckoutGuardMiddleware(BaseHTTPMiddleware):
    """Send visitors without session cookies to the login page"""

    def __init__(self, app, prefixes: Sequence[str] = None):
        super().__init__(app)
        self.prefixes = tuple(prefixes if prefixes is not None else settings.PROTECTED_PREFIXES)

    async def dispatch(self, request: Request, call_next):
        if is_protected(request.url.path, self.prefixes):
            if not request.cookies.get(USER_EMAIL_COOKIE) or not request.cookies.get(USER_ROLE_COOKIE):
                logger.info(f"Redirecting anonymous request for {request.url.path} to login")
                return RedirectResponse(login_redirect_target(request), status_code=307)

        return await call_next(request)
