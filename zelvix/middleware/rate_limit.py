"""Rate limiting using slowapi"""

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded

from zelvix.core.config import settings

def get_rate_limit_key(request: Request) -> str:
    """Client IP, honouring the first X-Forwarded-For hop"""
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        ip = forwarded.split(",")[0].strip()
    else:
        ip = request.client.host if request.client else "unknown"

    return f"ip:{ip}"

# In-process counters; each worker keeps its own window
limiter = Limiter(
    key_func=get_rate_limit_key,
    strategy="fixed-window",
    enabled=settings.RATE_LIMIT_ENABLED,
)

async def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded) -> Response:
    return JSONResponse(
        status_code=429,
        content={"message": f"Too many requests. {exc.detail}"},
    )
