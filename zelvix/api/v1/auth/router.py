"""
Authentication API routes
"""

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from zelvix.core.config import settings
from zelvix.core.database import get_db
from zelvix.core.security import clear_session_cookies, set_session_cookies
from zelvix.middleware.rate_limit import limiter
from .schemas import LoginRequest, RegisterRequest, SessionUser
from .services import AuthService

router = APIRouter()

@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    summary="Register new user",
    description="Create a customer account with email and password",
)
@limiter.limit(settings.RATE_LIMIT_AUTH)
async def register(
    request: Request,
    payload: RegisterRequest,
    db: AsyncSession = Depends(get_db),
):
    """Register new customer"""
    service = AuthService(db)
    user = await service.register(payload)
    return {"message": "Registration successful", "role": user.role}

@router.post(
    "/login",
    summary="Login user",
    description="Login with email and password; sets the session cookies",
)
@limiter.limit(settings.RATE_LIMIT_AUTH)
async def login(
    request: Request,
    payload: LoginRequest,
    db: AsyncSession = Depends(get_db),
):
    """Login user and set session cookies"""
    service = AuthService(db)
    user = await service.login(payload)

    session = SessionUser(id=user.id, email=user.email, role=user.role)
    response = JSONResponse(
        status_code=status.HTTP_200_OK,
        content={"message": "Login successful", "data": session.model_dump()},
    )
    set_session_cookies(response, user.email, user.role)
    return response

@router.post("/logout", summary="Logout user")
async def logout():
    """Clear session cookies"""
    response = JSONResponse(content={"message": "Logout successful"})
    clear_session_cookies(response)
    return response
