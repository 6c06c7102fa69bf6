"""
Authentication service layer
Handles business logic for authentication
"""

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Tuple
import logging

from zelvix.core.exceptions import (
    BadRequestException,
    ConflictException,
    ForbiddenException,
    UnauthorizedException,
)
from zelvix.core.security import SecurityUtils
from zelvix.models import User, UserRole, UserStatus
from zelvix.utils.validators import validate_email_address
from .schemas import Credentials, RegisterRequest

logger = logging.getLogger(__name__)

class AuthService:
    """Authentication service"""

    def __init__(self, db: AsyncSession):
        self.db = db

    @staticmethod
    def _check_credentials(request: Credentials) -> Tuple[str, str]:
        """Normalized email and raw password, or 400"""
        email = request.email.strip().lower()
        password = request.password
        if not email or not password:
            raise BadRequestException("Email and password are required")

        try:
            email = validate_email_address(email)
        except ValueError:
            raise BadRequestException("Invalid email format")
        return email, password

    async def get_by_email(self, email: str):
        result = await self.db.execute(select(User).where(func.lower(User.email) == email.lower()))
        return result.scalar_one_or_none()

    async def register(self, request: RegisterRequest) -> User:
        """
        Create a customer account

        New accounts always get role user and status not_block
        """
        email, password = self._check_credentials(request)

        valid, error = SecurityUtils.validate_password(password)
        if not valid:
            raise BadRequestException(error)

        if await self.get_by_email(email) is not None:
            raise ConflictException("User already exists with this email")

        user = User(
            name=request.name.strip() or None,
            email=email,
            password_hash=SecurityUtils.hash_password(password),
            role=UserRole.USER.value,
            status=UserStatus.NOT_BLOCK.value,
        )
        self.db.add(user)
        await self.db.flush()
        await self.db.refresh(user)

        logger.info(f"User registered: id={user.id}")
        return user

    async def login(self, request: Credentials) -> User:
        """Verify credentials; blocked accounts are refused after the password matches"""
        email, password = self._check_credentials(request)

        user = await self.get_by_email(email)
        if user is None or not SecurityUtils.verify_password(password, user.password_hash):
            logger.warning("Login failed: invalid credentials")
            raise UnauthorizedException("Invalid credentials")

        if user.is_blocked:
            logger.warning(f"Login refused for blocked user id={user.id}")
            raise ForbiddenException("Your account is blocked. Contact support.")

        logger.info(f"User logged in: id={user.id} role={user.role}")
        return user
