"""
Security utilities
Handles password hashing and the session cookies set at login
"""

from fastapi import Response
from passlib.context import CryptContext
from typing import Tuple

from .config import settings

# Password hashing context
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

USER_ROLE_COOKIE = "user_role"
USER_EMAIL_COOKIE = "user_email"
ADMIN_ROLE_COOKIE = "admin_role"
SESSION_COOKIES = (USER_ROLE_COOKIE, USER_EMAIL_COOKIE, ADMIN_ROLE_COOKIE)

class SecurityUtils:
    """Security utility functions"""

    @staticmethod
    def verify_password(plain_password: str, hashed_password: str) -> bool:
        """Verify password against hash"""
        try:
            return pwd_context.verify(plain_password, hashed_password)
        except ValueError:
            # Stored value is not a recognised hash
            return False

    @staticmethod
    def hash_password(password: str) -> str:
        """Hash password using bcrypt"""
        return pwd_context.hash(password)

    @staticmethod
    def validate_password(password: str) -> Tuple[bool, str]:
        """
        Validate password length
        Returns (is_valid, error_message)
        """
        if len(password) < settings.PASSWORD_MIN_LENGTH:
            return False, f"Password must be at least {settings.PASSWORD_MIN_LENGTH} characters"
        return True, ""

def set_session_cookies(response: Response, email: str, role: str) -> None:
    """Cookies read by the checkout guard and the admin routes"""
    options = {
        "httponly": True,
        "max_age": settings.AUTH_COOKIE_MAX_AGE,
        "samesite": "lax",
        "secure": settings.is_production,
        "path": "/",
    }
    response.set_cookie(USER_ROLE_COOKIE, role, **options)
    response.set_cookie(USER_EMAIL_COOKIE, email, **options)
    if role == "admin":
        response.set_cookie(ADMIN_ROLE_COOKIE, "admin", **options)
    else:
        response.delete_cookie(ADMIN_ROLE_COOKIE, path="/")

def clear_session_cookies(response: Response) -> None:
    for name in SESSION_COOKIES:
        response.delete_cookie(name, path="/")
