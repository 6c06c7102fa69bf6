"""
Customer and staff account schemas
"""

from pydantic import AfterValidator, BeforeValidator
from typing import Annotated, Optional

from zelvix.core.config import settings
from zelvix.models.user import STAFF_ROLES, UserStatus
from zelvix.schemas.base import Email, OptionalText, RequestSchema

USER_STATUSES = tuple(item.value for item in UserStatus)

def _lower(value):
    return value.strip().lower() if isinstance(value, str) else value

def _user_status(value: str) -> str:
    if value not in USER_STATUSES:
        raise ValueError("Status must be 'block' or 'not_block'")
    return value

def _staff_role(value: str) -> str:
    if value not in STAFF_ROLES:
        raise ValueError("Invalid role value")
    return value

def _password_length(value: str) -> str:
    if len(value) < settings.PASSWORD_MIN_LENGTH:
        raise ValueError(f"Password must be at least {settings.PASSWORD_MIN_LENGTH} characters")
    return value

AccountStatus = Annotated[str, BeforeValidator(_lower), AfterValidator(_user_status)]
StaffRole = Annotated[str, BeforeValidator(_lower), AfterValidator(_staff_role)]
Password = Annotated[str, AfterValidator(_password_length)]

class CustomerUpdate(RequestSchema):
    name: OptionalText = None
    email: Optional[Email] = None
    status: Optional[AccountStatus] = None

class AccountStatusUpdate(RequestSchema):
    status: Optional[AccountStatus] = None

class StaffCreate(RequestSchema):
    name: OptionalText = None
    email: Email
    password: Password
    role: StaffRole
    status: AccountStatus = UserStatus.NOT_BLOCK.value

class StaffUpdate(RequestSchema):
    name: OptionalText = None
    email: Optional[Email] = None
    password: Optional[Password] = None
    role: Optional[StaffRole] = None
    status: Optional[AccountStatus] = None
