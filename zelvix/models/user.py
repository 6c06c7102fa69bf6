"""
User model
Customers and back-office staff share one table, told apart by role
"""

from sqlalchemy import Column, String, Index
import enum

from .base import BaseModel

class UserRole(str, enum.Enum):
    USER = "user"
    ADMIN = "admin"
    INVENTORY_MANAGER = "inventory_manager"
    SALES = "sales"
    WAREHOUSE = "warehouse"

class UserStatus(str, enum.Enum):
    BLOCK = "block"
    NOT_BLOCK = "not_block"

STAFF_ROLES = tuple(role.value for role in UserRole if role is not UserRole.USER)

class User(BaseModel):
    """Account used for storefront login and admin access"""

    __tablename__ = "users"

    name = Column(String(120), nullable=True)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    role = Column(String(30), nullable=False, default=UserRole.USER.value)
    status = Column(String(20), nullable=False, default=UserStatus.NOT_BLOCK.value)

    __table_args__ = (
        Index("idx_users_role_status", "role", "status"),
    )

    @property
    def is_blocked(self) -> bool:
        return self.status == UserStatus.BLOCK.value
