"""Base models and mixins for database models"""

from sqlalchemy import Column, DateTime, Integer, String
from sqlalchemy.orm import DeclarativeBase, declared_attr
from sqlalchemy.sql import func
from datetime import date, datetime
from decimal import Decimal
from typing import Any, Dict, Iterable, Optional

# Create declarative base
class Base(DeclarativeBase):
    pass

class TimestampedModel:
    """Mixin for adding created_at and updated_at timestamps"""

    @declared_attr
    def created_at(cls):
        return Column(
            DateTime(timezone=True),
            nullable=False,
            server_default=func.now(),
            index=True
        )

    @declared_attr
    def updated_at(cls):
        return Column(
            DateTime(timezone=True),
            nullable=False,
            server_default=func.now(),
            onupdate=func.now()
        )

class StatusModel:
    """Mixin for active/inactive status"""

    @declared_attr
    def status(cls):
        return Column(
            String(20),
            nullable=False,
            default="active",
            server_default="active",
            index=True
        )

class BaseModel(Base, TimestampedModel):
    """Abstract base model with an integer primary key"""

    __abstract__ = True

    id = Column(Integer, primary_key=True, autoincrement=True)

    def to_dict(self, exclude: Optional[Iterable[str]] = None, only: Optional[Iterable[str]] = None) -> Dict[str, Any]:
        """Convert model instance to a JSON-ready dictionary"""
        exclude = set(exclude or ())
        only = set(only) if only else None
        result = {}

        for column in self.__table__.columns:
            if column.name in exclude or (only is not None and column.name not in only):
                continue

            value = getattr(self, column.name)

            # Handle special types
            if isinstance(value, (datetime, date)):
                value = value.isoformat()
            elif isinstance(value, Decimal):
                value = float(value)

            result[column.name] = value

        return result

    def update_from_dict(self, data: Dict[str, Any], exclude: Optional[list] = None):
        """Update model instance from dictionary"""
        exclude = exclude or []

        for key, value in data.items():
            if hasattr(self, key) and key not in exclude:
                setattr(self, key, value)

    def __repr__(self):
        return f"<{self.__class__.__name__}(id={self.id!r})>"
