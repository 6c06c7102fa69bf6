"""
Category model for product categorization
"""

from sqlalchemy import Column, String

from .base import BaseModel, StatusModel

class Category(BaseModel, StatusModel):
    """Product category"""

    __tablename__ = "categories"

    name = Column(String(100), nullable=False)
    slug = Column(String(120), unique=True, nullable=False, index=True)
    image = Column(String(500), nullable=True)
