"""
Customer reviews and product FAQs
"""

from sqlalchemy import Column, String, Integer, Boolean, ForeignKey, Text, Numeric

from .base import BaseModel

class Review(BaseModel):
    """Product review"""

    __tablename__ = "reviews"

    product_id = Column(Integer, ForeignKey("products.id"), nullable=False, index=True)
    product_name = Column(String(255), nullable=False, index=True)
    name = Column(String(120), nullable=False)
    image = Column(String(500), nullable=True)
    rating = Column(Numeric(2, 1), nullable=False, default=0)
    comment = Column(Text, nullable=True)
    is_active = Column(Boolean, nullable=False, default=True)

class Faq(BaseModel):
    """Frequently asked question attached to a product"""

    __tablename__ = "faqs"

    product_id = Column(Integer, ForeignKey("products.id"), nullable=False, index=True)
    product_name = Column(String(255), nullable=False, index=True)
    name = Column(String(120), nullable=True)
    question = Column(Text, nullable=False)
    answer = Column(Text, nullable=False)
    is_active = Column(Boolean, nullable=False, default=True)
