"""
Coupon model
"""

from sqlalchemy import Column, String, Integer, Numeric, DateTime
import enum

from .base import BaseModel, StatusModel

class DiscountType(str, enum.Enum):
    PERCENTAGE = "percentage"
    FIXED = "fixed"

class Coupon(BaseModel, StatusModel):
    """Discount coupon"""

    __tablename__ = "coupons"

    code = Column(String(50), unique=True, nullable=False, index=True)
    discount_type = Column(String(20), nullable=False, default=DiscountType.PERCENTAGE.value)
    discount_value = Column(Numeric(10, 2), nullable=False, default=0)

    # Limits
    min_order_amount = Column(Numeric(10, 2), nullable=True)
    max_discount_amount = Column(Numeric(10, 2), nullable=True)
    usage_limit = Column(Integer, nullable=True)
    used_count = Column(Integer, nullable=False, default=0)

    # Validity window
    start_date = Column(DateTime(timezone=True), nullable=True)
    end_date = Column(DateTime(timezone=True), nullable=True)
