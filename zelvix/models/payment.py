"""
Payment gateway credentials
"""

from sqlalchemy import Column, String, Boolean

from .base import BaseModel

class PaymentGateway(BaseModel):
    """Configured payment provider"""

    __tablename__ = "payment_gateways"

    name = Column(String(100), nullable=False, unique=True)
    app_id = Column(String(255), nullable=True)
    secret_key = Column(String(255), nullable=True)
    is_active = Column(Boolean, nullable=False, default=True, index=True)
