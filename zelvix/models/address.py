"""
Saved customer addresses
"""

from sqlalchemy import Column, String, Integer, Boolean, ForeignKey, Index
import enum

from .base import BaseModel, StatusModel

class AddressType(str, enum.Enum):
    HOME = "home"
    OFFICE = "office"
    OTHER = "other"

class Address(BaseModel, StatusModel):
    """Shipping address saved by a customer"""

    __tablename__ = "addresses"

    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    full_name = Column(String(120), nullable=False)
    mobile = Column(String(20), nullable=False)
    alternate_mobile = Column(String(20), nullable=True)

    address_line_1 = Column(String(255), nullable=False)
    address_line_2 = Column(String(255), nullable=True)
    landmark = Column(String(255), nullable=True)

    country_id = Column(Integer, ForeignKey("countries.id"), nullable=True)
    state_id = Column(Integer, ForeignKey("states.id"), nullable=True)
    city_id = Column(Integer, ForeignKey("cities.id"), nullable=True)
    pincode_id = Column(Integer, ForeignKey("pincodes.id"), nullable=True)
    postal_code = Column(String(20), nullable=True)

    address_type = Column(String(20), nullable=False, default=AddressType.HOME.value)
    is_default = Column(Boolean, nullable=False, default=False)

    __table_args__ = (
        Index("idx_addresses_user_default", "user_id", "is_default"),
    )
