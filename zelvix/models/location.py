"""
Geographic reference data and shipping rates
Country > State > City > Pincode, with shipping rates per pincode
"""

from sqlalchemy import Column, String, Integer, ForeignKey, Numeric, UniqueConstraint, Index

from .base import BaseModel, StatusModel

class Country(BaseModel, StatusModel):
    """Country with optional ISO and dialling codes"""

    __tablename__ = "countries"

    name = Column(String(120), nullable=False, unique=True)
    iso_code = Column(String(10), nullable=True, unique=True)
    phone_code = Column(String(10), nullable=True)

class State(BaseModel, StatusModel):
    """State or province inside a country"""

    __tablename__ = "states"

    country_id = Column(Integer, ForeignKey("countries.id"), nullable=False, index=True)
    name = Column(String(120), nullable=False)
    state_code = Column(String(20), nullable=True)

    __table_args__ = (
        UniqueConstraint("country_id", "name", name="uq_states_country_name"),
    )

class City(BaseModel, StatusModel):
    """City inside a state"""

    __tablename__ = "cities"

    state_id = Column(Integer, ForeignKey("states.id"), nullable=False, index=True)
    name = Column(String(120), nullable=False)

    __table_args__ = (
        UniqueConstraint("state_id", "name", name="uq_cities_state_name"),
    )

class Pincode(BaseModel, StatusModel):
    """Postal code served inside a city"""

    __tablename__ = "pincodes"

    city_id = Column(Integer, ForeignKey("cities.id"), nullable=False, index=True)
    pincode = Column(String(20), nullable=False)
    area_name = Column(String(255), nullable=True)

    __table_args__ = (
        UniqueConstraint("city_id", "pincode", name="uq_pincodes_city_pincode"),
    )

class ShippingRate(BaseModel, StatusModel):
    """Shipping charge for an order amount range, optionally per pincode"""

    __tablename__ = "shipping_rates"

    pincode_id = Column(Integer, ForeignKey("pincodes.id"), nullable=True, index=True)
    min_amount = Column(Numeric(10, 2), nullable=False, default=0)
    max_amount = Column(Numeric(10, 2), nullable=False, default=0)
    shipping_amount = Column(Numeric(10, 2), nullable=False, default=0)

    __table_args__ = (
        Index("idx_shipping_rates_amounts", "min_amount", "max_amount"),
    )
