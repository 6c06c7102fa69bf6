"""Models package initialization"""

from .base import Base, BaseModel
from .location import Country, State, City, Pincode, ShippingRate
from .category import Category
from .product import Product, ProductDetail
from .review import Review, Faq
from .payment import PaymentGateway
from .coupon import Coupon, DiscountType
from .address import Address, AddressType
from .user import User, UserRole, UserStatus, STAFF_ROLES

__all__ = [
    "Base",
    "BaseModel",
    "Country",
    "State",
    "City",
    "Pincode",
    "ShippingRate",
    "Category",
    "Product",
    "ProductDetail",
    "Review",
    "Faq",
    "PaymentGateway",
    "Coupon",
    "DiscountType",
    "Address",
    "AddressType",
    "User",
    "UserRole",
    "UserStatus",
    "STAFF_ROLES",
]
