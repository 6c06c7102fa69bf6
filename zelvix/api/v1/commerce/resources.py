"""
Resource definitions for payment gateways, coupons and addresses
"""

from sqlalchemy import update
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any, Dict, Optional

from zelvix.core.resource import ListFilter, ParentRule, Resource, UniqueRule
from zelvix.models import Address, City, Country, Coupon, PaymentGateway, Pincode, State, User
from zelvix.utils.validators import STATUS_VALUES
from .schemas import (
    AddressCreate,
    AddressUpdate,
    CouponCreate,
    CouponUpdate,
    PaymentGatewayCreate,
    PaymentGatewayUpdate,
)

STATUS_FILTER = ListFilter("status", "status", "choice", STATUS_VALUES)

def _utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)

def coupon_window_check(values: Dict[str, Any]) -> Optional[str]:
    start, end = values.get("start_date"), values.get("end_date")
    if start is not None and end is not None and _utc(start) > _utc(end):
        return "start_date cannot be after end_date"
    return None

def coupon_percentage_check(values: Dict[str, Any]) -> Optional[str]:
    if values.get("discount_type") == "percentage" and Decimal(str(values.get("discount_value") or 0)) > 100:
        return "Percentage discount cannot be greater than 100"
    return None

async def clear_other_defaults(db, address: Address) -> None:
    """Only one default address per user"""
    if not address.is_default:
        return
    await db.execute(
        update(Address)
        .where(Address.user_id == address.user_id, Address.id != address.id, Address.is_default.is_(True))
        .values(is_default=False)
    )

payment_gateway_resource = Resource(
    label="Payment gateway",
    plural="Payment gateways",
    model=PaymentGateway,
    create_schema=PaymentGatewayCreate,
    update_schema=PaymentGatewayUpdate,
    unique=(UniqueRule(("name",), "Payment gateway already exists with this name"),),
    hidden=("secret_key",),
    filters=(
        ListFilter("is_active", "is_active", "bool"),
        ListFilter("active_only", "is_active", "bool"),
        ListFilter("search", "name", "search"),
    ),
)

coupon_resource = Resource(
    label="Coupon",
    plural="Coupons",
    model=Coupon,
    create_schema=CouponCreate,
    update_schema=CouponUpdate,
    unique=(UniqueRule(("code",), "Coupon already exists with this code"),),
    checks=(coupon_window_check, coupon_percentage_check),
    filters=(
        STATUS_FILTER,
        ListFilter("discount_type", "discount_type", "choice", ("percentage", "fixed")),
        ListFilter("search", "code", "search"),
    ),
)

address_resource = Resource(
    label="Address",
    plural="Addresses",
    model=Address,
    create_schema=AddressCreate,
    update_schema=AddressUpdate,
    parents=(
        ParentRule("user_id", User, "User"),
        ParentRule("country_id", Country, "Country"),
        ParentRule("state_id", State, "State"),
        ParentRule("city_id", City, "City"),
        ParentRule("pincode_id", Pincode, "Pincode"),
    ),
    after_write=clear_other_defaults,
    ordering=(Address.is_default.desc(),),
    filters=(
        ListFilter("user_id", "user_id", "int"),
        STATUS_FILTER,
        ListFilter("address_type", "address_type", "choice", ("home", "office", "other")),
    ),
)
