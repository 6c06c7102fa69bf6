"""
Payment gateway, coupon and address request schemas
"""

from pydantic import AfterValidator, BeforeValidator
from typing import Annotated, Literal, Optional
from datetime import datetime

from zelvix.schemas.base import Amount, Count, OptionalText, PositiveId, RequestSchema, RequiredText, Status

def _lower(value):
    return value.strip().lower() if isinstance(value, str) else value

def _blank_to_none(value):
    if isinstance(value, str) and not value.strip():
        return None
    return value

DiscountType = Annotated[Literal["percentage", "fixed"], BeforeValidator(_lower)]
AddressType = Annotated[Literal["home", "office", "other"], BeforeValidator(_lower)]
OptionalDate = Annotated[Optional[datetime], BeforeValidator(_blank_to_none)]
CouponCode = Annotated[RequiredText, AfterValidator(str.upper)]

class PaymentGatewayCreate(RequestSchema):
    name: RequiredText
    app_id: OptionalText = None
    secret_key: OptionalText = None
    is_active: bool = True

class PaymentGatewayUpdate(RequestSchema):
    name: Optional[RequiredText] = None
    app_id: OptionalText = None
    secret_key: OptionalText = None
    is_active: Optional[bool] = None

class CouponCreate(RequestSchema):
    code: CouponCode
    discount_type: DiscountType = "percentage"
    discount_value: Amount
    min_order_amount: Optional[Amount] = None
    max_discount_amount: Optional[Amount] = None
    usage_limit: Optional[Count] = None
    used_count: Count = 0
    start_date: OptionalDate = None
    end_date: OptionalDate = None
    status: Status = "active"

class CouponUpdate(RequestSchema):
    code: Optional[CouponCode] = None
    discount_type: Optional[DiscountType] = None
    discount_value: Optional[Amount] = None
    min_order_amount: Optional[Amount] = None
    max_discount_amount: Optional[Amount] = None
    usage_limit: Optional[Count] = None
    used_count: Optional[Count] = None
    start_date: OptionalDate = None
    end_date: OptionalDate = None
    status: Optional[Status] = None

class AddressCreate(RequestSchema):
    user_id: PositiveId
    full_name: RequiredText
    mobile: RequiredText
    alternate_mobile: OptionalText = None
    address_line_1: RequiredText
    address_line_2: OptionalText = None
    landmark: OptionalText = None
    country_id: Optional[PositiveId] = None
    state_id: Optional[PositiveId] = None
    city_id: Optional[PositiveId] = None
    pincode_id: Optional[PositiveId] = None
    postal_code: OptionalText = None
    address_type: AddressType = "home"
    is_default: bool = False
    status: Status = "active"

class AddressUpdate(RequestSchema):
    user_id: Optional[PositiveId] = None
    full_name: Optional[RequiredText] = None
    mobile: Optional[RequiredText] = None
    alternate_mobile: OptionalText = None
    address_line_1: Optional[RequiredText] = None
    address_line_2: OptionalText = None
    landmark: OptionalText = None
    country_id: Optional[PositiveId] = None
    state_id: Optional[PositiveId] = None
    city_id: Optional[PositiveId] = None
    pincode_id: Optional[PositiveId] = None
    postal_code: OptionalText = None
    address_type: Optional[AddressType] = None
    is_default: Optional[bool] = None
    status: Optional[Status] = None
