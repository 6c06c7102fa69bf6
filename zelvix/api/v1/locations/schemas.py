"""
Location and shipping rate request schemas
"""

from typing import Optional

from zelvix.schemas.base import Amount, OptionalText, PositiveId, RequestSchema, RequiredText, Status, UpperText

class CountryCreate(RequestSchema):
    name: RequiredText
    iso_code: UpperText = None
    phone_code: OptionalText = None
    status: Status = "active"

class CountryUpdate(RequestSchema):
    name: Optional[RequiredText] = None
    iso_code: UpperText = None
    phone_code: OptionalText = None
    status: Optional[Status] = None

class StateCreate(RequestSchema):
    country_id: PositiveId
    name: RequiredText
    state_code: UpperText = None
    status: Status = "active"

class StateUpdate(RequestSchema):
    country_id: Optional[PositiveId] = None
    name: Optional[RequiredText] = None
    state_code: UpperText = None
    status: Optional[Status] = None

class CityCreate(RequestSchema):
    state_id: PositiveId
    name: RequiredText
    status: Status = "active"

class CityUpdate(RequestSchema):
    state_id: Optional[PositiveId] = None
    name: Optional[RequiredText] = None
    status: Optional[Status] = None

class PincodeCreate(RequestSchema):
    city_id: PositiveId
    pincode: RequiredText
    area_name: OptionalText = None
    status: Status = "active"

class PincodeUpdate(RequestSchema):
    city_id: Optional[PositiveId] = None
    pincode: Optional[RequiredText] = None
    area_name: OptionalText = None
    status: Optional[Status] = None

class ShippingRateCreate(RequestSchema):
    pincode_id: Optional[PositiveId] = None
    min_amount: Amount
    max_amount: Amount
    shipping_amount: Amount
    status: Status = "active"

class ShippingRateUpdate(RequestSchema):
    pincode_id: Optional[PositiveId] = None
    min_amount: Optional[Amount] = None
    max_amount: Optional[Amount] = None
    shipping_amount: Optional[Amount] = None
    status: Optional[Status] = None
