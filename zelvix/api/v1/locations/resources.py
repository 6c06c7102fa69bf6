"""
Resource and import definitions for countries, states, cities, pincodes and shipping rates
"""

from sqlalchemy import select
from typing import Any, Dict, Optional

from zelvix.core.resource import ListFilter, ParentRule, Resource, UniqueRule
from zelvix.models import City, Country, Pincode, ShippingRate, State
from zelvix.services.bulk_import import ImportField, ImportSpec
from zelvix.utils.validators import STATUS_VALUES
from .schemas import (
    CityCreate,
    CityUpdate,
    CountryCreate,
    CountryUpdate,
    PincodeCreate,
    PincodeUpdate,
    ShippingRateCreate,
    ShippingRateUpdate,
    StateCreate,
    StateUpdate,
)

STATUS_FILTER = ListFilter("status", "status", "choice", STATUS_VALUES)

def amount_range_check(values: Dict[str, Any]) -> Optional[str]:
    minimum = values.get("min_amount")
    maximum = values.get("max_amount")
    if minimum is not None and maximum is not None and minimum > maximum:
        return "min_amount cannot be greater than max_amount"
    return None

country_resource = Resource(
    label="Country",
    plural="Countries",
    model=Country,
    create_schema=CountryCreate,
    update_schema=CountryUpdate,
    unique=(
        UniqueRule(("name",), "Country already exists with this name"),
        UniqueRule(("iso_code",), "Country already exists with this iso_code"),
    ),
    filters=(STATUS_FILTER, ListFilter("search", "name", "search")),
)

state_resource = Resource(
    label="State",
    plural="States",
    model=State,
    create_schema=StateCreate,
    update_schema=StateUpdate,
    unique=(UniqueRule(("country_id", "name"), "State already exists in this country"),),
    parents=(ParentRule("country_id", Country, "Country"),),
    filters=(
        ListFilter("country_id", "country_id", "int"),
        STATUS_FILTER,
        ListFilter("search", "name", "search"),
    ),
)

city_resource = Resource(
    label="City",
    plural="Cities",
    model=City,
    create_schema=CityCreate,
    update_schema=CityUpdate,
    unique=(UniqueRule(("state_id", "name"), "City already exists in this state"),),
    parents=(ParentRule("state_id", State, "State"),),
    filters=(
        ListFilter("state_id", "state_id", "int"),
        STATUS_FILTER,
        ListFilter("search", "name", "search"),
    ),
)

pincode_resource = Resource(
    label="Pincode",
    plural="Pincodes",
    model=Pincode,
    create_schema=PincodeCreate,
    update_schema=PincodeUpdate,
    unique=(UniqueRule(("city_id", "pincode"), "Pincode already exists for this city"),),
    parents=(ParentRule("city_id", City, "City"),),
    filters=(
        ListFilter("city_id", "city_id", "int"),
        STATUS_FILTER,
        ListFilter("search", "pincode", "search"),
    ),
)

shipping_resource = Resource(
    label="Shipping rate",
    plural="Shipping rates",
    model=ShippingRate,
    create_schema=ShippingRateCreate,
    update_schema=ShippingRateUpdate,
    parents=(ParentRule("pincode_id", Pincode, "Pincode"),),
    checks=(amount_range_check,),
    filters=(ListFilter("pincode_id", "pincode_id", "int"), STATUS_FILTER),
)

STATUS_COLUMN = ImportField("status", ("status",), kind="status", required=False)

async def country_iso_available(db, values: Dict[str, Any], existing) -> Optional[str]:
    """An iso_code may only belong to one country"""
    iso_code = values.get("iso_code")
    if not iso_code:
        return None

    query = select(Country.id).where(Country.iso_code == iso_code)
    if existing is not None:
        query = query.where(Country.id != existing.id)
    if await db.scalar(query.limit(1)) is not None:
        return f'Country "{values["name"]}": iso_code "{iso_code}" already used'
    return None

country_import = ImportSpec(
    label="Country",
    model=Country,
    fields=(
        ImportField("name", ("name", "country", "country_name", "country name")),
        ImportField("iso_code", ("iso_code", "iso", "iso code"), required=False, transform=str.upper),
        ImportField("phone_code", ("phone_code", "phonecode", "phone code"), required=False),
        STATUS_COLUMN,
    ),
    natural_key=("name",),
    update_fields=("iso_code", "phone_code", "status"),
    validate_row=country_iso_available,
    case_insensitive_key=("name",),
)

state_import = ImportSpec(
    label="State",
    model=State,
    fields=(
        ImportField("country_id", ("country_id", "countryid", "country id"), kind="parent"),
        ImportField("name", ("name", "state", "state_name", "state name")),
        ImportField("state_code", ("state_code", "statecode", "state code"), required=False, transform=str.upper),
        STATUS_COLUMN,
    ),
    natural_key=("country_id", "name"),
    update_fields=("state_code", "status"),
    parent_field="country_id",
    parent_model=Country,
    case_insensitive_key=("name",),
)

city_import = ImportSpec(
    label="City",
    model=City,
    fields=(
        ImportField("state_id", ("state_id", "stateid", "state id"), kind="parent"),
        ImportField("name", ("name", "city", "city_name", "city name")),
        STATUS_COLUMN,
    ),
    natural_key=("state_id", "name"),
    update_fields=("status",),
    parent_field="state_id",
    parent_model=State,
    case_insensitive_key=("name",),
)

pincode_import = ImportSpec(
    label="Pincode",
    model=Pincode,
    fields=(
        ImportField("city_id", ("city_id", "cityid", "city id"), kind="parent"),
        ImportField("pincode", ("pincode", "pin_code", "pin code", "pin")),
        ImportField("area_name", ("area_name", "area", "area name"), required=False),
        STATUS_COLUMN,
    ),
    natural_key=("city_id", "pincode"),
    update_fields=("area_name", "status"),
    parent_field="city_id",
    parent_model=City,
)
