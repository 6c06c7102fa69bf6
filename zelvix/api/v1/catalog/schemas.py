"""
Catalog request schemas
"""

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, Field
from typing import Annotated, Any, Dict, List, Optional
from decimal import Decimal, InvalidOperation
import json

from zelvix.cart.pricing import MAX_MONEY, round_money
from zelvix.schemas.base import (
    Amount,
    CleanText,
    Count,
    OptionalCleanText,
    OptionalText,
    PositiveId,
    RequestSchema,
    RequiredText,
    Slug,
    Status,
)
from zelvix.utils.helpers import split_keywords, wrap_list
from zelvix.utils.validators import normalize_text, parse_positive_int

OFFER_SHAPE_ERROR = "Each qty_offers item needs quantity, unit_price and label"

def _decode_json(value: Any, field_name: str) -> Any:
    if isinstance(value, str):
        if not value.strip():
            return []
        try:
            return json.loads(value)
        except ValueError:
            raise ValueError(f"{field_name} must be valid JSON")
    return value

def parse_qty_offers(value: Any) -> List[Dict[str, Any]]:
    """Normalize quantity offers to [{quantity, unit_price, label, secondary_label}]"""
    value = _decode_json(value, "qty_offers")
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError("qty_offers must be a list of offers")

    offers = []
    for item in value:
        if not isinstance(item, dict):
            raise ValueError(OFFER_SHAPE_ERROR)

        quantity = parse_positive_int(item.get("quantity"))
        label = normalize_text(item.get("label"))
        raw_price = item.get("unit_price")
        if quantity is None or not label or raw_price in (None, "") or isinstance(raw_price, bool):
            raise ValueError(OFFER_SHAPE_ERROR)

        try:
            unit_price = Decimal(normalize_text(raw_price))
        except InvalidOperation:
            raise ValueError(OFFER_SHAPE_ERROR)
        if not unit_price.is_finite() or unit_price < 0:
            raise ValueError("qty_offers unit_price must be 0 or greater")
        if unit_price > MAX_MONEY:
            raise ValueError(f"qty_offers unit_price must be {MAX_MONEY} or less")

        offers.append({
            "quantity": quantity,
            "unit_price": float(round_money(unit_price)),
            "label": label,
            "secondary_label": normalize_text(item.get("secondary_label")),
        })
    return offers

def _string_list(value: Any) -> Any:
    value = _decode_json(value, "images")
    if value is None:
        return []
    if isinstance(value, list):
        return [normalize_text(item) for item in value if normalize_text(item)]
    return value

def _rating_range(value: Decimal) -> Decimal:
    if value < 0 or value > 5:
        raise ValueError("rating must be between 0 and 5")
    return value

def _upper_required(value: str) -> str:
    return value.upper()

QtyOffers = Annotated[List[Dict[str, Any]], BeforeValidator(parse_qty_offers)]
ImageList = Annotated[List[str], BeforeValidator(_string_list)]
Keywords = Annotated[List[str], BeforeValidator(split_keywords)]
Sku = Annotated[RequiredText, AfterValidator(_upper_required)]
Rating = Annotated[Decimal, AfterValidator(_rating_range)]

class CategoryCreate(RequestSchema):
    name: RequiredText
    slug: Slug
    image: OptionalText = None
    status: Status = "active"

class CategoryUpdate(RequestSchema):
    name: Optional[RequiredText] = None
    slug: Optional[Slug] = None
    image: OptionalText = None
    status: Optional[Status] = None

class ProductCreate(RequestSchema):
    name: RequiredText
    slug: Slug
    sku: Sku
    category_id: PositiveId
    images: ImageList = Field(default_factory=list)
    qty: Count = 0
    sold_qty: Count = 0
    description: OptionalText = None
    weight: OptionalText = None
    length: OptionalText = None
    breadth: OptionalText = None
    height: OptionalText = None
    price: Optional[Amount] = None
    offer_price: Optional[Amount] = None
    tax: Optional[Amount] = None
    hsn: OptionalText = None
    seo_title: OptionalText = None
    seo_description: OptionalText = None
    keywords: Keywords = Field(default_factory=list)
    qty_offers: QtyOffers = Field(default_factory=list)
    is_new: bool = False
    is_top: bool = False
    is_best: bool = False
    status: Status = "active"

class ProductUpdate(RequestSchema):
    name: Optional[RequiredText] = None
    slug: Optional[Slug] = None
    sku: Optional[Sku] = None
    category_id: Optional[PositiveId] = None
    images: Optional[ImageList] = None
    qty: Optional[Count] = None
    sold_qty: Optional[Count] = None
    description: OptionalText = None
    weight: OptionalText = None
    length: OptionalText = None
    breadth: OptionalText = None
    height: OptionalText = None
    price: Optional[Amount] = None
    offer_price: Optional[Amount] = None
    tax: Optional[Amount] = None
    hsn: OptionalText = None
    seo_title: OptionalText = None
    seo_description: OptionalText = None
    keywords: Optional[Keywords] = None
    qty_offers: Optional[QtyOffers] = None
    is_new: Optional[bool] = None
    is_top: Optional[bool] = None
    is_best: Optional[bool] = None
    status: Optional[Status] = None

class InventoryUpdate(RequestSchema):
    qty: Optional[Count] = None
    sold_qty: Optional[Count] = None
    status: Optional[Status] = None

class ContentBlock(BaseModel):
    """Benefit or ingredient card"""
    model_config = ConfigDict(extra="ignore")

    image: OptionalText = None
    heading: OptionalText = None
    text: OptionalText = None

class UsageStep(BaseModel):
    model_config = ConfigDict(extra="ignore")

    heading: OptionalText = None
    text: OptionalText = None
    tips: Annotated[List[str], BeforeValidator(_string_list)] = Field(default_factory=list)

ContentBlocks = Annotated[List[ContentBlock], BeforeValidator(wrap_list)]
UsageSteps = Annotated[List[UsageStep], BeforeValidator(wrap_list)]

class ProductDetailCreate(RequestSchema):
    product_id: PositiveId
    benefits: ContentBlocks = Field(default_factory=list)
    ingredients: ContentBlocks = Field(default_factory=list)
    usage_steps: UsageSteps = Field(default_factory=list)
    image_primary: OptionalText = None
    image_secondary: OptionalText = None

class ProductDetailUpdate(RequestSchema):
    product_id: Optional[PositiveId] = None
    benefits: Optional[ContentBlocks] = None
    ingredients: Optional[ContentBlocks] = None
    usage_steps: Optional[UsageSteps] = None
    image_primary: OptionalText = None
    image_secondary: OptionalText = None

class ReviewCreate(RequestSchema):
    product_id: PositiveId
    product_name: Slug
    name: CleanText
    image: OptionalText = None
    rating: Rating
    comment: OptionalCleanText = None
    is_active: bool = True

class ReviewUpdate(RequestSchema):
    product_id: Optional[PositiveId] = None
    product_name: Optional[Slug] = None
    name: Optional[CleanText] = None
    image: OptionalText = None
    rating: Optional[Rating] = None
    comment: OptionalCleanText = None
    is_active: Optional[bool] = None

class FaqCreate(RequestSchema):
    product_id: PositiveId
    product_name: Slug
    name: OptionalText = None
    question: CleanText
    answer: CleanText
    is_active: bool = True

class FaqUpdate(RequestSchema):
    product_id: Optional[PositiveId] = None
    product_name: Optional[Slug] = None
    name: OptionalText = None
    question: Optional[CleanText] = None
    answer: Optional[CleanText] = None
    is_active: Optional[bool] = None
