"""
Quantity offer pricing

A product may offer pack sizes ("buy 3 for 1299"). The resolver turns the
selected pack (or none) into a unit price, a quantity, a rounded line total and
a discount percentage against the product's original price. All functions are
pure and work on Decimal values.
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any, Iterable, List, Optional, Sequence

CENT = Decimal("0.01")
# Largest amount a Numeric(10, 2) column holds
MAX_MONEY = Decimal("99999999.99")

@dataclass(frozen=True)
class QuantityOffer:
    """One pack size with its own unit price"""

    quantity: int
    unit_price: Decimal
    label: str
    secondary_label: str = ""

    @classmethod
    def from_dict(cls, data: dict) -> "QuantityOffer":
        return cls(
            quantity=int(data["quantity"]),
            unit_price=_offer_price(data["unit_price"]),
            label=str(data.get("label") or ""),
            secondary_label=str(data.get("secondary_label") or ""),
        )

    def to_dict(self) -> dict:
        return {
            "quantity": self.quantity,
            "unit_price": float(self.unit_price),
            "label": self.label,
            "secondary_label": self.secondary_label,
        }

@dataclass(frozen=True)
class PriceQuote:
    """Resolved price for a single add-to-cart action"""

    unit_price: Decimal
    quantity: int
    total: Decimal
    discount_percentage: int
    offer: Optional[QuantityOffer] = None

    def to_dict(self) -> dict:
        return {
            "unit_price": float(self.unit_price),
            "quantity": self.quantity,
            "total": float(self.total),
            "discount_percentage": self.discount_percentage,
            "offer": self.offer.to_dict() if self.offer else None,
        }

def to_decimal(value: Any) -> Decimal:
    """Coerce numbers and numeric strings to Decimal, anything else to zero"""
    if isinstance(value, Decimal):
        return value
    if value is None or isinstance(value, bool):
        return Decimal("0")
    try:
        # str() keeps floats like 0.1 from dragging binary noise along
        return Decimal(str(value))
    except (InvalidOperation, ValueError):
        return Decimal("0")

def round_money(value: Any) -> Decimal:
    """Round half-up to whole cents"""
    return to_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)

def parse_money(value: Any) -> Optional[Decimal]:
    """Amount rounded to cents, or None when it is not finite or exceeds MAX_MONEY"""
    amount = to_decimal(value)
    if not amount.is_finite() or abs(amount) > MAX_MONEY:
        return None
    return round_money(amount)

def _offer_price(value: Any) -> Decimal:
    if parse_money(value) is None:
        raise ValueError(f"unusable offer price: {value!r}")
    return to_decimal(value)

def discount_percentage(original_price: Any, unit_price: Any) -> int:
    """
    Whole-number discount of unit_price against original_price

    Never negative, and zero when there is no original price to compare with.
    """
    original = to_decimal(original_price)
    if original <= 0:
        return 0

    percentage = (original - to_decimal(unit_price)) / original * 100
    rounded = int(percentage.quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    return max(0, rounded)

def parse_offers(raw: Optional[Iterable[dict]]) -> List[QuantityOffer]:
    """Build offers from stored JSON, skipping entries that do not parse"""
    offers = []
    for item in raw or ():
        try:
            offer = QuantityOffer.from_dict(item)
        except (KeyError, TypeError, ValueError, AttributeError, ArithmeticError):
            continue
        if offer.quantity > 0 and parse_money(offer.unit_price * offer.quantity) is not None:
            offers.append(offer)
    return offers

def default_offer(offers: Sequence[QuantityOffer]) -> Optional[QuantityOffer]:
    """The offer preselected when a product is first shown"""
    return offers[0] if offers else None

def find_offer(offers: Sequence[QuantityOffer], quantity: Optional[int]) -> Optional[QuantityOffer]:
    """Offer whose pack size equals quantity"""
    if quantity is None:
        return None
    for offer in offers:
        if offer.quantity == quantity:
            return offer
    return None

def resolve_price(price: Any, original_price: Any, offer: Optional[QuantityOffer] = None) -> PriceQuote:
    """
    Price a purchase of one pack

    Args:
        price: Product's current single-unit price
        original_price: Price the discount is measured against
        offer: Selected pack, or None for a single unit

    Returns:
        PriceQuote with total rounded half-up to cents
    """
    if offer is not None:
        unit_price = to_decimal(offer.unit_price)
        quantity = offer.quantity
    else:
        unit_price = to_decimal(price)
        quantity = 1

    return PriceQuote(
        unit_price=unit_price,
        quantity=quantity,
        total=round_money(unit_price * quantity),
        discount_percentage=discount_percentage(original_price, unit_price),
        offer=offer,
    )
