"""
Persistent cart store

Reads and writes the serialized list of cart lines through a CartStorage slot.
Bad or missing data always reads back as an empty cart.
"""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Callable, List, Optional
import json
import logging

from .pricing import parse_money, round_money, to_decimal
from .storage import CartStorage, NullCartStorage

logger = logging.getLogger(__name__)

CART_STORAGE_KEY = "zelvix_cart_items"

class MalformedCartLine(ValueError):
    pass

@dataclass
class CartLineItem:
    """One product accumulated across repeated add actions"""

    name: str
    quantity: int
    line_total: Decimal
    image: Optional[str] = None
    slug: Optional[str] = None
    extra: dict = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> "CartLineItem":
        if not isinstance(data, dict):
            raise MalformedCartLine("cart line must be an object")

        name = data.get("name")
        quantity = data.get("quantity")
        line_total = data.get("line_total")
        if not isinstance(name, str) or not name:
            raise MalformedCartLine("cart line needs a name")
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
            raise MalformedCartLine("cart line needs a positive quantity")
        if isinstance(line_total, bool) or not isinstance(line_total, (int, float, str)):
            raise MalformedCartLine("cart line needs a line_total")
        amount = parse_money(line_total)
        if amount is None:
            raise MalformedCartLine("cart line_total is out of range")

        known = {"name", "quantity", "line_total", "image", "slug"}
        return cls(
            name=name,
            quantity=quantity,
            line_total=amount,
            image=data.get("image"),
            slug=data.get("slug"),
            extra={key: value for key, value in data.items() if key not in known},
        )

    def to_dict(self) -> dict:
        data = dict(self.extra)
        data.update({
            "name": self.name,
            "image": self.image,
            "slug": self.slug,
            "quantity": self.quantity,
            "line_total": float(round_money(self.line_total)),
        })
        return data

def decode_cart(payload: Any) -> List[CartLineItem]:
    """
    Decode a persisted cart payload

    Accepts bytes, str or an already-parsed list. Anything that is not a list
    of well-formed lines gives an empty cart.
    """
    if payload is None:
        return []

    try:
        if isinstance(payload, (bytes, bytearray, str)):
            payload = json.loads(payload)
        if not isinstance(payload, list):
            return []
        return [CartLineItem.from_dict(item) for item in payload]
    except (ValueError, TypeError, ArithmeticError) as e:
        logger.debug(f"Discarding unreadable cart payload: {e}")
        return []

def encode_cart(items: List[CartLineItem]) -> bytes:
    return json.dumps([item.to_dict() for item in items]).encode("utf-8")

class CartStore:
    """Cart lines persisted in a single storage slot"""

    def __init__(self, storage: Optional[CartStorage] = None):
        self.storage = storage if storage is not None else NullCartStorage()
        self._subscribers: List[Callable[[List[CartLineItem]], None]] = []

    def get_cart(self) -> List[CartLineItem]:
        return decode_cart(self.storage.load())

    def set_cart(self, items: List[CartLineItem]) -> None:
        self.storage.save(encode_cart(items))
        self._notify(list(items))

    def delete_cart(self) -> None:
        self.storage.clear()
        self._notify([])

    def subscribe(self, callback: Callable[[List[CartLineItem]], None]) -> Callable[[], None]:
        """Register a change listener; returns a function that removes it"""
        self._subscribers.append(callback)

        def unsubscribe():
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _notify(self, items: List[CartLineItem]) -> None:
        for callback in list(self._subscribers):
            try:
                callback(items)
            except Exception:
                logger.exception("Cart change listener failed")

def cart_total(items: List[CartLineItem]) -> Decimal:
    return round_money(sum((to_decimal(item.line_total) for item in items), Decimal("0")))
