"""
Cart mutations: add, remove, clear and total
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Callable, List, Optional
import logging

from .pricing import PriceQuote, parse_money
from .store import CartLineItem, CartStore, cart_total

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class CartProduct:
    """The product fields a cart line keeps"""

    name: str
    image: Optional[str] = None
    slug: Optional[str] = None

class CartService:
    """Applies purchase actions to a CartStore"""

    def __init__(self, store: CartStore, on_add: Optional[Callable[[CartLineItem], None]] = None):
        self.store = store
        self.on_add = on_add

    def items(self) -> List[CartLineItem]:
        return self.store.get_cart()

    def add(self, product: CartProduct, quantity: int, line_total: Any) -> List[CartLineItem]:
        """
        Merge a purchase into the cart

        A line with the same product name absorbs the new quantity and amount;
        otherwise a new line is appended. A purchase with a quantity below one
        or an amount that cannot be stored leaves the cart untouched.
        """
        items = self.store.get_cart()
        amount = parse_money(line_total)
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1 or amount is None:
            logger.warning(f"Ignoring cart add for {product.name!r}: quantity={quantity!r} line_total={line_total!r}")
            return items

        existing = next((item for item in items if item.name == product.name), None)
        if existing is not None:
            merged = parse_money(existing.line_total + amount)
            if merged is None:
                logger.warning(f"Ignoring cart add for {product.name!r}: line total out of range")
                return items
            existing.quantity += quantity
            existing.line_total = merged
            line = existing
        else:
            line = CartLineItem(
                name=product.name,
                image=product.image,
                slug=product.slug,
                quantity=quantity,
                line_total=amount,
            )
            items.append(line)

        self.store.set_cart(items)
        if self.on_add is not None:
            self.on_add(line)
        return items

    def add_quote(self, product: CartProduct, quote: PriceQuote) -> List[CartLineItem]:
        return self.add(product, quote.quantity, quote.total)

    def remove(self, name: str) -> List[CartLineItem]:
        items = [item for item in self.store.get_cart() if item.name != name]
        if items:
            self.store.set_cart(items)
        else:
            self.store.delete_cart()
        return items

    def clear(self) -> None:
        self.store.delete_cart()

    def total(self) -> Decimal:
        return cart_total(self.store.get_cart())
