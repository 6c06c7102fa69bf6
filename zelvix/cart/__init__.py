"""Shopping cart persisted to a key-value slot, with quantity offer pricing"""

from .pricing import (
    MAX_MONEY,
    PriceQuote,
    QuantityOffer,
    default_offer,
    discount_percentage,
    find_offer,
    parse_money,
    parse_offers,
    resolve_price,
    round_money,
    to_decimal,
)
from .service import CartProduct, CartService
from .storage import CartStorage, FileCartStorage, MemoryCartStorage, NullCartStorage
from .store import CART_STORAGE_KEY, CartLineItem, CartStore, cart_total, decode_cart, encode_cart

__all__ = [
    "CART_STORAGE_KEY",
    "MAX_MONEY",
    "CartLineItem",
    "CartProduct",
    "CartService",
    "CartStorage",
    "CartStore",
    "FileCartStorage",
    "MemoryCartStorage",
    "NullCartStorage",
    "PriceQuote",
    "QuantityOffer",
    "cart_total",
    "decode_cart",
    "encode_cart",
    "default_offer",
    "discount_percentage",
    "find_offer",
    "parse_money",
    "parse_offers",
    "resolve_price",
    "round_money",
    "to_decimal",
]
