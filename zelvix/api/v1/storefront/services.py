"""
Storefront service layer
Read-only views over the catalog plus checkout helpers
"""

from sqlalchemy import and_, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from decimal import Decimal
from typing import Any, Dict, List, Optional

from zelvix.cart import (
    CartLineItem,
    PriceQuote,
    cart_total,
    default_offer,
    find_offer,
    parse_offers,
    resolve_price,
    to_decimal,
)
from zelvix.core.exceptions import NotFoundException, UnauthorizedException
from zelvix.models import Address, Category, PaymentGateway, Product, ProductDetail, ShippingRate, User

def current_price(product: Product) -> Decimal:
    """Offer price when one is set, list price otherwise"""
    offer_price = to_decimal(product.offer_price)
    return offer_price if offer_price > 0 else to_decimal(product.price)

def quote_for(product: Product, quantity: Optional[int] = None) -> PriceQuote:
    """Quote a pack size; unknown or missing sizes fall back to a single unit"""
    offers = parse_offers(product.qty_offers)
    offer = find_offer(offers, quantity)
    return resolve_price(current_price(product), product.price, offer)

class StorefrontService:
    """Storefront service"""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_active_product(self, slug: str) -> Product:
        result = await self.db.execute(
            select(Product).where(Product.slug == slug.strip().lower(), Product.status == "active")
        )
        product = result.scalar_one_or_none()
        if product is None:
            raise NotFoundException("Product not found")
        return product

    async def product_page(self, slug: str) -> Dict[str, Any]:
        """
        Everything the product page renders

        Returns:
            product, category, details and pricing with the preselected pack quoted
        """
        product = await self.get_active_product(slug)
        category = await self.db.get(Category, product.category_id) if product.category_id else None
        details = await self.db.scalar(select(ProductDetail).where(ProductDetail.product_id == product.id))

        offers = parse_offers(product.qty_offers)
        selected = default_offer(offers)
        quote = resolve_price(current_price(product), product.price, selected)

        return {
            "product": product.to_dict(),
            "category": category.to_dict() if category else None,
            "details": details.to_dict() if details else None,
            "pricing": {
                "offers": [offer.to_dict() for offer in offers],
                "quote": quote.to_dict(),
            },
        }

    async def checkout_context(self, email: Optional[str]) -> Dict[str, Any]:
        """User, saved addresses (default first) and active payment gateways"""
        user = None
        if email:
            result = await self.db.execute(select(User).where(User.email == email.strip().lower()))
            user = result.scalar_one_or_none()
        if user is None:
            raise UnauthorizedException("Please login to continue")

        addresses = (await self.db.execute(
            select(Address)
            .where(Address.user_id == user.id, Address.status == "active")
            .order_by(Address.is_default.desc(), Address.created_at.desc(), Address.id.desc())
        )).scalars().all()

        gateways = (await self.db.execute(
            select(PaymentGateway).where(PaymentGateway.is_active.is_(True)).order_by(PaymentGateway.id)
        )).scalars().all()

        return {
            "user": user.to_dict(only=("id", "name", "email", "role")),
            "addresses": [address.to_dict() for address in addresses],
            "payment_gateways": [gateway.to_dict(exclude=("secret_key",)) for gateway in gateways],
        }

    async def shipping_rate_for(self, total: Decimal, pincode_id: Optional[int] = None) -> Optional[ShippingRate]:
        """Active rate whose band contains total; a pincode-specific rate wins over a general one"""
        pincode_match = ShippingRate.pincode_id.is_(None)
        if pincode_id is not None:
            pincode_match = or_(ShippingRate.pincode_id == pincode_id, ShippingRate.pincode_id.is_(None))

        result = await self.db.execute(
            select(ShippingRate)
            .where(and_(
                ShippingRate.status == "active",
                ShippingRate.min_amount <= total,
                ShippingRate.max_amount >= total,
                pincode_match,
            ))
            .order_by(ShippingRate.pincode_id.is_(None), ShippingRate.min_amount.desc(), ShippingRate.id)
            .limit(1)
        )
        return result.scalar_one_or_none()

    async def order_summary(self, items: List[CartLineItem], pincode_id: Optional[int] = None) -> Dict[str, Any]:
        total = cart_total(items)
        rate = await self.shipping_rate_for(total, pincode_id) if items else None
        shipping = to_decimal(rate.shipping_amount) if rate else Decimal("0")

        return {
            "items": [item.to_dict() for item in items],
            "item_count": sum(item.quantity for item in items),
            "subtotal": float(total),
            "shipping": float(shipping),
            "shipping_rate": rate.to_dict() if rate else None,
            "total": float(total + shipping),
        }
