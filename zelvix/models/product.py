"""
Product catalog models
Products with quantity offers, plus the long-form product details page content
"""

from sqlalchemy import Column, String, Integer, Boolean, ForeignKey, Text, Numeric, JSON, Index

from .base import BaseModel, StatusModel

class Product(BaseModel, StatusModel):
    """Sellable product"""

    __tablename__ = "products"

    name = Column(String(255), nullable=False)
    slug = Column(String(255), unique=True, nullable=False, index=True)
    sku = Column(String(100), unique=True, nullable=False, index=True)
    category_id = Column(Integer, ForeignKey("categories.id"), nullable=False, index=True)

    # Media
    images = Column(JSON, nullable=False, default=list)

    # Stock
    qty = Column(Integer, nullable=False, default=0)
    sold_qty = Column(Integer, nullable=False, default=0)

    # Description and dimensions
    description = Column(Text, nullable=True)
    weight = Column(String(50), nullable=True)
    length = Column(String(50), nullable=True)
    breadth = Column(String(50), nullable=True)
    height = Column(String(50), nullable=True)

    # Pricing
    price = Column(Numeric(10, 2), nullable=True)
    offer_price = Column(Numeric(10, 2), nullable=True)
    tax = Column(Numeric(5, 2), nullable=True)
    hsn = Column(String(50), nullable=True)
    qty_offers = Column(JSON, nullable=False, default=list)

    # SEO
    seo_title = Column(String(255), nullable=True)
    seo_description = Column(Text, nullable=True)
    keywords = Column(JSON, nullable=False, default=list)

    # Merchandising flags
    is_new = Column(Boolean, nullable=False, default=False)
    is_top = Column(Boolean, nullable=False, default=False)
    is_best = Column(Boolean, nullable=False, default=False)

    __table_args__ = (
        Index("idx_products_category_status", "category_id", "status"),
    )

class ProductDetail(BaseModel):
    """Benefits, ingredients and usage content shown on the product page"""

    __tablename__ = "product_details"

    product_id = Column(Integer, ForeignKey("products.id"), nullable=False, unique=True)
    benefits = Column(JSON, nullable=False, default=list)
    ingredients = Column(JSON, nullable=False, default=list)
    usage_steps = Column(JSON, nullable=False, default=list)
    image_primary = Column(String(500), nullable=True)
    image_secondary = Column(String(500), nullable=True)
