"""
Resource definitions for the catalog
"""

from zelvix.core.resource import ListFilter, ParentRule, Resource, UniqueRule
from zelvix.models import Category, Faq, Product, ProductDetail, Review
from zelvix.utils.validators import STATUS_VALUES
from .schemas import (
    CategoryCreate,
    CategoryUpdate,
    FaqCreate,
    FaqUpdate,
    InventoryUpdate,
    ProductCreate,
    ProductDetailCreate,
    ProductDetailUpdate,
    ProductUpdate,
    ReviewCreate,
    ReviewUpdate,
)

STATUS_FILTER = ListFilter("status", "status", "choice", STATUS_VALUES)
PRODUCT_SLUG_MESSAGE = "product_name must match selected product slug"

INVENTORY_FIELDS = ("id", "name", "sku", "category_id", "tax", "hsn", "qty", "sold_qty", "status", "created_at", "updated_at")

category_resource = Resource(
    label="Category",
    plural="Categories",
    model=Category,
    create_schema=CategoryCreate,
    update_schema=CategoryUpdate,
    unique=(UniqueRule(("slug",), "Category already exists with this slug"),),
    filters=(STATUS_FILTER, ListFilter("search", "name", "search")),
)

product_resource = Resource(
    label="Product",
    plural="Products",
    model=Product,
    create_schema=ProductCreate,
    update_schema=ProductUpdate,
    unique=(
        UniqueRule(("slug",), "Product already exists with this slug"),
        UniqueRule(("sku",), "Product already exists with this sku"),
    ),
    parents=(ParentRule("category_id", Category, "Category"),),
    filters=(
        STATUS_FILTER,
        ListFilter("category_id", "category_id", "int"),
        ListFilter("is_new", "is_new", "bool"),
        ListFilter("is_top", "is_top", "bool"),
        ListFilter("is_best", "is_best", "bool"),
        ListFilter("search", "name", "search"),
    ),
)

inventory_resource = Resource(
    label="Inventory",
    plural="Inventory",
    model=Product,
    update_schema=InventoryUpdate,
    visible=INVENTORY_FIELDS,
    operations=frozenset({"list", "get", "update"}),
    id_aliases=("product_id",),
    filters=(
        STATUS_FILTER,
        ListFilter("category_id", "category_id", "int"),
        ListFilter("search", "name", "search"),
    ),
)

product_detail_resource = Resource(
    label="Product details",
    plural="Product details",
    model=ProductDetail,
    create_schema=ProductDetailCreate,
    update_schema=ProductDetailUpdate,
    unique=(UniqueRule(("product_id",), "Product details already exists for this product_id"),),
    parents=(ParentRule("product_id", Product, "Product"),),
    lookup_fields=("product_id",),
)

review_resource = Resource(
    label="Review",
    plural="Reviews",
    model=Review,
    create_schema=ReviewCreate,
    update_schema=ReviewUpdate,
    parents=(
        ParentRule(
            "product_id",
            Product,
            "Product",
            match=("product_name", "slug"),
            match_message=PRODUCT_SLUG_MESSAGE,
        ),
    ),
    filters=(
        ListFilter("product_id", "product_id", "int"),
        ListFilter("product_name", "product_name", "text"),
        ListFilter("is_active", "is_active", "bool"),
        ListFilter("search", "name", "search"),
    ),
)

faq_resource = Resource(
    label="FAQ",
    plural="FAQs",
    model=Faq,
    create_schema=FaqCreate,
    update_schema=FaqUpdate,
    parents=(
        ParentRule(
            "product_id",
            Product,
            "Product",
            match=("product_name", "slug"),
            match_message=PRODUCT_SLUG_MESSAGE,
        ),
    ),
    filters=(
        ListFilter("product_id", "product_id", "int"),
        ListFilter("product_name", "product_name", "text"),
        ListFilter("is_active", "is_active", "bool"),
        ListFilter("search", "question", "search"),
    ),
)
