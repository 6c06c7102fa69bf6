"""
Catalog admin routes
"""

from fastapi import APIRouter

from ..crud import build_crud_router
from .resources import (
    category_resource,
    faq_resource,
    inventory_resource,
    product_detail_resource,
    product_resource,
    review_resource,
)

router = APIRouter()
router.include_router(build_crud_router(category_resource), prefix="/categories")
router.include_router(build_crud_router(product_resource), prefix="/products")
router.include_router(build_crud_router(inventory_resource), prefix="/inventory")
router.include_router(build_crud_router(product_detail_resource), prefix="/product-details")
router.include_router(build_crud_router(review_resource), prefix="/reviews")
router.include_router(build_crud_router(faq_resource), prefix="/faqs")
