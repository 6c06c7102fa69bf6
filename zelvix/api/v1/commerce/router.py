"""
Commerce admin routes
"""

from fastapi import APIRouter

from ..crud import build_crud_router
from .resources import address_resource, coupon_resource, payment_gateway_resource

router = APIRouter()
router.include_router(build_crud_router(payment_gateway_resource), prefix="/payment-gateways")
router.include_router(build_crud_router(coupon_resource), prefix="/coupons")
router.include_router(build_crud_router(address_resource), prefix="/addresses")
