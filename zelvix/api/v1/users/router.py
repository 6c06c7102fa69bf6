"""User management endpoints for admin"""

from fastapi import APIRouter

from ..crud import build_crud_router
from .resources import (
    blocked_customer_resource,
    customer_resource,
    pending_customer_resource,
    staff_resource,
)

router = APIRouter()
router.include_router(build_crud_router(customer_resource), prefix="/customers")
router.include_router(build_crud_router(pending_customer_resource), prefix="/pending-customers")
router.include_router(build_crud_router(blocked_customer_resource), prefix="/blocked")
router.include_router(build_crud_router(staff_resource), prefix="/staff")
