"""
Checkout routes under /buynow
Only reachable with session cookies; see CheckoutGuardMiddleware
"""

from fastapi import APIRouter, Depends, HTTPException, Request
from sqlalchemy.ext.asyncio import AsyncSession
import logging

from zelvix.cart import decode_cart
from zelvix.core.database import get_db
from zelvix.core.exceptions import InternalServerException
from zelvix.core.security import USER_EMAIL_COOKIE
from zelvix.utils.validators import parse_positive_int
from .services import StorefrontService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/buynow", tags=["Checkout"])

@router.get("")
async def checkout(request: Request, db: AsyncSession = Depends(get_db)):
    """Checkout context for the logged-in user"""
    try:
        data = await StorefrontService(db).checkout_context(request.cookies.get(USER_EMAIL_COOKIE))
        return {"message": "Checkout fetched successfully", "data": data}
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Failed to load checkout: {e}")
        raise InternalServerException("Failed to fetch checkout")

@router.post("/summary")
async def checkout_summary(request: Request, db: AsyncSession = Depends(get_db)):
    """
    Price the persisted cart

    Body is either the stored cart array or {"items": [...], "pincode_id": n}.
    Lines that do not decode yield an empty cart rather than an error.
    """
    try:
        try:
            body = await request.json()
        except ValueError:
            body = None

        if isinstance(body, dict):
            items = decode_cart(body.get("items"))
            pincode_id = parse_positive_int(body.get("pincode_id"))
        else:
            items = decode_cart(body)
            pincode_id = parse_positive_int(request.query_params.get("pincode_id"))

        data = await StorefrontService(db).order_summary(items, pincode_id)
        return {"message": "Order summary fetched successfully", "data": data}
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Failed to build order summary: {e}")
        raise InternalServerException("Failed to fetch order summary")
