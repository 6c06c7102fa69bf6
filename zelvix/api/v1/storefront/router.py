"""
Public storefront routes
"""

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional
import logging

from zelvix.core.database import get_db
from zelvix.core.exceptions import InternalServerException
from zelvix.utils.validators import parse_positive_int
from .services import StorefrontService, quote_for

logger = logging.getLogger(__name__)

router = APIRouter()

@router.get("/products/{slug}", summary="Product page")
async def get_product_page(slug: str, db: AsyncSession = Depends(get_db)):
    """Active product with category, details and pack pricing"""
    try:
        data = await StorefrontService(db).product_page(slug)
        return {"message": "Product fetched successfully", "data": data}
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Failed to fetch product page {slug}: {e}")
        raise InternalServerException("Failed to fetch product")

@router.get("/products/{slug}/quote", summary="Price a pack size")
async def get_price_quote(
    slug: str,
    quantity: Optional[str] = Query(None),
    db: AsyncSession = Depends(get_db),
):
    """Quote for the requested pack; the base price when the pack is unknown"""
    try:
        product = await StorefrontService(db).get_active_product(slug)
        quote = quote_for(product, parse_positive_int(quantity))
        return {"message": "Price quote fetched successfully", "data": quote.to_dict()}
    except HTTPException:
        raise
    except Exception as e:
        logger.exception(f"Failed to quote {slug}: {e}")
        raise InternalServerException("Failed to fetch price quote")
