"""
Location API routes: CRUD plus spreadsheet import
"""

from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Optional
import logging

from zelvix.core.config import settings
from zelvix.core.database import get_db
from zelvix.core.exceptions import BadRequestException, InternalServerException
from zelvix.services.bulk_import import BulkImportService, ImportSpec
from zelvix.utils.helpers import read_limited
from ..crud import build_crud_router
from .resources import (
    city_import,
    city_resource,
    country_import,
    country_resource,
    pincode_import,
    pincode_resource,
    shipping_resource,
    state_import,
    state_resource,
)

logger = logging.getLogger(__name__)

def add_import_route(router: APIRouter, spec: ImportSpec) -> APIRouter:
    """Attach POST /import for a spreadsheet of records"""

    @router.post("/import", status_code=status.HTTP_201_CREATED)
    async def import_records(
        file: Optional[UploadFile] = File(None),
        db: AsyncSession = Depends(get_db),
    ):
        try:
            if file is None or not file.filename:
                raise BadRequestException("Excel file is required")
            content = await read_limited(file, settings.MAX_IMPORT_SIZE)
            if content is None:
                raise BadRequestException("File size must be 10MB or less")
            return await BulkImportService(db, spec).import_file(file.filename, content)
        except HTTPException:
            raise
        except Exception as e:
            logger.exception(f"{spec.label} import failed: {e}")
            raise InternalServerException(f"Failed to import {spec.label.lower()} excel")

    return router

countries_router = add_import_route(build_crud_router(country_resource), country_import)
states_router = add_import_route(build_crud_router(state_resource), state_import)
cities_router = add_import_route(build_crud_router(city_resource), city_import)
pincodes_router = add_import_route(build_crud_router(pincode_resource), pincode_import)
shipping_router = build_crud_router(shipping_resource)

router = APIRouter()
router.include_router(countries_router, prefix="/countries")
router.include_router(states_router, prefix="/states")
router.include_router(cities_router, prefix="/cities")
router.include_router(pincodes_router, prefix="/pincodes")
router.include_router(shipping_router, prefix="/shipping-rates")
