"""Services package"""

from .bulk_import import BulkImportService, ImportField, ImportSpec
from .crud_service import CRUDService

__all__ = [
    "BulkImportService",
    "CRUDService",
    "ImportField",
    "ImportSpec",
]
