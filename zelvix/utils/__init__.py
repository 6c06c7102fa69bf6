"""Utilities package"""

from .pagination import paginate, PaginationMeta, PaginationParams
from .validators import normalize_text, parse_positive_int, sanitize_filename

__all__ = [
    "paginate",
    "PaginationMeta",
    "PaginationParams",
    "normalize_text",
    "parse_positive_int",
    "sanitize_filename",
]
