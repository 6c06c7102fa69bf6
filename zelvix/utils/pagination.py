"""
Pagination utilities
"""

from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field
from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import Select

from zelvix.core.config import settings
from .validators import parse_positive_int

class PaginationParams(BaseModel):
    """Pagination parameters"""
    page: int = Field(1, ge=1, description="Page number")
    limit: int = Field(10, ge=1, le=100, description="Page size")

    @property
    def offset(self) -> int:
        """Calculate offset"""
        return (self.page - 1) * self.limit

    @classmethod
    def from_raw(cls, page: Any = None, limit: Any = None) -> "PaginationParams":
        """
        Lenient parsing of query string values

        Unusable page values fall back to 1, limit is clamped to 1..MAX_PAGE_SIZE
        and falls back to the default size when not a number.
        """
        parsed_page = parse_positive_int(page) or 1
        parsed_limit = _parse_limit(limit)
        return cls(page=parsed_page, limit=parsed_limit)

def _parse_limit(value: Any) -> int:
    if value is None or value == "":
        return settings.DEFAULT_PAGE_SIZE
    try:
        number = int(float(str(value).strip()))
    except (ValueError, OverflowError):
        return settings.DEFAULT_PAGE_SIZE
    return min(max(number, 1), settings.MAX_PAGE_SIZE)

class PaginationMeta(BaseModel):
    """Pagination block returned with every list response"""
    model_config = ConfigDict(populate_by_name=True)

    page: int
    limit: int
    total_items: int = Field(alias="totalItems")
    total_pages: int = Field(alias="totalPages")
    has_next_page: bool = Field(alias="hasNextPage")
    has_prev_page: bool = Field(alias="hasPrevPage")

    @classmethod
    def build(cls, page: int, limit: int, total_items: int) -> "PaginationMeta":
        total_pages = max(1, -(-total_items // limit))
        return cls(
            page=page,
            limit=limit,
            total_items=total_items,
            total_pages=total_pages,
            has_next_page=page < total_pages,
            has_prev_page=page > 1,
        )

    def to_response(self) -> dict:
        return self.model_dump(by_alias=True)

async def paginate(
    db: AsyncSession,
    query: Select,
    params: PaginationParams,
    count_query: Optional[Select] = None,
) -> tuple:
    """
    Paginate query results

    Args:
        db: Database session
        query: SQLAlchemy query, already ordered
        params: Page and limit
        count_query: Optional cheaper count statement

    Returns:
        (items, PaginationMeta)
    """
    if count_query is None:
        count_query = select(func.count()).select_from(query.order_by(None).subquery())
    total = await db.scalar(count_query) or 0

    result = await db.execute(query.offset(params.offset).limit(params.limit))
    items = list(result.scalars().all())

    return items, PaginationMeta.build(params.page, params.limit, total)
