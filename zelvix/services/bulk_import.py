"""
Spreadsheet import for reference data

Rows are matched to canonical fields through header synonyms, validated one by
one, checked against their parent table in a single query, then upserted by
natural key. Invalid rows are reported, never fatal, as long as one row survives.
"""

from dataclasses import dataclass, field
from sqlalchemy import and_, func, select
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Any, Awaitable, Callable, Dict, List, Optional, Sequence, Tuple, Type
import io
import logging

import pandas as pd

from zelvix.core.config import settings
from zelvix.core.exceptions import BadRequestException
from zelvix.utils.validators import normalize_header, normalize_text, parse_positive_int, parse_status

logger = logging.getLogger(__name__)

@dataclass(frozen=True)
class ImportField:
    """
    Canonical field and the header names accepted for it

    kind is text, parent (positive id) or status (active/inactive, defaults to active)
    """

    name: str
    synonyms: Tuple[str, ...]
    kind: str = "text"
    required: bool = True
    transform: Optional[Callable[[str], str]] = None

@dataclass
class ImportSpec:
    label: str
    model: Type[Any]
    fields: Sequence[ImportField]
    natural_key: Tuple[str, ...]
    update_fields: Tuple[str, ...]
    parent_field: Optional[str] = None
    parent_model: Optional[Type[Any]] = None
    # Extra per-row rule run before the upsert; returns an error or None
    validate_row: Optional[Callable[[AsyncSession, Dict[str, Any], Any], Awaitable[Optional[str]]]] = None
    case_insensitive_key: Tuple[str, ...] = field(default_factory=tuple)

def read_first_sheet(content: bytes) -> List[Tuple[int, Dict[str, Any]]]:
    """
    Data rows of the first worksheet as (sheet row number, {header: value})

    Row numbers count the header as row 1, so the first data row is row 2.
    """
    try:
        sheets = pd.read_excel(io.BytesIO(content), sheet_name=None, dtype=object)
    except Exception as e:
        logger.warning(f"Unreadable spreadsheet upload: {e}")
        raise BadRequestException("Invalid Excel file")

    if not sheets:
        raise BadRequestException("Excel file does not contain any sheet")

    frame = next(iter(sheets.values()))
    frame = frame.dropna(how="all")
    if frame.empty:
        raise BadRequestException("Excel sheet is empty")

    frame = frame.astype(object).where(pd.notna(frame), None)
    return [(int(idx) + 2, row) for idx, row in zip(frame.index, frame.to_dict(orient="records"))]

def match_columns(headers, fields: Sequence[ImportField]) -> Dict[str, Any]:
    """Map each canonical field to the first sheet header that is one of its synonyms"""
    normalized = {}
    for header in headers:
        normalized.setdefault(normalize_header(header), header)

    columns = {}
    for import_field in fields:
        for synonym in import_field.synonyms:
            key = normalize_header(synonym)
            if key in normalized:
                columns[import_field.name] = normalized[key]
                break
    return columns

def parse_row(row_number: int, row: Dict[str, Any], columns: Dict[str, Any], fields: Sequence[ImportField]):
    """Canonical values for one row, or an error message"""
    values = {}
    for import_field in fields:
        header = columns.get(import_field.name)
        raw = row.get(header) if header is not None else None

        if import_field.kind == "parent":
            value = parse_positive_int(raw)
            if value is None:
                return None, f"Row {row_number}: valid {import_field.name} is required"
        elif import_field.kind == "status":
            value = parse_status(raw, default="active")
        else:
            value = normalize_text(raw) or None
            if value and import_field.transform:
                value = import_field.transform(value)
            if import_field.required and not value:
                return None, f"Row {row_number}: {import_field.name} is required"

        values[import_field.name] = value
    return values, None

class BulkImportService:
    """Runs one spreadsheet import for an ImportSpec"""

    def __init__(self, db: AsyncSession, spec: ImportSpec):
        self.db = db
        self.spec = spec

    async def import_file(self, filename: Optional[str], content: Optional[bytes]) -> Dict[str, Any]:
        if not filename or content is None:
            raise BadRequestException("Excel file is required")
        if len(content) > settings.MAX_IMPORT_SIZE:
            raise BadRequestException("File size must be 10MB or less")

        rows = read_first_sheet(content)
        return await self.import_rows(rows)

    async def import_rows(self, rows: List[Tuple[int, Dict[str, Any]]]) -> Dict[str, Any]:
        spec = self.spec
        headers = list(rows[0][1].keys()) if rows else []
        columns = match_columns(headers, spec.fields)

        errors: List[Tuple[int, str]] = []
        candidates = []
        for row_number, row in rows:
            values, error = parse_row(row_number, row, columns, spec.fields)
            if error:
                errors.append((row_number, error))
            else:
                candidates.append((row_number, values))

        if not candidates:
            raise BadRequestException("No valid rows found", extra={"errors": _messages(errors)})

        valid = await self._with_existing_parents(candidates, errors)
        if not valid:
            raise BadRequestException(
                "No rows imported because all rows are invalid",
                extra={"errors": _messages(errors)},
            )

        created = 0
        updated = 0
        for row_number, values in valid:
            existing = await self._find_existing(values)

            if spec.validate_row is not None:
                error = await spec.validate_row(self.db, values, existing)
                if error:
                    errors.append((row_number, f"Row {row_number}: {error}"))
                    continue

            if existing is not None:
                for name in spec.update_fields:
                    setattr(existing, name, values[name])
                updated += 1
            else:
                self.db.add(spec.model(**values))
                created += 1

            # Later rows with the same natural key must see this one
            await self.db.flush()

        logger.info(
            f"{spec.label} import finished: rows={len(rows)} created={created} "
            f"updated={updated} failed={len(errors)}"
        )
        return {
            "message": f"{spec.label} excel imported successfully",
            "data": {
                "totalRows": len(rows),
                "validRows": len(valid),
                "created": created,
                "updated": updated,
                "failedRows": len(errors),
            },
            "errors": _messages(errors),
        }

    async def _with_existing_parents(self, candidates, errors):
        spec = self.spec
        if spec.parent_field is None:
            return candidates

        parent_ids = {values[spec.parent_field] for _, values in candidates}
        result = await self.db.execute(
            select(spec.parent_model.id).where(spec.parent_model.id.in_(parent_ids))
        )
        found = set(result.scalars().all())

        valid = []
        for row_number, values in candidates:
            parent_id = values[spec.parent_field]
            if parent_id not in found:
                errors.append((row_number, f"Row {row_number}: {spec.parent_field} {parent_id} not found"))
            else:
                valid.append((row_number, values))
        return valid

    async def _find_existing(self, values: Dict[str, Any]):
        model = self.spec.model
        conditions = []
        for name in self.spec.natural_key:
            column = getattr(model, name)
            if name in self.spec.case_insensitive_key:
                conditions.append(func.lower(column) == values[name].lower())
            else:
                conditions.append(column == values[name])

        result = await self.db.execute(select(model).where(and_(*conditions)).limit(1))
        return result.scalar_one_or_none()

def _messages(errors: List[Tuple[int, str]]) -> List[str]:
    return [message for _, message in sorted(errors, key=lambda item: item[0])]
