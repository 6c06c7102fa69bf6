"""
Generic CRUD operations driven by a Resource descriptor
"""

from sqlalchemy import and_, func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple
import logging

from zelvix.core.exceptions import (
    BadRequestException,
    ConflictException,
    DuplicateResourceException,
    InvalidIdException,
    NotFoundException,
    ParentNotFoundException,
)
from zelvix.core.resource import ListFilter, Resource
from zelvix.utils.pagination import PaginationMeta, PaginationParams, paginate
from zelvix.utils.validators import normalize_text, parse_bool, parse_positive_int

logger = logging.getLogger(__name__)

class CRUDService:
    """Applies the shared create/read/update/delete rules to one resource"""

    def __init__(self, db: AsyncSession, resource: Resource):
        self.db = db
        self.resource = resource
        self.model = resource.model

    # Lookups

    def parse_id(self, value: Any) -> int:
        record_id = parse_positive_int(value)
        if record_id is None:
            raise InvalidIdException(self.resource.label)
        return record_id

    def _base_query(self):
        query = select(self.model)
        if self.resource.base_filters:
            query = query.where(*self.resource.base_filters)
        return query

    async def get(self, record_id: int):
        result = await self.db.execute(self._base_query().where(self.model.id == record_id))
        record = result.scalar_one_or_none()
        if record is None:
            raise NotFoundException(self.resource.message("not_found"))
        return record

    async def get_by(self, column: str, value: Any):
        """Fetch by one of the resource's alternative lookup columns"""
        if column not in self.resource.lookup_fields:
            raise BadRequestException(f"Cannot look up {self.resource.label.lower()} by {column}")

        parsed = parse_positive_int(value) if column.endswith("_id") else normalize_text(value)
        if not parsed:
            raise BadRequestException(f"Valid {column} is required")

        result = await self.db.execute(
            self._base_query().where(getattr(self.model, column) == parsed)
        )
        record = result.scalar_one_or_none()
        if record is None:
            raise NotFoundException(self.resource.message("not_found"))
        return record

    async def resolve(self, record_id: Any = None, lookups: Optional[Mapping[str, Any]] = None):
        """Record addressed by id, or by the first lookup field present"""
        if record_id not in (None, ""):
            return await self.get(self.parse_id(record_id))

        for column in self.resource.lookup_fields:
            value = (lookups or {}).get(column)
            if value not in (None, ""):
                return await self.get_by(column, value)

        raise InvalidIdException(self.resource.label)

    async def list(self, params: PaginationParams, query_params: Mapping[str, Any]) -> Tuple[List[Any], PaginationMeta]:
        conditions = []
        for list_filter in self.resource.filters:
            condition = self._filter_condition(list_filter, query_params.get(list_filter.param))
            if condition is not None:
                conditions.append(condition)

        query = self._base_query()
        if conditions:
            query = query.where(and_(*conditions))
        query = query.order_by(*self.resource.ordering, self.model.created_at.desc(), self.model.id.desc())

        return await paginate(self.db, query, params)

    def _filter_condition(self, list_filter: ListFilter, raw: Any):
        if raw is None:
            return None

        column = getattr(self.model, list_filter.column)
        if list_filter.kind == "int":
            value = parse_positive_int(raw)
            return column == value if value is not None else None
        if list_filter.kind == "bool":
            value = parse_bool(raw)
            return column == value if value is not None else None
        if list_filter.kind == "choice":
            value = normalize_text(raw).lower()
            return column == value if value in list_filter.choices else None

        value = normalize_text(raw)
        if not value:
            return None
        if list_filter.kind == "search":
            return column.icontains(value, autoescape=True)
        return column == value

    # Rule checks

    def _run_checks(self, values: Dict[str, Any]) -> None:
        for check in self.resource.checks:
            error = check(values)
            if error:
                raise BadRequestException(error)

    async def _check_parents(self, values: Dict[str, Any], changed: Iterable[str]) -> None:
        changed = set(changed)
        for rule in self.resource.parents:
            match_changed = rule.match is not None and rule.match[0] in changed
            if rule.field not in changed and not match_changed:
                continue

            parent_id = values.get(rule.field)
            if parent_id is None:
                continue

            parent = await self.db.get(rule.model, parent_id)
            if parent is None:
                raise ParentNotFoundException(rule.label)

            if rule.match is not None:
                field_name, parent_column = rule.match
                if values.get(field_name) != getattr(parent, parent_column):
                    raise BadRequestException(rule.match_message)

    async def _check_unique(self, values: Dict[str, Any], changed: Iterable[str], exclude_id: Optional[int] = None) -> None:
        changed = set(changed)
        for rule in self.resource.unique:
            if not changed.intersection(rule.fields):
                continue
            if any(values.get(name) is None for name in rule.fields):
                continue

            conditions = []
            for name in rule.fields:
                column = getattr(self.model, name)
                value = values[name]
                if rule.case_insensitive and isinstance(value, str):
                    conditions.append(func.lower(column) == value.lower())
                else:
                    conditions.append(column == value)
            if exclude_id is not None:
                conditions.append(self.model.id != exclude_id)

            existing = await self.db.scalar(select(self.model.id).where(and_(*conditions)).limit(1))
            if existing is not None:
                raise DuplicateResourceException(rule.message)

    def _check_required(self, changes: Dict[str, Any]) -> None:
        columns = self.model.__table__.columns
        for name, value in changes.items():
            if value is None and name in columns and not columns[name].nullable:
                raise BadRequestException(f"{name} cannot be empty")

    # Writes

    async def create(self, payload) -> Any:
        values = payload.model_dump()
        self._run_checks(values)
        await self._check_parents(values, values.keys())
        await self._check_unique(values, values.keys())

        if self.resource.prepare is not None:
            values = self.resource.prepare(dict(values))

        record = self.model(**values)
        self.db.add(record)
        await self._flush()
        await self.db.refresh(record)

        if self.resource.after_write is not None:
            await self.resource.after_write(self.db, record)

        logger.info(f"{self.resource.label} created: id={record.id}")
        return record

    async def update(self, record, payload) -> Any:
        changes = payload.present_fields()
        if not changes:
            raise BadRequestException("At least one field is required to update")

        self._check_required(changes)
        merged = {column.name: getattr(record, column.name) for column in self.model.__table__.columns}
        merged.update(changes)

        self._run_checks(merged)
        await self._check_parents(merged, changes.keys())
        await self._check_unique(merged, changes.keys(), exclude_id=record.id)

        if self.resource.prepare is not None:
            changes = self.resource.prepare(dict(changes))

        record.update_from_dict(changes)
        await self._flush()
        await self.db.refresh(record)

        if self.resource.after_write is not None:
            await self.resource.after_write(self.db, record)

        logger.info(f"{self.resource.label} updated: id={record.id} fields={sorted(changes)}")
        return record

    async def delete(self, record) -> None:
        record_id = record.id
        await self.db.delete(record)
        await self._flush(conflict_message=self.resource.message("in_use"))
        logger.info(f"{self.resource.label} deleted: id={record_id}")

    async def _flush(self, conflict_message: Optional[str] = None) -> None:
        try:
            await self.db.flush()
        except IntegrityError as e:
            logger.warning(f"{self.resource.label} write rejected by database: {e.orig}")
            raise ConflictException(conflict_message or f"{self.resource.label} conflicts with an existing record")

    def serialize(self, record) -> Dict[str, Any]:
        return record.to_dict(exclude=self.resource.hidden, only=self.resource.visible)
