"""
Declarative description of an admin resource

A Resource says which model it manages, how payloads are validated, which
natural keys must stay unique, which parent records must exist, and how the
list endpoint filters. The CRUD service and router factory do the rest.
"""

from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, FrozenSet, Optional, Sequence, Tuple, Type

ALL_OPERATIONS = frozenset({"list", "get", "create", "update", "delete"})

@dataclass(frozen=True)
class UniqueRule:
    """Natural key made of one or more columns"""

    fields: Tuple[str, ...]
    message: str
    case_insensitive: bool = True

@dataclass(frozen=True)
class ParentRule:
    """Foreign key whose target must exist before the record is written"""

    field: str
    model: Type[Any]
    label: str
    # (payload field, parent column) that must hold the same value
    match: Optional[Tuple[str, str]] = None
    match_message: str = ""

@dataclass(frozen=True)
class ListFilter:
    """
    Query string filter for the list endpoint

    kind is one of: int, bool, choice, text, search
    """

    param: str
    column: str
    kind: str = "text"
    choices: Tuple[str, ...] = ()

@dataclass
class Resource:
    label: str
    plural: str
    model: Type[Any]
    create_schema: Optional[Type[Any]] = None
    update_schema: Optional[Type[Any]] = None
    unique: Sequence[UniqueRule] = ()
    parents: Sequence[ParentRule] = ()
    filters: Sequence[ListFilter] = ()
    # SQL expressions every query on this resource is restricted by
    base_filters: Sequence[Any] = ()
    # Cross-field rules over the merged record; return an error message or None
    checks: Sequence[Callable[[Dict[str, Any]], Optional[str]]] = ()
    prepare: Optional[Callable[[Dict[str, Any]], Dict[str, Any]]] = None
    after_write: Optional[Callable[[Any, Any], Awaitable[None]]] = None
    hidden: Sequence[str] = ()
    visible: Optional[Sequence[str]] = None
    ordering: Sequence[Any] = ()
    operations: FrozenSet[str] = ALL_OPERATIONS
    # Unique columns that may stand in for the id on get/update/delete
    lookup_fields: Sequence[str] = ()
    # Extra body keys accepted as the record id
    id_aliases: Sequence[str] = ()
    messages: Dict[str, str] = field(default_factory=dict)

    def supports(self, operation: str) -> bool:
        return operation in self.operations

    def message(self, key: str) -> str:
        """Response message for an outcome, overridable per resource"""
        if key in self.messages:
            return self.messages[key]
        defaults = {
            "listed": f"{self.plural} fetched successfully",
            "fetched": f"{self.label} fetched successfully",
            "created": f"{self.label} created successfully",
            "updated": f"{self.label} updated successfully",
            "deleted": f"{self.label} deleted successfully",
            "not_found": f"{self.label} not found",
            "in_use": f"{self.label} is still referenced by other records",
        }
        return defaults[key]
