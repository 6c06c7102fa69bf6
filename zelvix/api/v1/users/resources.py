"""
Resource definitions for customer and staff accounts

All four views share the users table and differ only by the role and
status every query is pinned to.
"""

from typing import Any, Dict

from zelvix.core.resource import ListFilter, Resource, UniqueRule
from zelvix.core.security import SecurityUtils
from zelvix.models.user import STAFF_ROLES, User, UserRole, UserStatus
from .schemas import AccountStatusUpdate, CustomerUpdate, StaffCreate, StaffUpdate, USER_STATUSES

ACCOUNT_FIELDS = ("id", "name", "email", "role", "status", "created_at", "updated_at")
EMAIL_IN_USE = UniqueRule(("email",), "Email is already in use")
STATUS_FILTER = ListFilter("status", "status", "choice", USER_STATUSES)
EMAIL_SEARCH = ListFilter("search", "email", "search")

def hash_password_field(values: Dict[str, Any]) -> Dict[str, Any]:
    """Replace a plain password with its bcrypt hash"""
    password = values.pop("password", None)
    if password:
        values["password_hash"] = SecurityUtils.hash_password(password)
    return values

customer_resource = Resource(
    label="Customer",
    plural="Customer list",
    model=User,
    update_schema=CustomerUpdate,
    base_filters=(User.role == UserRole.USER.value,),
    unique=(EMAIL_IN_USE,),
    visible=ACCOUNT_FIELDS,
    operations=frozenset({"list", "get", "update", "delete"}),
    id_aliases=("userId",),
    filters=(STATUS_FILTER, EMAIL_SEARCH),
    messages={"not_found": "User not found"},
)

pending_customer_resource = Resource(
    label="Pending customer",
    plural="Pending customer list",
    model=User,
    update_schema=CustomerUpdate,
    base_filters=(
        User.role == UserRole.USER.value,
        User.status == UserStatus.NOT_BLOCK.value,
    ),
    unique=(EMAIL_IN_USE,),
    visible=ACCOUNT_FIELDS,
    operations=frozenset({"list", "get", "update", "delete"}),
    id_aliases=("userId",),
    filters=(EMAIL_SEARCH,),
)

blocked_customer_resource = Resource(
    label="Blocked customer",
    plural="Blocked customer list",
    model=User,
    update_schema=AccountStatusUpdate,
    base_filters=(
        User.role == UserRole.USER.value,
        User.status == UserStatus.BLOCK.value,
    ),
    visible=ACCOUNT_FIELDS,
    operations=frozenset({"list", "get", "update"}),
    id_aliases=("userId",),
    filters=(EMAIL_SEARCH,),
    messages={
        "updated": "Customer status updated successfully",
        "not_found": "User not found",
    },
)

staff_resource = Resource(
    label="User",
    plural="User role list",
    model=User,
    create_schema=StaffCreate,
    update_schema=StaffUpdate,
    base_filters=(User.role.in_(STAFF_ROLES),),
    unique=(UniqueRule(("email",), "User already exists with this email"),),
    prepare=hash_password_field,
    visible=ACCOUNT_FIELDS,
    id_aliases=("userId",),
    filters=(
        ListFilter("role", "role", "choice", STAFF_ROLES),
        STATUS_FILTER,
        EMAIL_SEARCH,
    ),
)
