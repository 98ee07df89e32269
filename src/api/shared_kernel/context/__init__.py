"""Identity and permission model.

Defines who is calling (Caller), for which tenant (TenantId), with which
capabilities (Permission, Role), and the ExecutionContext that answers
"is this operation authorized".
"""

from shared_kernel.context.exceptions import (
    InvalidTenantIdError,
    UnknownCallerTypeError,
    UnknownRoleError,
    UnrecognizedValueError,
)
from shared_kernel.context.execution_context import ExecutionContext
from shared_kernel.context.permissions import (
    Permission,
    PermissionControlState,
    Role,
    permissions_for_roles,
)
from shared_kernel.context.value_objects import Caller, CallerType, TenantId

__all__ = [
    "Caller",
    "CallerType",
    "ExecutionContext",
    "InvalidTenantIdError",
    "Permission",
    "PermissionControlState",
    "Role",
    "TenantId",
    "UnknownCallerTypeError",
    "UnknownRoleError",
    "UnrecognizedValueError",
    "permissions_for_roles",
]
