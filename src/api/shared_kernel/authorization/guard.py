"""Turn a permission evaluation into a typed failure.

Use cases call ``authorize`` before doing anything else. The tri-state
result of ``ExecutionContext.has_permission`` is kept intact: this helper
only maps the two negative outcomes to exceptions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from shared_kernel.authorization.observability import (
    AuthorizationProbe,
    DefaultAuthorizationProbe,
)
from shared_kernel.context import Permission, PermissionControlState
from shared_kernel.errors import TenantRequiredError, UnauthorizedError

if TYPE_CHECKING:
    from shared_kernel.context import ExecutionContext


def authorize(
    context: ExecutionContext,
    permission: Permission,
    probe: AuthorizationProbe | None = None,
) -> None:
    """Ensure the context grants a permission.

    Args:
        context: Execution context of the current operation
        permission: Permission required by the operation
        probe: Optional domain probe for observability

    Raises:
        TenantRequiredError: If the permission requires a tenant and the
            context has none
        UnauthorizedError: If the permission is not granted
    """
    probe = probe or DefaultAuthorizationProbe()
    state = context.has_permission(permission)

    if state is PermissionControlState.TENANT_REQUIRED:
        probe.tenant_required(permission=str(permission))
        raise TenantRequiredError(permission)
    if state is PermissionControlState.MISSING:
        probe.permission_missing(permission=str(permission))
        raise UnauthorizedError(permission)

    probe.permission_granted(permission=str(permission))
