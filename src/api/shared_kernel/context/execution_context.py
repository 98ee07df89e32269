"""Execution context: the authorization envelope of a single operation."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from shared_kernel.context.permissions import (
    Permission,
    PermissionControlState,
    Role,
    permissions_for_roles,
)
from shared_kernel.context.value_objects import Caller, TenantId


@dataclass(frozen=True)
class ExecutionContext:
    """Validated (caller, tenant, permission set) triple.

    Built per request or operation and discarded after use. The permission
    set is fixed at construction.

    Attributes:
        caller: Identity making the call
        tenant: Tenant the operation is scoped to, if any
        permissions: Granted permissions
    """

    caller: Caller
    tenant: TenantId | None = None
    permissions: frozenset[Permission] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        # Freeze whatever iterable was handed in
        object.__setattr__(self, "permissions", frozenset(self.permissions))

    @classmethod
    def for_roles(
        cls,
        caller: Caller,
        roles: Iterable[Role],
        tenant: TenantId | None = None,
    ) -> ExecutionContext:
        """Build a context whose permissions are the union of the given roles."""
        return cls(
            caller=caller,
            tenant=tenant,
            permissions=permissions_for_roles(roles),
        )

    def has_permission(self, permission: Permission) -> PermissionControlState:
        """Evaluate a permission against this context.

        A tenant-scoped permission evaluated without a tenant reports
        TENANT_REQUIRED, whether or not it belongs to the permission set.

        Args:
            permission: The permission to evaluate

        Returns:
            AUTHORIZED, MISSING or TENANT_REQUIRED
        """
        if permission.is_tenant_required and self.tenant is None:
            return PermissionControlState.TENANT_REQUIRED
        if permission in self.permissions:
            return PermissionControlState.AUTHORIZED
        return PermissionControlState.MISSING
