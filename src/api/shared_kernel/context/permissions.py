"""Permissions, roles and the outcome of a permission check.

Permissions are the atomic capabilities checked against an execution
context. Roles are fixed bundles of permissions; the mapping is total and
static.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import StrEnum

from shared_kernel.context.exceptions import UnknownRoleError


class Permission(StrEnum):
    """Atomic capability checked against an execution context."""

    TENANT_CREATE = "TenantCreate"
    TENANT_READ = "TenantRead"
    TENANT_UPDATE = "TenantUpdate"

    AUDIT_META_READ = "AuditMetaRead"

    POLICY_CREATE = "PolicyCreate"
    POLICY_READ = "PolicyRead"
    POLICY_UPDATE = "PolicyUpdate"
    TOKEN_CREATE = "TokenCreate"
    TOKEN_READ = "TokenRead"

    @property
    def is_tenant_required(self) -> bool:
        """Whether this permission can only be granted within a tenant.

        Tenant management permissions are tenant-agnostic; every other
        permission requires a tenant.
        """
        return self not in _TENANT_AGNOSTIC


_TENANT_AGNOSTIC: frozenset[Permission] = frozenset(
    {
        Permission.TENANT_CREATE,
        Permission.TENANT_READ,
        Permission.TENANT_UPDATE,
    }
)


class Role(StrEnum):
    """Named, fixed bundle of permissions."""

    ROOT = "root"
    AGENT = "agent"

    @classmethod
    def parse(cls, value: str) -> Role:
        """Parse a role name, ignoring case.

        Raises:
            UnknownRoleError: If the text is not a known role
        """
        if not value.isascii():
            raise UnknownRoleError(value)
        try:
            return cls(value.lower())
        except ValueError as e:
            raise UnknownRoleError(value) from e

    def permissions(self) -> frozenset[Permission]:
        """Return the capability set granted by this role."""
        return _ROLE_PERMISSIONS[self]


_ROLE_PERMISSIONS: dict[Role, frozenset[Permission]] = {
    Role.ROOT: frozenset(
        {
            Permission.TENANT_CREATE,
            Permission.TENANT_READ,
            Permission.TENANT_UPDATE,
        }
    ),
    Role.AGENT: frozenset(
        {
            Permission.AUDIT_META_READ,
            Permission.POLICY_CREATE,
            Permission.POLICY_READ,
            Permission.POLICY_UPDATE,
            Permission.TOKEN_CREATE,
            Permission.TOKEN_READ,
        }
    ),
}


def permissions_for_roles(roles: Iterable[Role]) -> frozenset[Permission]:
    """Union the permission sets of several roles."""
    granted: set[Permission] = set()
    for role in roles:
        granted |= role.permissions()
    return frozenset(granted)


class PermissionControlState(StrEnum):
    """Outcome of evaluating a permission against an execution context.

    Not an exception: callers branch on it before proceeding.
    """

    AUTHORIZED = "Authorized"
    MISSING = "Missing"
    TENANT_REQUIRED = "TenantRequired"
