"""Unit tests for permissions and roles."""

import pytest

from shared_kernel.context import (
    Permission,
    Role,
    UnknownRoleError,
    permissions_for_roles,
)


class TestPermissionTenantRequirement:
    """Tests for Permission.is_tenant_required."""

    @pytest.mark.parametrize(
        "permission",
        [Permission.TENANT_CREATE, Permission.TENANT_READ, Permission.TENANT_UPDATE],
    )
    def test_tenant_management_is_tenant_agnostic(self, permission):
        """Tenant management permissions do not require a tenant."""
        assert permission.is_tenant_required is False

    @pytest.mark.parametrize(
        "permission",
        [
            Permission.AUDIT_META_READ,
            Permission.POLICY_CREATE,
            Permission.POLICY_READ,
            Permission.POLICY_UPDATE,
            Permission.TOKEN_CREATE,
            Permission.TOKEN_READ,
        ],
    )
    def test_other_permissions_require_tenant(self, permission):
        """Every other permission requires a tenant."""
        assert permission.is_tenant_required is True


class TestRolePermissions:
    """Tests for the fixed role to permission mapping."""

    def test_root_grants_tenant_management(self):
        """ROOT grants exactly the tenant management permissions."""
        assert Role.ROOT.permissions() == {
            Permission.TENANT_CREATE,
            Permission.TENANT_READ,
            Permission.TENANT_UPDATE,
        }

    def test_agent_grants_policy_and_token_permissions(self):
        """AGENT grants audit, policy and token permissions."""
        assert Role.AGENT.permissions() == {
            Permission.AUDIT_META_READ,
            Permission.POLICY_CREATE,
            Permission.POLICY_READ,
            Permission.POLICY_UPDATE,
            Permission.TOKEN_CREATE,
            Permission.TOKEN_READ,
        }

    def test_roles_do_not_overlap(self):
        """No permission is granted by both roles."""
        assert not Role.ROOT.permissions() & Role.AGENT.permissions()

    def test_union_of_roles(self):
        """permissions_for_roles unions the role sets."""
        granted = permissions_for_roles([Role.ROOT, Role.AGENT])
        assert granted == set(Permission)

    def test_no_roles_grants_nothing(self):
        """An empty role list grants no permission."""
        assert permissions_for_roles([]) == frozenset()


class TestRoleParsing:
    """Tests for Role.parse."""

    @pytest.mark.parametrize(
        "text,expected",
        [("root", Role.ROOT), ("ROOT", Role.ROOT), ("Agent", Role.AGENT)],
    )
    def test_parses_case_insensitively(self, text, expected):
        """Role names parse regardless of case."""
        assert Role.parse(text) is expected

    def test_unknown_role_carries_text(self):
        """Unknown text should fail with an error naming the text."""
        with pytest.raises(UnknownRoleError) as exc_info:
            Role.parse("admin")

        assert exc_info.value.value == "admin"
        assert "admin" in str(exc_info.value)

    @pytest.mark.parametrize("text", ["r\u043e\u043et", "\u0430gent", "ROO\u0422"])
    def test_rejects_non_ascii_text(self, text):
        """Role names are matched on ASCII text only."""
        with pytest.raises(UnknownRoleError) as exc_info:
            Role.parse(text)

        assert exc_info.value.value == text
