"""Unit tests for the authorize guard."""

from unittest.mock import Mock

import pytest

from shared_kernel.authorization import AuthorizationProbe, authorize
from shared_kernel.context import Permission
from shared_kernel.errors import ErrorCode, TenantRequiredError, UnauthorizedError


@pytest.fixture
def mock_probe():
    return Mock(spec=AuthorizationProbe)


class TestAuthorize:
    """Tests for authorize()."""

    def test_authorized_returns_silently(self, agent_context, mock_probe):
        """An authorized permission raises nothing and is recorded."""
        authorize(agent_context, Permission.TOKEN_CREATE, mock_probe)

        mock_probe.permission_granted.assert_called_once_with(
            permission="TokenCreate"
        )

    def test_missing_permission_raises_unauthorized(self, agent_context, mock_probe):
        """A missing permission raises UnauthorizedError carrying it."""
        with pytest.raises(UnauthorizedError) as exc_info:
            authorize(agent_context, Permission.TENANT_CREATE, mock_probe)

        assert exc_info.value.permission is Permission.TENANT_CREATE
        assert exc_info.value.code is ErrorCode.UNAUTHORIZED
        mock_probe.permission_missing.assert_called_once_with(
            permission="TenantCreate"
        )

    def test_tenant_required_raises(self, root_context, mock_probe):
        """A tenant-scoped permission without tenant raises TenantRequiredError."""
        with pytest.raises(TenantRequiredError) as exc_info:
            authorize(root_context, Permission.TOKEN_CREATE, mock_probe)

        assert exc_info.value.permission is Permission.TOKEN_CREATE
        assert exc_info.value.code is ErrorCode.FORBIDDEN
        mock_probe.tenant_required.assert_called_once_with(permission="TokenCreate")
        mock_probe.permission_missing.assert_not_called()

    def test_works_without_probe(self, root_context):
        """The default probe is used when none is given."""
        authorize(root_context, Permission.TENANT_READ)
