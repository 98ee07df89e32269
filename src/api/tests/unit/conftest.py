"""Unit test fixtures with mocked dependencies."""

import pytest
from pydantic import SecretStr

from shared_kernel.context import Caller, CallerType, ExecutionContext, Role, TenantId


@pytest.fixture
def mock_db_settings():
    """Provide test database settings."""
    from infrastructure.settings import (
        DatabaseCredentials,
        DatabaseRole,
        DatabaseSettings,
    )

    return DatabaseSettings(
        host="testhost",
        port=5432,
        database="testdb",
        roles={
            DatabaseRole.APPLICATION: DatabaseCredentials(
                username="testuser", password=SecretStr("testpass")
            ),
        },
    )


@pytest.fixture
def user_caller() -> Caller:
    """A user caller."""
    return Caller(caller_id="alice", caller_type=CallerType.USER)


@pytest.fixture
def root_context(user_caller: Caller) -> ExecutionContext:
    """Context holding the tenant management permissions, without tenant."""
    return ExecutionContext.for_roles(user_caller, [Role.ROOT])


@pytest.fixture
def agent_context(user_caller: Caller) -> ExecutionContext:
    """Context holding the agent permissions within tenant ``acme``."""
    return ExecutionContext.for_roles(
        user_caller, [Role.AGENT], tenant=TenantId("acme")
    )
