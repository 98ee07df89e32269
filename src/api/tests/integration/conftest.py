"""Integration test fixtures for database tests.

These fixtures require a running PostgreSQL instance. Use docker-compose
for testing, or point the TOKEND_DB_* variables at a disposable database.
"""

from __future__ import annotations

from collections.abc import AsyncGenerator
import os

import pytest
import pytest_asyncio
from pydantic import SecretStr
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from iam.infrastructure.models import TenantModel
from infrastructure.database.contextualized import ContextualizedSessionFactory
from infrastructure.database.engines import create_engine
from infrastructure.database.models import Base
from infrastructure.settings import (
    DatabaseCredentials,
    DatabaseRole,
    DatabaseSettings,
)
from shared_kernel.context import Caller, CallerType, ExecutionContext, Role


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: mark test as integration test (requires database)",
    )


@pytest.fixture(scope="session")
def integration_db_settings() -> DatabaseSettings:
    """Database settings for integration tests.

    A single pooled connection makes successive acquisitions reuse the same
    server session.

    Override with environment variables:
        TOKEND_DB_HOST, TOKEND_DB_PORT, TOKEND_DB_DATABASE,
        TOKEND_DB_USERNAME, TOKEND_DB_PASSWORD
    """
    return DatabaseSettings(
        host=os.getenv("TOKEND_DB_HOST", "localhost"),
        port=int(os.getenv("TOKEND_DB_PORT", "5432")),
        database=os.getenv("TOKEND_DB_DATABASE", "tokend"),
        pool_min_connections=1,
        pool_max_connections=1,
        roles={
            DatabaseRole.APPLICATION: DatabaseCredentials(
                username=os.getenv("TOKEND_DB_USERNAME", "tokend"),
                password=SecretStr(
                    os.getenv("TOKEND_DB_PASSWORD", "tokend_dev_password")
                ),
            )
        },
    )


@pytest_asyncio.fixture
async def engine(
    integration_db_settings: DatabaseSettings,
) -> AsyncGenerator[AsyncEngine, None]:
    """Provide an engine with the schema created."""
    engine = create_engine(integration_db_settings, DatabaseRole.APPLICATION)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine: AsyncEngine) -> ContextualizedSessionFactory:
    """Provide a contextualized session factory bound to the test engine."""
    return ContextualizedSessionFactory(
        async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)
    )


@pytest_asyncio.fixture
async def clean_tenants(engine: AsyncEngine) -> AsyncGenerator[None, None]:
    """Empty the tenants table before and after each test."""
    statement = text(
        f"TRUNCATE TABLE {TenantModel.__tablename__} RESTART IDENTITY CASCADE"
    )

    async with engine.begin() as conn:
        await conn.execute(statement)

    yield

    async with engine.begin() as conn:
        await conn.execute(statement)


@pytest.fixture
def root_context() -> ExecutionContext:
    """Context holding the tenant management permissions, without tenant."""
    return ExecutionContext.for_roles(
        Caller(caller_id="alice", caller_type=CallerType.USER), [Role.ROOT]
    )
