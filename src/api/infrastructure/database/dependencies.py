"""Database engines and contextualized session factories per role.

Engines are created lazily, once per database role, and shared by every
session factory of that role.
"""

from __future__ import annotations

import threading

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from infrastructure.database.contextualized import ContextualizedSessionFactory
from infrastructure.database.engines import create_engine
from infrastructure.observability import DefaultConnectionProbe
from infrastructure.settings import DatabaseRole, get_database_settings

# Module-level probe for observability
_probe = DefaultConnectionProbe()

# Module-level engine and sessionmaker instances (created on first use)
_engines: dict[DatabaseRole, AsyncEngine] = {}
_sessionmakers: dict[DatabaseRole, async_sessionmaker[AsyncSession]] = {}

# Thread lock for safe engine initialization
_engine_lock = threading.Lock()


def get_engine(role: DatabaseRole = DatabaseRole.APPLICATION) -> AsyncEngine:
    """Get the database engine of a role (singleton per role).

    Creates engine on first call and caches for subsequent calls.
    Uses double-check locking for thread-safe initialization.
    Also creates and caches the sessionmaker for efficient session creation.

    Args:
        role: Database role the pool authenticates as

    Returns:
        Configured async engine

    Raises:
        MissingRoleCredentialsError: If the role is not configured
    """
    engine = _engines.get(role)
    if engine is None:
        with _engine_lock:
            # Double-check after acquiring lock
            engine = _engines.get(role)
            if engine is None:
                settings = get_database_settings()
                engine = create_engine(settings, role)
                _engines[role] = engine
                _sessionmakers[role] = async_sessionmaker(
                    engine,
                    expire_on_commit=False,
                    class_=AsyncSession,
                )
                _probe.pool_initialized(
                    role=str(role),
                    min_conn=settings.pool_min_connections,
                    max_conn=settings.pool_max_connections,
                )
    return engine


def get_session_factory(
    role: DatabaseRole = DatabaseRole.APPLICATION,
) -> ContextualizedSessionFactory:
    """Get a contextualized session factory for a role.

    Args:
        role: Database role the pool authenticates as

    Returns:
        Factory handing out sessions bound to the role's pool
    """
    get_engine(role)
    return ContextualizedSessionFactory(_sessionmakers[role])


async def close_database_connections() -> None:
    """Close all database engine connections.

    Should be called on application shutdown to properly cleanup connections.
    Also resets sessionmakers to allow reinitialization.
    """
    for role, engine in list(_engines.items()):
        await engine.dispose()
        _probe.pool_closed(role=str(role))
        del _engines[role]
        _sessionmakers.pop(role, None)
