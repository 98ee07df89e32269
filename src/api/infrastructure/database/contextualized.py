"""Storage sessions carrying the caller's execution context.

Before a session is handed out, the caller type, caller id and tenant of
the execution context are written to PostgreSQL configuration variables,
so that row level security policies see the identity the application
validated:

    current_setting('var.tenant_id')

Values are set with ``is_local = true``: they live as long as the
transaction opened at acquisition, which ends before the connection
returns to the pool. A connection never carries a previous caller's
identity.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from enum import StrEnum
from typing import TYPE_CHECKING

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from infrastructure.observability import DefaultSessionProbe, SessionProbe
from shared_kernel.errors import RepositoryError
from shared_kernel.observability_context import ObservationContext

if TYPE_CHECKING:
    from collections.abc import AsyncIterator

    from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

    from shared_kernel.context import ExecutionContext


class SessionVariable(StrEnum):
    """PostgreSQL configuration variables holding the caller identity."""

    CALLER_TYPE = "var.caller_type"
    CALLER_ID = "var.caller_id"
    TENANT_ID = "var.tenant_id"


_SET_CONFIG = text("SELECT set_config(:name, :value, true)")


def session_variables(context: ExecutionContext) -> dict[SessionVariable, str]:
    """Return the session variable values of an execution context.

    An absent tenant is written as an empty string.
    """
    return {
        SessionVariable.CALLER_TYPE: str(context.caller.caller_type),
        SessionVariable.CALLER_ID: context.caller.caller_id,
        SessionVariable.TENANT_ID: str(context.tenant) if context.tenant else "",
    }


class ContextualizedSessionFactory:
    """Hands out pooled sessions with the caller identity already applied.

    Usage:
        async with factory.acquire(context) as session:
            result = await session.execute(select(TenantModel))

    The block runs inside a single transaction, committed when it exits
    normally and rolled back otherwise (including cancellation).
    """

    def __init__(
        self,
        sessionmaker: async_sessionmaker[AsyncSession],
        probe: SessionProbe | None = None,
    ) -> None:
        """Initialize the factory.

        Args:
            sessionmaker: Session factory bound to a pooled engine
            probe: Optional domain probe for observability
        """
        self._sessionmaker = sessionmaker
        self._probe = probe or DefaultSessionProbe()

    @asynccontextmanager
    async def acquire(self, context: ExecutionContext) -> AsyncIterator[AsyncSession]:
        """Acquire a session contextualized for ``context``.

        Raises:
            RepositoryError: If the session cannot be contextualized (no
                session is handed out) or a storage fault escapes the block
        """
        probe = self._probe.with_context(
            ObservationContext.from_execution_context(context)
        )

        async with self._sessionmaker() as session:
            try:
                async with session.begin():
                    await self._contextualize(session, context, probe)
                    yield session
            except (SQLAlchemyError, OSError) as e:
                probe.storage_failed(e)
                raise RepositoryError(f"Storage session failed: {e}") from e
            finally:
                probe.session_released()

    async def _contextualize(
        self,
        session: AsyncSession,
        context: ExecutionContext,
        probe: SessionProbe,
    ) -> None:
        try:
            for name, value in session_variables(context).items():
                await session.execute(
                    _SET_CONFIG, {"name": str(name), "value": value}
                )
        except (SQLAlchemyError, OSError) as e:
            probe.contextualization_failed(e)
            raise RepositoryError(
                f"Unable to contextualize storage session: {e}"
            ) from e
        probe.session_contextualized()
