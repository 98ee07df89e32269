"""Domain probes for infrastructure observability.

Domain probes provide a high-level instrumentation API oriented around
domain semantics, keeping infrastructure code clean and testable.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class ConnectionProbe(Protocol):
    """Domain probe for database pool observability.

    This probe captures domain-significant events related to database
    pools without exposing logging implementation details.
    """

    def pool_initialized(self, role: str, min_conn: int, max_conn: int) -> None:
        """Record that a connection pool was initialized for a role."""
        ...

    def pool_closed(self, role: str) -> None:
        """Record that the connection pool of a role was closed."""
        ...

    def with_context(self, context: ObservationContext) -> ConnectionProbe:
        """Create a new probe with observation context bound."""
        ...


class SessionProbe(Protocol):
    """Domain probe for contextualized storage sessions.

    Records when the caller identity is pushed into a storage session and
    when the session goes back to the pool.
    """

    def session_contextualized(self) -> None:
        """Record that session variables were set for the caller."""
        ...

    def contextualization_failed(self, error: Exception) -> None:
        """Record that session variables could not be set."""
        ...

    def storage_failed(self, error: Exception) -> None:
        """Record a storage fault raised while the session was in use."""
        ...

    def session_released(self) -> None:
        """Record that the session was released to the pool."""
        ...

    def with_context(self, context: ObservationContext) -> SessionProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultConnectionProbe:
    """Default implementation of ConnectionProbe using structlog.

    Supports observation context for including request-scoped metadata
    with all log events.
    """

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        """Get context metadata as kwargs for logging."""
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(self, context: ObservationContext) -> DefaultConnectionProbe:
        """Create a new probe with observation context bound."""
        return DefaultConnectionProbe(logger=self._logger, context=context)

    def pool_initialized(self, role: str, min_conn: int, max_conn: int) -> None:
        """Record that a connection pool was initialized for a role."""
        self._logger.info(
            "connection_pool_initialized",
            role=role,
            min_connections=min_conn,
            max_connections=max_conn,
            **self._get_context_kwargs(),
        )

    def pool_closed(self, role: str) -> None:
        """Record that the connection pool of a role was closed."""
        self._logger.info(
            "connection_pool_closed",
            role=role,
            **self._get_context_kwargs(),
        )


class DefaultSessionProbe:
    """Default implementation of SessionProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        """Get context metadata as kwargs for logging."""
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(self, context: ObservationContext) -> DefaultSessionProbe:
        """Create a new probe with observation context bound."""
        return DefaultSessionProbe(logger=self._logger, context=context)

    def session_contextualized(self) -> None:
        """Record that session variables were set for the caller."""
        self._logger.debug(
            "storage_session_contextualized",
            **self._get_context_kwargs(),
        )

    def contextualization_failed(self, error: Exception) -> None:
        """Record that session variables could not be set."""
        self._logger.error(
            "storage_session_contextualization_failed",
            error=str(error),
            **self._get_context_kwargs(),
        )

    def storage_failed(self, error: Exception) -> None:
        """Record a storage fault raised while the session was in use."""
        self._logger.error(
            "storage_session_failed",
            error=str(error),
            **self._get_context_kwargs(),
        )

    def session_released(self) -> None:
        """Record that the session was released to the pool."""
        self._logger.debug(
            "storage_session_released",
            **self._get_context_kwargs(),
        )
