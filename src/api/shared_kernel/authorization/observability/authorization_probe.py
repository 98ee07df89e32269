"""Domain probe for authorization operations.

Following Domain-Oriented Observability patterns, this probe captures
domain-significant events related to permission evaluation.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class AuthorizationProbe(Protocol):
    """Domain probe for authorization operations."""

    def permission_granted(self, permission: str) -> None:
        """Record that a permission check succeeded."""
        ...

    def permission_missing(self, permission: str) -> None:
        """Record that the context lacks a permission."""
        ...

    def tenant_required(self, permission: str) -> None:
        """Record that a tenant-scoped permission was evaluated without a tenant."""
        ...

    def with_context(self, context: ObservationContext) -> AuthorizationProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultAuthorizationProbe:
    """Default implementation of AuthorizationProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultAuthorizationProbe:
        """Create a new probe with observation context bound."""
        return DefaultAuthorizationProbe(logger=self._logger, context=context)

    def permission_granted(self, permission: str) -> None:
        """Record that a permission check succeeded."""
        self._logger.debug(
            "authorization_permission_granted",
            permission=permission,
            **self._get_context_kwargs(),
        )

    def permission_missing(self, permission: str) -> None:
        """Record that the context lacks a permission."""
        self._logger.warning(
            "authorization_permission_missing",
            permission=permission,
            **self._get_context_kwargs(),
        )

    def tenant_required(self, permission: str) -> None:
        """Record that a tenant-scoped permission was evaluated without a tenant."""
        self._logger.warning(
            "authorization_tenant_required",
            permission=permission,
            **self._get_context_kwargs(),
        )
