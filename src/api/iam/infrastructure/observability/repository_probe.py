"""Domain probe for tenant repository operations.

Following Domain-Oriented Observability patterns, this probe captures
domain-significant events related to tenant persistence.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class TenantRepositoryProbe(Protocol):
    """Domain probe for tenant repository operations."""

    def tenant_declared(self, tenant_id: int, code: str) -> None:
        """Record that a tenant was stored."""
        ...

    def tenant_retrieved(self, tenant_id: int) -> None:
        """Record that a tenant was retrieved."""
        ...

    def tenant_not_found(self, code: str) -> None:
        """Record that no tenant matches a code."""
        ...

    def tenants_listed(self, count: int, has_next_page: bool) -> None:
        """Record that a page of tenants was listed."""
        ...

    def duplicate_tenant_code(self, code: str) -> None:
        """Record that a duplicate tenant code was rejected."""
        ...

    def storage_failed(self, operation: str, error: str) -> None:
        """Record a storage fault wrapped into a RepositoryError."""
        ...

    def with_context(self, context: ObservationContext) -> TenantRepositoryProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultTenantRepositoryProbe:
    """Default implementation of TenantRepositoryProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultTenantRepositoryProbe:
        """Create a new probe with observation context bound."""
        return DefaultTenantRepositoryProbe(logger=self._logger, context=context)

    def tenant_declared(self, tenant_id: int, code: str) -> None:
        """Record that a tenant was stored."""
        self._logger.info(
            "tenant_declared",
            tenant_id=tenant_id,
            code=code,
            **self._get_context_kwargs(),
        )

    def tenant_retrieved(self, tenant_id: int) -> None:
        """Record that a tenant was retrieved."""
        self._logger.debug(
            "tenant_retrieved",
            tenant_id=tenant_id,
            **self._get_context_kwargs(),
        )

    def tenant_not_found(self, code: str) -> None:
        """Record that no tenant matches a code."""
        self._logger.debug(
            "tenant_not_found",
            code=code,
            **self._get_context_kwargs(),
        )

    def tenants_listed(self, count: int, has_next_page: bool) -> None:
        """Record that a page of tenants was listed."""
        self._logger.debug(
            "tenants_listed",
            count=count,
            has_next_page=has_next_page,
            **self._get_context_kwargs(),
        )

    def duplicate_tenant_code(self, code: str) -> None:
        """Record that a duplicate tenant code was rejected."""
        self._logger.warning(
            "duplicate_tenant_code",
            code=code,
            **self._get_context_kwargs(),
        )

    def storage_failed(self, operation: str, error: str) -> None:
        """Record a storage fault wrapped into a RepositoryError."""
        self._logger.error(
            "tenant_storage_failed",
            operation=operation,
            error=error,
            **self._get_context_kwargs(),
        )
