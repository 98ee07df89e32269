"""Domain probe for tenant management use cases.

Events are emitted after authorization succeeded, so each one describes an
outcome seen by a caller holding the tenant management permissions.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class TenantServiceProbe(Protocol):
    """Domain probe for tenant management use cases."""

    def tenant_declared(self, tenant_id: int, code: str) -> None:
        """A tenant code was registered and received its identifier."""
        ...

    def tenant_retrieved(self, tenant_id: int) -> None:
        """A tenant lookup by code matched."""
        ...

    def tenant_not_found(self, code: str) -> None:
        """A tenant lookup by code matched nothing."""
        ...

    def tenants_listed(self, count: int, has_next_page: bool) -> None:
        """A page of tenants was served."""
        ...

    def duplicate_tenant_code(self, code: str) -> None:
        """A declaration was refused because the code is taken."""
        ...

    def with_context(self, context: ObservationContext) -> TenantServiceProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultTenantServiceProbe:
    """TenantServiceProbe writing structlog events."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(self, context: ObservationContext) -> DefaultTenantServiceProbe:
        return DefaultTenantServiceProbe(logger=self._logger, context=context)

    def tenant_declared(self, tenant_id: int, code: str) -> None:
        self._logger.info(
            "tenant_declared",
            tenant_id=tenant_id,
            code=code,
            **self._get_context_kwargs(),
        )

    def tenant_retrieved(self, tenant_id: int) -> None:
        self._logger.debug(
            "tenant_retrieved",
            tenant_id=tenant_id,
            **self._get_context_kwargs(),
        )

    def tenant_not_found(self, code: str) -> None:
        self._logger.debug(
            "tenant_not_found",
            code=code,
            **self._get_context_kwargs(),
        )

    def tenants_listed(self, count: int, has_next_page: bool) -> None:
        self._logger.debug(
            "tenants_listed",
            count=count,
            has_next_page=has_next_page,
            **self._get_context_kwargs(),
        )

    def duplicate_tenant_code(self, code: str) -> None:
        # Client error; storage itself is healthy
        self._logger.warning(
            "duplicate_tenant_code",
            code=code,
            **self._get_context_kwargs(),
        )
