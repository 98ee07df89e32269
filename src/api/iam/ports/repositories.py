"""Repository protocols (ports) for IAM bounded context.

Repositories receive the caller's execution context with every call and
propagate it to the storage session. They do not check permissions: that
is the job of the application services.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from iam.domain.aggregates import NewTenant, Tenant
from shared_kernel.context import ExecutionContext
from shared_kernel.paging import Page, Paging


@runtime_checkable
class ITenantRepository(Protocol):
    """Repository for Tenant aggregate persistence."""

    async def declare_tenant(
        self, context: ExecutionContext, tenant: NewTenant
    ) -> Tenant:
        """Persist a new tenant.

        Args:
            context: Execution context of the caller
            tenant: The tenant to declare

        Returns:
            The stored tenant with its assigned id

        Raises:
            DuplicateEntityError: If the code is already taken (field ``code``)
            RepositoryError: On any other storage fault
        """
        ...

    async def find_tenant_by_code(
        self, context: ExecutionContext, code: str
    ) -> Tenant | None:
        """Retrieve a tenant by its code.

        Args:
            context: Execution context of the caller
            code: The tenant code

        Returns:
            The Tenant aggregate, or None if not found
        """
        ...

    async def find_tenants(
        self, context: ExecutionContext, paging: Paging
    ) -> Page[Tenant]:
        """List tenants ordered by id, one page at a time.

        Args:
            context: Execution context of the caller
            paging: Page size and continuation cursor

        Returns:
            A page of at most ``paging.first`` tenants
        """
        ...
