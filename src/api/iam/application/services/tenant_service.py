"""Tenant application service for IAM bounded context.

Handles tenant management operations (declare, read, list). Tenant
management permissions are tenant-agnostic: they are granted to the ROOT
role and evaluated without a tenant in the execution context.
"""

from __future__ import annotations

from iam.application.observability import DefaultTenantServiceProbe, TenantServiceProbe
from iam.domain.aggregates import NewTenant, Tenant
from iam.ports.repositories import ITenantRepository
from shared_kernel.authorization import AuthorizationProbe, authorize
from shared_kernel.context import ExecutionContext, Permission
from shared_kernel.errors import DuplicateEntityError
from shared_kernel.observability_context import ObservationContext
from shared_kernel.paging import Page, Paging


class TenantService:
    """Application service for tenant management."""

    def __init__(
        self,
        tenant_repository: ITenantRepository,
        probe: TenantServiceProbe | None = None,
        authorization_probe: AuthorizationProbe | None = None,
    ):
        """Initialize TenantService with dependencies.

        Args:
            tenant_repository: Repository for tenant persistence
            probe: Optional domain probe for observability
            authorization_probe: Optional probe for permission checks
        """
        self._tenant_repository = tenant_repository
        self._probe = probe or DefaultTenantServiceProbe()
        self._authorization_probe = authorization_probe

    def _probe_for(self, context: ExecutionContext) -> TenantServiceProbe:
        return self._probe.with_context(
            ObservationContext.from_execution_context(context)
        )

    async def declare_tenant(self, context: ExecutionContext, code: str) -> Tenant:
        """Declare a new tenant.

        Args:
            context: Execution context of the caller
            code: Unique code of the tenant

        Returns:
            The declared Tenant aggregate

        Raises:
            UnauthorizedError: If TENANT_CREATE is not granted
            DuplicateEntityError: If a tenant with this code already exists
        """
        authorize(context, Permission.TENANT_CREATE, self._authorization_probe)
        probe = self._probe_for(context)

        try:
            tenant = await self._tenant_repository.declare_tenant(
                context, NewTenant(code=code)
            )
        except DuplicateEntityError:
            probe.duplicate_tenant_code(code=code)
            raise

        probe.tenant_declared(tenant_id=tenant.id, code=tenant.code)
        return tenant

    async def get_tenant(self, context: ExecutionContext, code: str) -> Tenant | None:
        """Retrieve a tenant by code.

        Args:
            context: Execution context of the caller
            code: The tenant code

        Returns:
            The Tenant aggregate, or None if not found

        Raises:
            UnauthorizedError: If TENANT_READ is not granted
        """
        authorize(context, Permission.TENANT_READ, self._authorization_probe)
        probe = self._probe_for(context)

        tenant = await self._tenant_repository.find_tenant_by_code(context, code)
        if tenant is None:
            probe.tenant_not_found(code=code)
            return None

        probe.tenant_retrieved(tenant_id=tenant.id)
        return tenant

    async def list_tenants(
        self, context: ExecutionContext, paging: Paging
    ) -> Page[Tenant]:
        """List tenants one page at a time.

        Args:
            context: Execution context of the caller
            paging: Page size and continuation cursor

        Returns:
            A page of tenants

        Raises:
            UnauthorizedError: If TENANT_READ is not granted
        """
        authorize(context, Permission.TENANT_READ, self._authorization_probe)

        page = await self._tenant_repository.find_tenants(context, paging)
        self._probe_for(context).tenants_listed(
            count=len(page.items),
            has_next_page=page.page_infos.has_next_page,
        )
        return page
