"""PostgreSQL implementation of ITenantRepository.

Every operation runs in a session contextualized with the caller's
execution context, so the row level security policies of the tenants
table apply to the caller and not to the pool's login role.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from iam.domain.aggregates import NewTenant, Tenant
from iam.infrastructure.models import TENANT_CODE_CONSTRAINT, TenantModel
from iam.infrastructure.observability import (
    DefaultTenantRepositoryProbe,
    TenantRepositoryProbe,
)
from iam.ports.repositories import ITenantRepository
from infrastructure.database.errors import is_unique_violation
from shared_kernel.errors import DuplicateEntityError, RepositoryError
from shared_kernel.observability_context import ObservationContext
from shared_kernel.paging import IntCursor, Page, PageInfos, Paging

if TYPE_CHECKING:
    from infrastructure.database.contextualized import ContextualizedSessionFactory
    from shared_kernel.context import ExecutionContext


class TenantRepository(ITenantRepository):
    """Repository managing PostgreSQL storage for Tenant aggregates."""

    def __init__(
        self,
        session_factory: ContextualizedSessionFactory,
        probe: TenantRepositoryProbe | None = None,
    ) -> None:
        """Initialize repository with a contextualized session factory.

        Args:
            session_factory: Factory of sessions carrying the caller identity
            probe: Optional domain probe for observability
        """
        self._session_factory = session_factory
        self._probe = probe or DefaultTenantRepositoryProbe()

    def _probe_for(self, context: ExecutionContext) -> TenantRepositoryProbe:
        return self._probe.with_context(
            ObservationContext.from_execution_context(context)
        )

    async def declare_tenant(
        self, context: ExecutionContext, tenant: NewTenant
    ) -> Tenant:
        """Persist a new tenant; the id is assigned by the database.

        Args:
            context: Execution context of the caller
            tenant: The tenant to declare

        Returns:
            The stored Tenant aggregate

        Raises:
            DuplicateEntityError: If the tenant code already exists
            RepositoryError: On any other storage fault
        """
        probe = self._probe_for(context)

        async with self._session_factory.acquire(context) as session:
            model = TenantModel(code=tenant.code)
            session.add(model)
            try:
                # Flush to surface integrity errors before the commit
                await session.flush()
            except IntegrityError as e:
                if is_unique_violation(e, TENANT_CODE_CONSTRAINT):
                    probe.duplicate_tenant_code(tenant.code)
                    raise DuplicateEntityError(
                        "Duplicate tenant", field="code", value=tenant.code
                    ) from e
                probe.storage_failed("declare_tenant", str(e))
                raise RepositoryError(f"Unable to declare tenant: {e}") from e
            except SQLAlchemyError as e:
                probe.storage_failed("declare_tenant", str(e))
                raise RepositoryError(f"Unable to declare tenant: {e}") from e

            declared = Tenant(id=model.id, code=model.code)

        probe.tenant_declared(declared.id, declared.code)
        return declared

    async def find_tenant_by_code(
        self, context: ExecutionContext, code: str
    ) -> Tenant | None:
        """Fetch tenant by code from PostgreSQL.

        Args:
            context: Execution context of the caller
            code: The tenant code

        Returns:
            The Tenant aggregate, or None if not found
        """
        probe = self._probe_for(context)

        async with self._session_factory.acquire(context) as session:
            try:
                stmt = select(TenantModel).where(TenantModel.code == code)
                result = await session.execute(stmt)
                model = result.scalar_one_or_none()
            except SQLAlchemyError as e:
                probe.storage_failed("find_tenant_by_code", str(e))
                raise RepositoryError(f"Unable to find tenant: {e}") from e

        if model is None:
            probe.tenant_not_found(code)
            return None

        probe.tenant_retrieved(model.id)
        return Tenant(id=model.id, code=model.code)

    async def find_tenants(
        self, context: ExecutionContext, paging: Paging
    ) -> Page[Tenant]:
        """List tenants ordered by id after the paging cursor.

        One row more than requested is fetched to tell whether another page
        follows; the continuation cursor is the id of the last returned
        tenant.

        Args:
            context: Execution context of the caller
            paging: Page size and continuation cursor

        Returns:
            A page of at most ``paging.first`` tenants
        """
        probe = self._probe_for(context)
        cursor = IntCursor.from_paging(paging)

        async with self._session_factory.acquire(context) as session:
            try:
                stmt = (
                    select(TenantModel)
                    .where(TenantModel.id > int(cursor))
                    .order_by(TenantModel.id)
                    .limit(paging.first + 1)
                )
                result = await session.execute(stmt)
                models = list(result.scalars().all())
            except SQLAlchemyError as e:
                probe.storage_failed("find_tenants", str(e))
                raise RepositoryError(f"Unable to list tenants: {e}") from e

        tenants = [Tenant(id=model.id, code=model.code) for model in models]

        if len(tenants) > paging.first:
            items = tenants[: paging.first]
            page_infos = (
                PageInfos.page_after(items[-1].id, has_next_page=True)
                if items
                else PageInfos.page_after(int(cursor), has_next_page=True)
            )
        else:
            items = tenants
            page_infos = PageInfos.no_page_after()

        probe.tenants_listed(len(items), page_infos.has_next_page)
        return Page(items=items, page_infos=page_infos)
