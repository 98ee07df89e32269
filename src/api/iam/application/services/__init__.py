"""Application services for IAM bounded context."""

from iam.application.services.tenant_service import TenantService

__all__ = [
    "TenantService",
]
