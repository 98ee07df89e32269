"""Domain-Oriented Observability for IAM application services."""

from iam.application.observability.tenant_service_probe import (
    DefaultTenantServiceProbe,
    TenantServiceProbe,
)

__all__ = [
    "DefaultTenantServiceProbe",
    "TenantServiceProbe",
]
