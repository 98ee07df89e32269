"""Domain aggregates for IAM context."""

from iam.domain.aggregates.tenant import NewTenant, Tenant

__all__ = [
    "NewTenant",
    "Tenant",
]
