"""SQLAlchemy ORM models for IAM bounded context."""

from iam.infrastructure.models.tenant import TENANT_CODE_CONSTRAINT, TenantModel

__all__ = [
    "TENANT_CODE_CONSTRAINT",
    "TenantModel",
]
