"""Ports (protocols) for IAM bounded context."""

from iam.ports.repositories import ITenantRepository

__all__ = [
    "ITenantRepository",
]
