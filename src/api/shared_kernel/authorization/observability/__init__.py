"""Probes reporting the outcome of permission evaluations."""

from shared_kernel.authorization.observability.authorization_probe import (
    AuthorizationProbe,
    DefaultAuthorizationProbe,
)

__all__ = [
    "AuthorizationProbe",
    "DefaultAuthorizationProbe",
]
