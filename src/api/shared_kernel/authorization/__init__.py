"""Authorization primitives shared across bounded contexts.

Use cases gate every operation through ``authorize``, which evaluates the
execution context and raises a typed failure when access is denied.
"""

from shared_kernel.authorization.guard import authorize
from shared_kernel.authorization.observability import (
    AuthorizationProbe,
    DefaultAuthorizationProbe,
)

__all__ = [
    "AuthorizationProbe",
    "DefaultAuthorizationProbe",
    "authorize",
]
