"""Validation errors for identity value objects.

These are local validation failures raised at construction time. They are
never authorization failures.
"""

from __future__ import annotations


class UnrecognizedValueError(ValueError):
    """Raised when a textual value does not match any known variant.

    Attributes:
        value: The offending string, as received
    """

    kind: str = "value"

    def __init__(self, value: str) -> None:
        super().__init__(f"Unknown {self.kind}: {value}")
        self.value = value


class UnknownCallerTypeError(UnrecognizedValueError):
    """Raised when a caller type string is not USER or SERVICE."""

    kind = "caller type"


class UnknownRoleError(UnrecognizedValueError):
    """Raised when a role string is not a known role."""

    kind = "role"


class InvalidTenantIdError(ValueError):
    """Raised when a tenant identifier does not match the allowed format."""

    def __init__(self, value: str) -> None:
        super().__init__(f"TenantId is invalid: {value}")
        self.value = value
