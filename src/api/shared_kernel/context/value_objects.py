"""Value objects describing who is calling and for which tenant.

Value objects are immutable descriptors that provide type safety and
domain semantics for identifiers. They are built at request ingress from
untrusted input and never change afterwards.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import StrEnum

from shared_kernel.context.exceptions import (
    InvalidTenantIdError,
    UnknownCallerTypeError,
)

# At least two characters, ASCII letters, digits, underscore or dash
_TENANT_ID_PATTERN = re.compile(r"[a-zA-Z0-9_-]{2,}")


class CallerType(StrEnum):
    """Category of the identity making a call."""

    USER = "USER"
    SERVICE = "SERVICE"

    @classmethod
    def parse(cls, value: str) -> CallerType:
        """Parse a caller type, ignoring case.

        Args:
            value: Textual caller type (e.g. "user", "SERVICE")

        Returns:
            The matching CallerType

        Raises:
            UnknownCallerTypeError: If the text is not a known caller type
        """
        # Unicode case mapping folds some non-ASCII letters onto ASCII ones
        if not value.isascii():
            raise UnknownCallerTypeError(value)
        try:
            return cls(value.upper())
        except ValueError as e:
            raise UnknownCallerTypeError(value) from e


@dataclass(frozen=True)
class Caller:
    """Identity (user or service) invoking an operation."""

    caller_id: str
    caller_type: CallerType

    def __str__(self) -> str:
        """Return string representation."""
        return f"{self.caller_type}:{self.caller_id}"


@dataclass(frozen=True)
class TenantId:
    """Tenant scoping key.

    Must match ``[a-zA-Z0-9_-]{2,}``; construction fails otherwise.
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str) or not _TENANT_ID_PATTERN.fullmatch(
            self.value
        ):
            raise InvalidTenantIdError(str(self.value))

    def __str__(self) -> str:
        """Return string representation."""
        return self.value

    @classmethod
    def parse(cls, value: str) -> TenantId:
        """Create a TenantId from untrusted input.

        Args:
            value: Candidate tenant identifier

        Returns:
            TenantId instance

        Raises:
            InvalidTenantIdError: If value does not match the tenant id format
        """
        return cls(value=value)
