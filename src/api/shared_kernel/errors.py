"""Error taxonomy shared across bounded contexts.

Every error raised by a tokend component carries an ErrorCode so that the
surrounding service layer can map it to a transport-level status without
inspecting exception types one by one.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import StrEnum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from shared_kernel.context.permissions import Permission


class ErrorCode(StrEnum):
    """Category of a tokend error."""

    SERVER_ERROR = "server_error"
    UNIQUE_VIOLATION = "unique_violation"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"


class TokendError(Exception):
    """Base class for errors carrying an ErrorCode and structured details."""

    code: ErrorCode = ErrorCode.SERVER_ERROR

    def __init__(
        self,
        message: str,
        details: Mapping[str, str] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details: dict[str, str] = dict(details or {})


class RepositoryError(TokendError):
    """Raised for any storage fault that has no domain-level meaning.

    The engine-specific cause is chained (``raise ... from e``), never
    re-interpreted.
    """

    code = ErrorCode.SERVER_ERROR


class DuplicateEntityError(TokendError):
    """Raised when an entity violates a uniqueness rule.

    Attributes:
        field: Name of the conflicting field
        value: Conflicting value
    """

    code = ErrorCode.UNIQUE_VIOLATION

    def __init__(self, message: str, field: str, value: str) -> None:
        super().__init__(message, details={field: value})
        self.field = field
        self.value = value


class UnauthorizedError(TokendError):
    """Raised when the execution context lacks a required permission."""

    code = ErrorCode.UNAUTHORIZED

    def __init__(self, permission: Permission) -> None:
        super().__init__(
            f"Missing permission {permission}",
            details={"permission": str(permission)},
        )
        self.permission = permission


class TenantRequiredError(TokendError):
    """Raised when a tenant-scoped permission is evaluated without a tenant."""

    code = ErrorCode.FORBIDDEN

    def __init__(self, permission: Permission) -> None:
        super().__init__(
            f"Permission {permission} requires a tenant",
            details={"permission": str(permission)},
        )
        self.permission = permission
