"""Observation context for domain-oriented observability.

Observation contexts collect and manage contextual metadata for instrumentation,
following the Domain Oriented Observability pattern.

See: https://martinfowler.com/articles/domain-oriented-observability.html
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from shared_kernel.context import ExecutionContext


@dataclass(frozen=True)
class ObservationContext:
    """Immutable context containing metadata for observability.

    Captures request-scoped metadata that should be included with all
    instrumentation events. It never carries sensitive values: only the
    identity already present in the execution context.

    Attributes:
        request_id: Unique identifier for the current request/operation.
        caller_id: Identifier of the caller performing the operation.
        caller_type: USER or SERVICE.
        tenant_id: Tenant the operation is scoped to (if any).
        extra: Additional contextual metadata.

    Example:
        context = ObservationContext.from_execution_context(ctx)
        probe = DefaultTenantRepositoryProbe().with_context(context)
    """

    request_id: str | None = None
    caller_id: str | None = None
    caller_type: str | None = None
    tenant_id: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_execution_context(
        cls,
        context: ExecutionContext,
        request_id: str | None = None,
    ) -> ObservationContext:
        """Build an observation context from an execution context."""
        return cls(
            request_id=request_id,
            caller_id=context.caller.caller_id,
            caller_type=str(context.caller.caller_type),
            tenant_id=str(context.tenant) if context.tenant is not None else None,
        )

    def as_dict(self) -> dict[str, Any]:
        """Convert context to a dictionary for logging.

        Only includes non-None values to keep logs clean.
        """
        result: dict[str, Any] = {}
        if self.request_id is not None:
            result["request_id"] = self.request_id
        if self.caller_id is not None:
            result["caller_id"] = self.caller_id
        if self.caller_type is not None:
            result["caller_type"] = self.caller_type
        if self.tenant_id is not None:
            result["tenant_id"] = self.tenant_id
        result.update(self.extra)
        return result

    def with_extra(self, **kwargs: Any) -> ObservationContext:
        """Create a new context with additional metadata."""
        return ObservationContext(
            request_id=self.request_id,
            caller_id=self.caller_id,
            caller_type=self.caller_type,
            tenant_id=self.tenant_id,
            extra={**self.extra, **kwargs},
        )
