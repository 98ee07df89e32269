"""Domain probe for token generation.

Records which policy produced a token and how it was produced. The
sensitive value and the produced token never reach this probe.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class TokenGenerationProbe(Protocol):
    """Domain probe for token generation operations."""

    def token_generated(self, policy_code: str, token_format: str) -> None:
        """Record that a token was generated."""
        ...

    def raw_token_generation_failed(self, policy_code: str, error: str) -> None:
        """Record that the raw token source failed."""
        ...

    def with_context(self, context: ObservationContext) -> TokenGenerationProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultTokenGenerationProbe:
    """Default implementation of TokenGenerationProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        """Get context metadata as kwargs for logging."""
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(
        self, context: ObservationContext
    ) -> DefaultTokenGenerationProbe:
        """Create a new probe with observation context bound."""
        return DefaultTokenGenerationProbe(logger=self._logger, context=context)

    def token_generated(self, policy_code: str, token_format: str) -> None:
        """Record that a token was generated."""
        self._logger.info(
            "token_generated",
            policy_code=policy_code,
            token_format=token_format,
            **self._get_context_kwargs(),
        )

    def raw_token_generation_failed(self, policy_code: str, error: str) -> None:
        """Record that the raw token source failed."""
        self._logger.error(
            "raw_token_generation_failed",
            policy_code=policy_code,
            error=error,
            **self._get_context_kwargs(),
        )
