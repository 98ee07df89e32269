"""Tokenization application service.

Entry point for callers holding an execution context: authorizes the
operation, then mints a token from the policy.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from shared_kernel.authorization import AuthorizationProbe, authorize
from shared_kernel.context import Permission

if TYPE_CHECKING:
    from pydantic import SecretStr

    from shared_kernel.context import ExecutionContext
    from tokenization.domain import Policy, Token
    from tokenization.ports import TokenGenerator


class TokenizationService:
    """Application service issuing tokens for a tenant."""

    def __init__(
        self,
        token_generator: TokenGenerator,
        authorization_probe: AuthorizationProbe | None = None,
    ) -> None:
        """Initialize TokenizationService with dependencies.

        Args:
            token_generator: Generator producing formatted tokens
            authorization_probe: Optional probe for permission checks
        """
        self._token_generator = token_generator
        self._authorization_probe = authorization_probe

    async def tokenize(
        self,
        context: ExecutionContext,
        policy: Policy,
        value: SecretStr,
    ) -> Token:
        """Replace a sensitive value with a token.

        Sequence numbers are drawn from a counter scoped to the context
        tenant and the policy code.

        Args:
            context: Execution context of the caller
            policy: Tokenization policy to apply
            value: Sensitive value to replace

        Returns:
            The generated token

        Raises:
            TenantRequiredError: If the context has no tenant
            UnauthorizedError: If TOKEN_CREATE is not granted
            TokenGenerationError: If the raw token cannot be produced
        """
        authorize(context, Permission.TOKEN_CREATE, self._authorization_probe)

        return await self._token_generator.generate(
            policy,
            value,
            scope=sequence_scope(context, policy),
        )


def sequence_scope(context: ExecutionContext, policy: Policy) -> str:
    """Return the sequence scope of a policy within the context tenant."""
    return f"{context.tenant}:{policy.code}"
