"""Generator protocols (ports) for the tokenization context.

A RawTokenGenerator produces the uniqueness-bearing part of a token. A
TokenGenerator turns a policy and a sensitive value into the final token,
delegating raw production to a RawTokenGenerator.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pydantic import SecretStr

    from tokenization.domain import Policy, Token, TokenFormat

DEFAULT_SEQUENCE_SCOPE = "default"


@runtime_checkable
class RawTokenGenerator(Protocol):
    """Source of raw tokens."""

    async def generate(
        self,
        token_format: TokenFormat,
        scope: str = DEFAULT_SEQUENCE_SCOPE,
    ) -> str:
        """Produce a raw token.

        Args:
            token_format: How the raw token must be produced
            scope: Uniqueness domain of sequence-based tokens. Values drawn
                from the same scope are distinct and strictly increasing.

        Returns:
            The raw token

        Raises:
            TokenGenerationError: If the underlying source fails
        """
        ...


@runtime_checkable
class TokenGenerator(Protocol):
    """Produces formatted tokens from a policy and a sensitive value."""

    async def generate(
        self,
        policy: Policy,
        value: SecretStr,
        scope: str | None = None,
    ) -> Token:
        """Generate the token replacing ``value``.

        Args:
            policy: Tokenization policy
            value: Sensitive value to replace
            scope: Sequence scope; defaults to the policy code

        Returns:
            The generated token

        Raises:
            TokenGenerationError: If the raw token cannot be produced
        """
        ...
