"""Default TokenGenerator: raw token production followed by masking."""

from __future__ import annotations

from typing import TYPE_CHECKING

from tokenization.application.observability import (
    DefaultTokenGenerationProbe,
    TokenGenerationProbe,
)
from tokenization.domain import Policy, Token, format_token
from tokenization.ports import RawTokenGenerator, TokenGenerationError

if TYPE_CHECKING:
    from pydantic import SecretStr


class DefaultTokenGenerator:
    """TokenGenerator delegating raw production to a RawTokenGenerator.

    The same masking policy applies whether uniqueness comes from a counter
    or a random identifier: only the delegate changes.
    """

    def __init__(
        self,
        raw_generator: RawTokenGenerator,
        probe: TokenGenerationProbe | None = None,
    ) -> None:
        """Initialize the generator.

        Args:
            raw_generator: Source of raw tokens
            probe: Optional domain probe for observability
        """
        self._raw_generator = raw_generator
        self._probe = probe or DefaultTokenGenerationProbe()

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
            TokenGenerationError: If the raw token cannot be produced. The
                masking stage is not attempted in that case.
        """
        try:
            raw_token = await self._raw_generator.generate(
                policy.format, scope or policy.code
            )
        except TokenGenerationError as e:
            self._probe.raw_token_generation_failed(
                policy_code=policy.code, error=str(e)
            )
            raise

        token = Token(format_token(policy, raw_token, value))
        self._probe.token_generated(
            policy_code=policy.code,
            token_format=type(policy.format).__name__,
        )
        return token
