"""Ports for the tokenization bounded context."""

from tokenization.ports.exceptions import TokenGenerationError
from tokenization.ports.generators import (
    DEFAULT_SEQUENCE_SCOPE,
    RawTokenGenerator,
    TokenGenerator,
)

__all__ = [
    "DEFAULT_SEQUENCE_SCOPE",
    "RawTokenGenerator",
    "TokenGenerationError",
    "TokenGenerator",
]
