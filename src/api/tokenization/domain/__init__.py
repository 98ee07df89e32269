"""Tokenization domain: token formats, policies and masking."""

from tokenization.domain.masking import format_token
from tokenization.domain.value_objects import (
    PaddedIntSequenceFormat,
    Policy,
    RawSequenceFormat,
    SequenceFormat,
    SequenceTokenFormat,
    Token,
    TokenFormat,
    UuidTokenFormat,
)

__all__ = [
    "PaddedIntSequenceFormat",
    "Policy",
    "RawSequenceFormat",
    "SequenceFormat",
    "SequenceTokenFormat",
    "Token",
    "TokenFormat",
    "UuidTokenFormat",
    "format_token",
]
