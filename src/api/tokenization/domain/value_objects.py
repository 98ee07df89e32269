"""Value objects for the tokenization domain.

Token formats are a closed set of variants modelled as a union of frozen
dataclasses. Adding a generation strategy means adding a variant to the
union; ``match`` statements over the union end with ``assert_never`` so a
missing branch is reported by the type checker.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TypeAlias

from shared_kernel.text import left_pad


@dataclass(frozen=True)
class RawSequenceFormat:
    """Render a sequence value as its plain decimal form.

    Example:
        37 -> "37"
    """

    def apply(self, sequence: int) -> str:
        """Render a sequence value."""
        return str(sequence)


@dataclass(frozen=True)
class PaddedIntSequenceFormat:
    """Render a sequence value left-padded to a fixed length.

    Values whose decimal form is already long enough are returned unpadded.

    Example:
        PaddedIntSequenceFormat(4, "0"): 37 -> "0037"
    """

    length: int
    pad_char: str = "0"

    def __post_init__(self) -> None:
        if self.length < 0:
            raise ValueError(f"length must be >= 0, got {self.length}")
        if len(self.pad_char) != 1:
            raise ValueError(
                f"pad_char must be a single character, got {self.pad_char!r}"
            )

    def apply(self, sequence: int) -> str:
        """Render a sequence value."""
        return left_pad(sequence, self.length, self.pad_char)


SequenceFormat: TypeAlias = RawSequenceFormat | PaddedIntSequenceFormat


@dataclass(frozen=True)
class UuidTokenFormat:
    """Raw token is a random UUID (lowercase, hyphenated)."""


@dataclass(frozen=True)
class SequenceTokenFormat:
    """Raw token is the next value of a monotonic counter."""

    sequence_format: SequenceFormat = RawSequenceFormat()


TokenFormat: TypeAlias = UuidTokenFormat | SequenceTokenFormat


@dataclass(frozen=True)
class Token:
    """Opaque generated identifier handed back to callers."""

    value: str

    def __post_init__(self) -> None:
        if not self.value:
            raise ValueError("Token value cannot be empty")

    def __str__(self) -> str:
        """Return string representation."""
        return self.value


@dataclass(frozen=True)
class Policy:
    """Rule describing how a raw token is combined with the original value.

    Attributes:
        code: Identifier of the policy, unique within a tenant
        format: How raw tokens are generated
        prefix: Text prepended to every token
        keep_left: Number of leading characters of the value to retain
        keep_right: Number of trailing characters of the value to retain
    """

    code: str
    format: TokenFormat
    prefix: str | None = None
    keep_left: int = 0
    keep_right: int = 0

    def __post_init__(self) -> None:
        if self.keep_left < 0 or self.keep_right < 0:
            raise ValueError(
                f"keep_left and keep_right must be >= 0 "
                f"(got {self.keep_left}, {self.keep_right})"
            )
