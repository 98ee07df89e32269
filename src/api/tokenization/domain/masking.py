"""Combine a raw token with the retained parts of the original value.

This is the only place where the sensitive value is exposed. It is read
once to slice the retained windows and is never logged, stored or returned.
Positions are counted in characters so multi-byte characters are never
split.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from pydantic import SecretStr

    from tokenization.domain.value_objects import Policy


def format_token(policy: Policy, raw_token: str, value: SecretStr) -> str:
    """Build the externally visible token.

    The result is ``prefix + left + raw_token + right`` where ``left`` holds
    the first ``keep_left`` characters of the value and ``right`` the last
    ``keep_right`` ones. When the two windows would overlap, the right
    window is clamped so that it starts at the end of the left one.

    Args:
        policy: Tokenization policy
        raw_token: Uniqueness-bearing part of the token
        value: Original sensitive value

    Returns:
        The formatted token

    Example:
        >>> policy = Policy("sales", SequenceTokenFormat(), "TOK-", 2, 3)
        >>> format_token(policy, "_1_", SecretStr("CARMEN MCCALLUM"))
        'TOK-CA_1_LUM'
    """
    secret = value.get_secret_value()
    n = len(secret)

    idx_left = min(policy.keep_left, n)
    idx_right = min(n, max(n - policy.keep_right, idx_left))

    return f"{policy.prefix or ''}{secret[:idx_left]}{raw_token}{secret[idx_right:]}"
