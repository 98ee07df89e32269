"""Small text helpers shared across contexts."""

from __future__ import annotations


def left_pad(value: object, length: int, pad_char: str) -> str:
    """Left-pad the string form of ``value`` to ``length`` characters.

    A value already at least ``length`` characters long is returned as is,
    never truncated.

    Example:
        >>> left_pad(37, 4, "0")
        '0037'
        >>> left_pad("HOGWARD", 4, "_")
        'HOGWARD'
    """
    if len(pad_char) != 1:
        raise ValueError(f"pad_char must be a single character, got {pad_char!r}")
    return str(value).rjust(length, pad_char)
