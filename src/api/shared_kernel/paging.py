"""Cursor-based pagination primitives.

List operations take a ``Paging`` request (``first`` items after an opaque
``after`` cursor) and return a ``Page`` whose ``PageInfos`` carries the
continuation cursor. Cursors are base64-encoded text whose first
``;``-separated field is a decimal ordering key.

Decoding never fails: a missing or malformed cursor means "start from the
beginning".
"""

from __future__ import annotations

import base64
import binascii
import re
from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")

_CURSOR_SEPARATOR = ";"
_DECIMAL_PATTERN = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


@dataclass(frozen=True)
class Paging:
    """Pagination request.

    Attributes:
        first: Maximum number of items to return
        after: Opaque cursor returned by a previous page, if any
    """

    first: int
    after: str | None = None

    def __post_init__(self) -> None:
        if self.first < 0:
            raise ValueError(f"Paging.first must be >= 0, got {self.first}")


@dataclass(frozen=True)
class PageInfos:
    """Pagination metadata returned with a page."""

    after: str | None
    has_next_page: bool

    @classmethod
    def page_after(cls, cursor: int, has_next_page: bool) -> PageInfos:
        """Build page infos whose continuation cursor encodes ``cursor``.

        Args:
            cursor: Ordering key of the last returned item
            has_next_page: Whether more items follow

        Returns:
            PageInfos with an encoded ``after`` cursor
        """
        return cls(after=encode_cursor(cursor), has_next_page=has_next_page)

    @classmethod
    def no_page_after(cls) -> PageInfos:
        """Build page infos signalling the end of the data."""
        return cls(after=None, has_next_page=False)


@dataclass(frozen=True)
class Page(Generic[T]):
    """A page of items plus its pagination metadata."""

    items: list[T] = field(default_factory=list)
    page_infos: PageInfos = field(default_factory=PageInfos.no_page_after)


def encode_cursor(key: int) -> str:
    """Encode an ordering key as an opaque cursor."""
    return base64.b64encode(str(key).encode("utf-8")).decode("ascii")


@dataclass(frozen=True)
class IntCursor:
    """Integer position decoded from a Paging cursor."""

    value: int = 0

    def __int__(self) -> int:
        return self.value

    @classmethod
    def from_paging(cls, paging: Paging) -> IntCursor:
        """Decode the cursor of a paging request.

        Any failure (missing cursor, invalid base64, invalid UTF-8, non
        numeric or out of range first field) yields position 0.
        """
        if paging.after is None:
            return cls(0)

        try:
            decoded = base64.b64decode(paging.after, validate=True).decode("utf-8")
        except (binascii.Error, ValueError):
            return cls(0)

        first_field = decoded.split(_CURSOR_SEPARATOR, 1)[0]
        if not _DECIMAL_PATTERN.fullmatch(first_field):
            return cls(0)

        key = int(first_field)
        if not _INT64_MIN <= key <= _INT64_MAX:
            return cls(0)
        return cls(key)
