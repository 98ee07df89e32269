"""Tenant aggregate for IAM context."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class NewTenant:
    """A tenant about to be declared.

    The identifier is assigned by storage when the tenant is declared.
    """

    code: str

    def __post_init__(self) -> None:
        if not self.code:
            raise ValueError("Tenant code must not be empty")


@dataclass(frozen=True)
class Tenant:
    """Tenant aggregate: the top-level isolation boundary of the system.

    Business rules:
    - Tenant codes are globally unique across the system
    - The numeric id is assigned once and is the pagination key
    """

    id: int
    code: str
