"""Declarative base for tokend ORM models.

Constraint names follow a fixed convention so that storage errors can be
attributed to the constraint that raised them (see ``errors.py``).
"""

from __future__ import annotations

from datetime import datetime, timezone

from sqlalchemy import DateTime, MetaData
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

NAMING_CONVENTION = {
    "ix": "ix_%(column_0_label)s",
    "uq": "%(table_name)s_%(column_0_name)s_key",
    "ck": "%(table_name)s_%(constraint_name)s_check",
    "fk": "%(table_name)s_%(column_0_name)s_fkey",
    "pk": "%(table_name)s_pkey",
}


def _utc_now() -> datetime:
    # Named function rather than a lambda: evaluated per INSERT/UPDATE
    return datetime.now(timezone.utc)


class Base(DeclarativeBase):
    """Base class of every ORM model.

    The convention mirrors PostgreSQL's own defaults, e.g. a unique
    constraint on ``tenants.code`` is named ``tenants_code_key``.
    """

    metadata = MetaData(naming_convention=NAMING_CONVENTION)


class TimestampMixin:
    """Adds timezone-aware ``created_at`` and ``updated_at`` columns."""

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        insert_default=_utc_now,
        nullable=False,
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        insert_default=_utc_now,
        onupdate=_utc_now,
        nullable=False,
    )
