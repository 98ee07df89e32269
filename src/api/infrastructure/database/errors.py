"""Interpretation of driver errors raised through SQLAlchemy."""

from __future__ import annotations

from sqlalchemy.exc import DBAPIError

UNIQUE_VIOLATION_SQLSTATE = "23505"


def _driver_errors(error: DBAPIError) -> list[BaseException]:
    """Return the DBAPI error and the native driver error it wraps."""
    errors: list[BaseException] = []
    orig = error.orig
    if orig is not None:
        errors.append(orig)
        if orig.__cause__ is not None:
            errors.append(orig.__cause__)
    return errors


def sqlstate(error: DBAPIError) -> str | None:
    """Return the SQLSTATE reported by the driver, if any."""
    for candidate in _driver_errors(error):
        code = getattr(candidate, "sqlstate", None) or getattr(
            candidate, "pgcode", None
        )
        if code:
            return code
    return None


def constraint_name(error: DBAPIError) -> str | None:
    """Return the name of the violated constraint, if the driver reports it."""
    for candidate in _driver_errors(error):
        name = getattr(candidate, "constraint_name", None)
        if name is None:
            name = getattr(getattr(candidate, "diag", None), "constraint_name", None)
        if name:
            return name
    return None


def is_unique_violation(error: DBAPIError, constraint: str) -> bool:
    """Tell whether an error is a unique violation of ``constraint``.

    A unique violation whose constraint the driver does not report is
    attributed to ``constraint``.
    """
    if sqlstate(error) != UNIQUE_VIOLATION_SQLSTATE:
        return False
    name = constraint_name(error)
    return name is None or name == constraint
