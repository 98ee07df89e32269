"""Database infrastructure - pooled engines and contextualized sessions."""

from infrastructure.database.contextualized import (
    ContextualizedSessionFactory,
    SessionVariable,
    session_variables,
)
from infrastructure.database.errors import is_unique_violation

__all__ = [
    "ContextualizedSessionFactory",
    "SessionVariable",
    "is_unique_violation",
    "session_variables",
]
