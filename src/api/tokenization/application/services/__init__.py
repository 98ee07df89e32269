"""Application services for the tokenization bounded context."""

from tokenization.application.services.token_generator import DefaultTokenGenerator
from tokenization.application.services.tokenization_service import (
    TokenizationService,
    sequence_scope,
)

__all__ = [
    "DefaultTokenGenerator",
    "TokenizationService",
    "sequence_scope",
]
