"""Domain-Oriented Observability for tokenization application services."""

from tokenization.application.observability.token_generation_probe import (
    DefaultTokenGenerationProbe,
    TokenGenerationProbe,
)

__all__ = [
    "DefaultTokenGenerationProbe",
    "TokenGenerationProbe",
]
