"""Infrastructure adapters for the tokenization context."""

from tokenization.infrastructure.in_memory_generator import InMemoryRawTokenGenerator

__all__ = ["InMemoryRawTokenGenerator"]
