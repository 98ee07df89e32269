"""In-process raw token generator.

Sequence values live in process memory: they restart at 1 with the process
and are not shared between processes.
"""

from __future__ import annotations

import threading
import uuid
from typing import assert_never

from tokenization.domain import SequenceTokenFormat, TokenFormat, UuidTokenFormat
from tokenization.ports import DEFAULT_SEQUENCE_SCOPE, TokenGenerationError

_INT64_MAX = 2**63 - 1


class InMemoryRawTokenGenerator:
    """RawTokenGenerator backed by in-memory counters.

    One monotonic 64-bit counter is kept per scope. Each counter starts at
    ``start`` and is advanced with a single fetch-and-add under a lock, so
    concurrent callers (tasks or threads) never observe the same value.
    """

    def __init__(self, start: int = 1) -> None:
        self._start = start
        self._sequences: dict[str, int] = {}
        self._lock = threading.Lock()

    def next_value(self, scope: str = DEFAULT_SEQUENCE_SCOPE) -> int:
        """Atomically return the current value of a scope and advance it.

        Raises:
            TokenGenerationError: If the counter left the signed 64-bit range
        """
        with self._lock:
            current = self._sequences.get(scope, self._start)
            if current > _INT64_MAX:
                raise TokenGenerationError(f"Sequence '{scope}' is exhausted")
            self._sequences[scope] = current + 1
        return current

    async def generate(
        self,
        token_format: TokenFormat,
        scope: str = DEFAULT_SEQUENCE_SCOPE,
    ) -> str:
        """Produce a raw token for the given format."""
        match token_format:
            case UuidTokenFormat():
                return str(uuid.uuid4())
            case SequenceTokenFormat(sequence_format=sequence_format):
                return sequence_format.apply(self.next_value(scope))
            case _:
                assert_never(token_format)
