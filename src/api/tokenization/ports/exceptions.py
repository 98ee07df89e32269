"""Exceptions raised by token generators."""

from shared_kernel.errors import ErrorCode, TokendError


class TokenGenerationError(TokendError):
    """Raised when a raw token cannot be produced.

    Carries a diagnostic message (e.g. sequence exhausted, source
    unreachable). When raised, the masking stage is never attempted.
    """

    code = ErrorCode.SERVER_ERROR
