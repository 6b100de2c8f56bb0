"""Domain-level error codes (machine-readable).

Callers branch on these codes, never on message text.

Categories:
- Validation errors (VALIDATION_FAILED)
- Resource errors (ACCOUNT_NOT_FOUND)
- Conflict errors (CONFLICT)
- Authentication errors (INVALID_CREDENTIALS, TOKEN_*, RESET_TOKEN_INVALID)
- Lockout (ACCOUNT_LOCKED)
"""

from enum import Enum


class ErrorCode(Enum):
    """Domain-level error codes (machine-readable)."""

    # Validation errors
    VALIDATION_FAILED = "validation_failed"

    # Resource errors
    ACCOUNT_NOT_FOUND = "account_not_found"

    # Conflict errors
    CONFLICT = "conflict"

    # Authentication errors
    INVALID_CREDENTIALS = "invalid_credentials"
    TOKEN_INVALID = "token_invalid"
    TOKEN_EXPIRED = "token_expired"
    RESET_TOKEN_INVALID = "reset_token_invalid_or_expired"

    # Lockout
    ACCOUNT_LOCKED = "account_locked"
