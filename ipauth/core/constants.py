"""Centralized constants for internal implementation details.

These are fixed policy values, NOT environment-specific configuration. For
environment-specific settings use ``ipauth.core.config`` instead.

Example:
    >>> from ipauth.core.constants import TOKEN_BYTES
    >>> token = secrets.token_hex(TOKEN_BYTES)
"""

from datetime import timedelta

# =============================================================================
# Token Lengths
# =============================================================================

TOKEN_BYTES: int = 32
"""Number of random bytes behind verification and reset tokens (256 bits)."""

TOKEN_HEX_LENGTH: int = 64
"""Length of hex-encoded token string (TOKEN_BYTES * 2)."""

BCRYPT_ROUNDS_DEFAULT: int = 12
"""Default bcrypt work factor (cost parameter)."""


# =============================================================================
# Lockout Policy
# =============================================================================

MAX_FAILED_LOGIN_ATTEMPTS: int = 5
"""Consecutive failed logins that lock an account."""

LOCKOUT_DURATION_MINUTES: int = 15
"""How long an account stays locked once the threshold is reached."""

LOCKOUT_DURATION: timedelta = timedelta(minutes=LOCKOUT_DURATION_MINUTES)


# =============================================================================
# Token Lifetimes (defaults, overridable through Settings)
# =============================================================================

ACCESS_TOKEN_EXPIRE_HOURS_DEFAULT: int = 24
REFRESH_TOKEN_EXPIRE_DAYS_DEFAULT: int = 7
PASSWORD_RESET_EXPIRE_HOURS_DEFAULT: int = 1

BEARER_TOKEN_TYPE: str = "bearer"
