"""Authentication domain errors.

Usage:
    from ipauth.domain.errors import AccountLockedError, AuthMessage, TokenError
"""

from ipauth.domain.errors.auth_errors import AccountLockedError, AuthMessage, TokenError

__all__ = ["AccountLockedError", "AuthMessage", "TokenError"]
