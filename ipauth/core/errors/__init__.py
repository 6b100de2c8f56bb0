"""Core errors package.

Usage:
    from ipauth.core.errors import DomainError, ConflictError, NotFoundError
"""

from ipauth.core.errors.common_errors import (
    AuthenticationError,
    ConflictError,
    NotFoundError,
    ValidationError,
)
from ipauth.core.errors.domain_error import DomainError

__all__ = [
    "DomainError",
    "ValidationError",
    "NotFoundError",
    "ConflictError",
    "AuthenticationError",
]
