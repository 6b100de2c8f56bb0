"""Common error classes shared by every handler.

Error Types:
- ValidationError: Input shape failures
- NotFoundError: Resource not found
- ConflictError: Duplicate username/email
- AuthenticationError: Bad credentials

Usage:
    return Failure(error=NotFoundError(
        code=ErrorCode.ACCOUNT_NOT_FOUND,
        message="Account not found",
        resource_type="Account",
        resource_id=str(account_id),
    ))
"""

from dataclasses import dataclass

from ipauth.core.errors.domain_error import DomainError


@dataclass(frozen=True, slots=True, kw_only=True)
class ValidationError(DomainError):
    """Input validation failure.

    Attributes:
        field: Field name that failed validation.
    """

    field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class NotFoundError(DomainError):
    """Resource not found.

    Attributes:
        resource_type: Type of resource (Account).
        resource_id: ID of the resource that was not found.
    """

    resource_type: str
    resource_id: str


@dataclass(frozen=True, slots=True, kw_only=True)
class ConflictError(DomainError):
    """Resource conflict (duplicate username or email).

    Attributes:
        resource_type: Type of resource in conflict.
        conflicting_field: Field that has the conflict (email, username).
    """

    resource_type: str
    conflicting_field: str | None = None


@dataclass(frozen=True, slots=True, kw_only=True)
class AuthenticationError(DomainError):
    """Authentication failure (invalid email/password combination)."""

    pass
