"""Authentication domain errors for account login and token flows.

Architecture:
    - Domain layer errors (no infrastructure dependencies)
    - Used in Result types (railway-oriented programming)
    - Never raised as exceptions (return Failure(error) instead)

Usage:
    from ipauth.domain.errors import AccountLockedError, AuthMessage

    if account.is_locked():
        return Failure(error=AccountLockedError(
            code=ErrorCode.ACCOUNT_LOCKED,
            message=AuthMessage.ACCOUNT_LOCKED,
            retry_after_minutes=account.lock_remaining_minutes(),
        ))
"""

from dataclasses import dataclass

from ipauth.core.errors import DomainError


class AuthMessage:
    """Authentication error message constants.

    Messages are identical for "no such account" and "wrong password" so
    callers cannot probe which field was wrong.
    """

    # -------------------------------------------------------------------------
    # Credential Errors
    # -------------------------------------------------------------------------

    INVALID_CREDENTIALS = "Invalid email or password"
    ACCOUNT_LOCKED = "Account is temporarily locked due to too many failed login attempts"
    ACCOUNT_NOT_FOUND = "Account not found"
    CURRENT_PASSWORD_INCORRECT = "Current password is incorrect"

    # -------------------------------------------------------------------------
    # Token Errors
    # -------------------------------------------------------------------------

    INVALID_TOKEN = "Invalid token"
    EXPIRED_TOKEN = "Token has expired"
    INVALID_VERIFICATION_TOKEN = "Invalid verification token"
    INVALID_OR_EXPIRED_RESET_TOKEN = "Invalid or expired reset token"

    # -------------------------------------------------------------------------
    # Conflict Errors
    # -------------------------------------------------------------------------

    ACCOUNT_ALREADY_EXISTS = "User with this email or username already exists"
    USERNAME_TAKEN = "Username is already taken"
    EMAIL_TAKEN = "Email is already registered"

    # -------------------------------------------------------------------------
    # Informational
    # -------------------------------------------------------------------------

    RESET_REQUESTED = "If an account with that email exists, a password reset link has been sent."


@dataclass(frozen=True, slots=True, kw_only=True)
class AccountLockedError(DomainError):
    """Login refused because the account is locked.

    Attributes:
        retry_after_minutes: Remaining lock time, rounded up to whole minutes.
    """

    retry_after_minutes: int


@dataclass(frozen=True, slots=True, kw_only=True)
class TokenError(DomainError):
    """Token verification or lookup failure.

    The error code tells the kinds apart: TOKEN_INVALID, TOKEN_EXPIRED or
    RESET_TOKEN_INVALID (which deliberately merges "not found" and
    "expired").

    Attributes:
        token_type: Which token failed (access, refresh, verification, reset).
    """

    token_type: str | None = None
