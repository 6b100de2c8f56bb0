"""Account domain entity for authentication.

Pure business logic, no framework dependencies.

Lockout:
    - UNLOCKED: lock_until is None or in the past
    - LOCKED: lock_until is in the future
    A past lock_until is treated as unlocked even before it is cleared.

Password Reset:
    - reset_password_token and reset_password_expires are set as a pair
    - A token past its expiry is treated as absent
"""

import math
from dataclasses import dataclass
from datetime import UTC, datetime

from ipauth.core.constants import LOCKOUT_DURATION, MAX_FAILED_LOGIN_ATTEMPTS


@dataclass
class Account:
    """Account domain entity with lockout and reset business rules.

    Business Rules:
        - Account locks after 5 consecutive failed login attempts
        - Lockout duration is 15 minutes (no exponential backoff)
        - Failed login counter resets on successful login, password
          change and password reset
        - Verification token is cleared exactly once, on verification

    Attributes:
        id: Store-assigned identifier (immutable)
        username: Unique username (3-30 chars, alphanumeric and underscore)
        email: Unique email address, stored as given
        password_hash: Bcrypt hashed password (never plaintext)
        wallet_address: External chain address (ownership asserted)
        is_verified: Email verification status
        verification_token: Opaque token, present while unverified
        failed_login_attempts: Consecutive failed login counter
        lock_until: Timestamp until which the account is locked
        reset_password_token: Opaque password reset token
        reset_password_expires: Reset token expiry
        created_at: Timestamp when the account was created
        updated_at: Timestamp when the account was last updated

    Example:
        >>> account = Account(
        ...     id=1,
        ...     username="alice",
        ...     email="a@x.com",
        ...     password_hash="$2b$12$...",
        ...     wallet_address="0x" + "1" * 40,
        ... )
        >>> account.is_locked()
        False
    """

    id: int
    username: str
    email: str
    password_hash: str
    wallet_address: str
    is_verified: bool = False
    verification_token: str | None = None
    failed_login_attempts: int = 0
    lock_until: datetime | None = None
    reset_password_token: str | None = None
    reset_password_expires: datetime | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def is_locked(self, now: datetime | None = None) -> bool:
        """Check if the account is currently locked.

        Args:
            now: Reference time (defaults to current UTC time).

        Returns:
            True if lock_until is set and in the future.
        """
        if self.lock_until is None:
            return False
        return (now or datetime.now(UTC)) < self.lock_until

    def lock_remaining_minutes(self, now: datetime | None = None) -> int:
        """Minutes until the lock lifts, rounded up.

        Returns:
            Ceiling of the remaining lock time in minutes, 0 when unlocked.

        Example:
            >>> account.lock_until = datetime.now(UTC) + timedelta(minutes=14, seconds=1)
            >>> account.lock_remaining_minutes()
            15
        """
        now = now or datetime.now(UTC)
        if self.lock_until is None or now >= self.lock_until:
            return 0
        remaining_ms = (self.lock_until - now).total_seconds() * 1000
        return math.ceil(remaining_ms / 60000)

    def has_valid_reset_token(self, now: datetime | None = None) -> bool:
        """Check if a reset token is stored and not yet expired."""
        if self.reset_password_token is None or self.reset_password_expires is None:
            return False
        return (now or datetime.now(UTC)) < self.reset_password_expires

    @staticmethod
    def lockout_threshold() -> int:
        """Failed attempts that move the account into LOCKED."""
        return MAX_FAILED_LOGIN_ATTEMPTS

    @staticmethod
    def lock_deadline(now: datetime | None = None) -> datetime:
        """Timestamp the lock lasts until if it starts at ``now``."""
        return (now or datetime.now(UTC)) + LOCKOUT_DURATION
