"""AccountRepositoryProtocol for account persistence.

Port (interface) for hexagonal architecture. Infrastructure layer
implements this protocol.

Every write that touches lockout, verification or reset state is a single
statement against one row, so concurrent requests cannot lose updates.
"""

from datetime import datetime
from typing import Any, Protocol

from ipauth.core.errors import ConflictError
from ipauth.core.result import Result
from ipauth.domain.entities.account import Account


class AccountRepositoryProtocol(Protocol):
    """Account repository protocol (port).

    This is a Protocol (not ABC) for structural typing. Implementations
    don't need to inherit from this.

    Lookups are exact-match: username and email are compared as stored.
    """

    async def find_by_id(self, account_id: int) -> Account | None:
        """Find account by ID."""
        ...

    async def find_by_email(self, email: str) -> Account | None:
        """Find account by email address (exact match)."""
        ...

    async def find_by_username(self, username: str) -> Account | None:
        """Find account by username (exact match)."""
        ...

    async def find_by_verification_token(self, token: str) -> Account | None:
        """Find account holding this email verification token."""
        ...

    async def find_by_reset_token(
        self, token: str, not_expired_before: datetime
    ) -> Account | None:
        """Find account whose reset token matches and expires after the cutoff.

        Args:
            token: Raw reset token.
            not_expired_before: Expiry must be strictly later than this.

        Returns:
            Account if the token matches and is still valid, None otherwise.
        """
        ...

    async def find_conflicting(
        self,
        *,
        username: str | None = None,
        email: str | None = None,
        exclude_id: int | None = None,
    ) -> Account | None:
        """Find an account that already uses the username OR the email.

        Args:
            username: Username to check (skipped when None).
            email: Email to check (skipped when None).
            exclude_id: Account to ignore (the one being updated).

        Returns:
            The first colliding account, or None.
        """
        ...

    async def create(
        self,
        *,
        username: str,
        email: str,
        password_hash: str,
        wallet_address: str,
        verification_token: str | None,
    ) -> Result[Account, ConflictError]:
        """Persist a new unverified account.

        Returns:
            Success with the stored account (id and created_at assigned),
            or Failure(ConflictError) when a unique constraint rejects it.
        """
        ...

    async def update(self, account_id: int, **fields: Any) -> Account | None:
        """Apply a partial update in a single statement.

        Returns:
            Updated account, or None if the id does not resolve.
        """
        ...

    async def update_profile(
        self, account_id: int, **fields: Any
    ) -> Result[Account | None, ConflictError]:
        """Apply a username, email or wallet change in a single statement.

        Returns:
            Success with the updated account (None if the id does not
            resolve), or Failure(ConflictError) when a unique constraint
            rejects the new username or email.
        """
        ...

    async def record_failed_login(
        self, account_id: int, *, max_attempts: int, lock_until: datetime
    ) -> Account | None:
        """Atomically increment the failed login counter.

        When the incremented counter reaches ``max_attempts`` the lock is
        set to ``lock_until``; otherwise the lock is cleared.

        Returns:
            Updated account, or None if the id does not resolve.
        """
        ...

    async def mark_verified(self, account_id: int, token: str) -> Account | None:
        """Verify the account and clear its token if the token still matches.

        Returns:
            Updated account, or None if the token was already consumed.
        """
        ...

    async def consume_reset_token(
        self, token: str, *, not_expired_before: datetime, password_hash: str
    ) -> Account | None:
        """Store a new password hash if the reset token is still valid.

        Clears both reset fields and the lockout counters in the same
        statement, so a token can be consumed only once.

        Returns:
            Updated account, or None if the token no longer matches or expired.
        """
        ...

    async def count(
        self,
        *,
        is_verified: bool | None = None,
        locked_at: datetime | None = None,
    ) -> int:
        """Count accounts matching the filters.

        Args:
            is_verified: Filter by verification flag (skipped when None).
            locked_at: Only count accounts locked at this instant.
        """
        ...
