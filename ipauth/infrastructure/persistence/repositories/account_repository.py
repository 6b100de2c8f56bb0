"""AccountRepository - SQLAlchemy implementation of AccountRepositoryProtocol.

Adapter for hexagonal architecture. Maps between domain Account entities
and the AccountModel table.

Writes are single UPDATE statements with RETURNING, so the lockout counter,
verification flag and reset fields never suffer lost updates under
concurrent requests for the same account.
"""

from datetime import UTC, datetime
from typing import Any

from sqlalchemy import DateTime, case, func, literal, null, or_, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ipauth.core.enums import ErrorCode
from ipauth.core.errors import ConflictError
from ipauth.core.result import Failure, Result, Success
from ipauth.domain.entities.account import Account
from ipauth.domain.errors import AuthMessage
from ipauth.infrastructure.persistence.models.account import AccountModel

UPDATABLE_FIELDS = frozenset(
    {
        "username",
        "email",
        "password_hash",
        "wallet_address",
        "is_verified",
        "verification_token",
        "failed_login_attempts",
        "lock_until",
        "reset_password_token",
        "reset_password_expires",
    }
)

PROFILE_FIELDS = frozenset({"username", "email", "wallet_address"})


def _as_utc(value: datetime | None) -> datetime | None:
    # SQLite hands back naive datetimes; everything is stored in UTC.
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=UTC)


class AccountRepository:
    """SQLAlchemy implementation of AccountRepositoryProtocol.

    Each write commits immediately, matching the request/response lifetime
    of the handlers that use it.

    Attributes:
        session: SQLAlchemy async session for database operations.

    Example:
        >>> async with database.get_session() as session:
        ...     repo = AccountRepository(session)
        ...     account = await repo.find_by_email("a@x.com")
    """

    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_by_id(self, account_id: int) -> Account | None:
        return await self._find_one(AccountModel.id == account_id)

    async def find_by_email(self, email: str) -> Account | None:
        return await self._find_one(AccountModel.email == email)

    async def find_by_username(self, username: str) -> Account | None:
        return await self._find_one(AccountModel.username == username)

    async def find_by_verification_token(self, token: str) -> Account | None:
        return await self._find_one(AccountModel.verification_token == token)

    async def find_by_reset_token(
        self, token: str, not_expired_before: datetime
    ) -> Account | None:
        """Find account by reset token whose expiry is strictly after the cutoff."""
        return await self._find_one(
            AccountModel.reset_password_token == token,
            AccountModel.reset_password_expires > not_expired_before,
        )

    async def find_conflicting(
        self,
        *,
        username: str | None = None,
        email: str | None = None,
        exclude_id: int | None = None,
    ) -> Account | None:
        """Find an account using the username OR the email, ignoring exclude_id."""
        conditions = []
        if username is not None:
            conditions.append(AccountModel.username == username)
        if email is not None:
            conditions.append(AccountModel.email == email)
        if not conditions:
            return None

        stmt = select(AccountModel).where(or_(*conditions))
        if exclude_id is not None:
            stmt = stmt.where(AccountModel.id != exclude_id)
        result = await self.session.execute(stmt.limit(1))
        account_model = result.scalar_one_or_none()
        if account_model is None:
            return None
        return self._to_domain(account_model)

    async def create(
        self,
        *,
        username: str,
        email: str,
        password_hash: str,
        wallet_address: str,
        verification_token: str | None,
    ) -> Result[Account, ConflictError]:
        """Insert a new unverified account.

        Returns:
            Success with the stored account, or Failure(ConflictError) if a
            unique constraint rejected the row (concurrent registration).
        """
        account_model = AccountModel(
            username=username,
            email=email,
            password_hash=password_hash,
            wallet_address=wallet_address,
            is_verified=False,
            verification_token=verification_token,
            failed_login_attempts=0,
        )
        self.session.add(account_model)
        try:
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            return Failure(
                error=ConflictError(
                    code=ErrorCode.CONFLICT,
                    message=AuthMessage.ACCOUNT_ALREADY_EXISTS,
                    resource_type="Account",
                )
            )
        await self.session.refresh(account_model)
        return Success(value=self._to_domain(account_model))

    async def update(self, account_id: int, **fields: Any) -> Account | None:
        """Apply a partial update in one statement.

        Raises:
            ValueError: If a field is not an updatable account column.
        """
        unknown = set(fields) - UPDATABLE_FIELDS
        if unknown:
            msg = f"Cannot update account fields: {', '.join(sorted(unknown))}"
            raise ValueError(msg)
        if not fields:
            return await self.find_by_id(account_id)
        return await self._update_returning(AccountModel.id == account_id, values=fields)

    async def update_profile(
        self, account_id: int, **fields: Any
    ) -> Result[Account | None, ConflictError]:
        """Apply a username/email/wallet change.

        A unique constraint violation (another account took the value after
        the caller's pre-check) is rolled back and returned as a conflict.

        Raises:
            ValueError: If a field is not a profile column.
        """
        unknown = set(fields) - PROFILE_FIELDS
        if unknown:
            msg = f"Cannot update profile fields: {', '.join(sorted(unknown))}"
            raise ValueError(msg)
        try:
            account = await self.update(account_id, **fields)
        except IntegrityError:
            await self.session.rollback()
            return Failure(
                error=ConflictError(
                    code=ErrorCode.CONFLICT,
                    message=AuthMessage.ACCOUNT_ALREADY_EXISTS,
                    resource_type="Account",
                )
            )
        return Success(value=account)

    async def record_failed_login(
        self, account_id: int, *, max_attempts: int, lock_until: datetime
    ) -> Account | None:
        """Increment the failed login counter and set or clear the lock atomically.

        Both SET expressions read the pre-update row, so the CASE sees the
        same counter value the increment starts from.
        """
        incremented = AccountModel.failed_login_attempts + 1
        return await self._update_returning(
            AccountModel.id == account_id,
            values={
                "failed_login_attempts": incremented,
                "lock_until": case(
                    (
                        incremented >= max_attempts,
                        literal(lock_until, DateTime(timezone=True)),
                    ),
                    else_=null(),
                ),
            },
        )

    async def mark_verified(self, account_id: int, token: str) -> Account | None:
        """Set is_verified and clear the token only if the token still matches."""
        return await self._update_returning(
            AccountModel.id == account_id,
            AccountModel.verification_token == token,
            values={"is_verified": True, "verification_token": None},
        )

    async def consume_reset_token(
        self, token: str, *, not_expired_before: datetime, password_hash: str
    ) -> Account | None:
        """Swap in the new hash, clear reset fields and lift any lockout.

        The token and expiry are re-checked in the WHERE clause, so two
        concurrent resets with the same token cannot both succeed.
        """
        return await self._update_returning(
            AccountModel.reset_password_token == token,
            AccountModel.reset_password_expires > not_expired_before,
            values={
                "password_hash": password_hash,
                "reset_password_token": None,
                "reset_password_expires": None,
                "failed_login_attempts": 0,
                "lock_until": None,
            },
        )

    async def count(
        self,
        *,
        is_verified: bool | None = None,
        locked_at: datetime | None = None,
    ) -> int:
        stmt = select(func.count()).select_from(AccountModel)
        if is_verified is not None:
            stmt = stmt.where(AccountModel.is_verified.is_(is_verified))
        if locked_at is not None:
            stmt = stmt.where(AccountModel.lock_until > locked_at)
        result = await self.session.execute(stmt)
        return int(result.scalar_one())

    async def _find_one(self, *criteria: Any) -> Account | None:
        stmt = select(AccountModel).where(*criteria)
        result = await self.session.execute(stmt)
        account_model = result.scalar_one_or_none()
        if account_model is None:
            return None
        return self._to_domain(account_model)

    async def _update_returning(
        self, *criteria: Any, values: dict[str, Any]
    ) -> Account | None:
        stmt = (
            update(AccountModel)
            .where(*criteria)
            .values(**values)
            .returning(AccountModel)
            .execution_options(synchronize_session=False, populate_existing=True)
        )
        result = await self.session.execute(stmt)
        account_model = result.scalar_one_or_none()
        await self.session.commit()
        if account_model is None:
            return None
        return self._to_domain(account_model)

    def _to_domain(self, account_model: AccountModel) -> Account:
        """Convert database model to domain entity."""
        return Account(
            id=account_model.id,
            username=account_model.username,
            email=account_model.email,
            password_hash=account_model.password_hash,
            wallet_address=account_model.wallet_address,
            is_verified=account_model.is_verified,
            verification_token=account_model.verification_token,
            failed_login_attempts=account_model.failed_login_attempts,
            lock_until=_as_utc(account_model.lock_until),
            reset_password_token=account_model.reset_password_token,
            reset_password_expires=_as_utc(account_model.reset_password_expires),
            created_at=_as_utc(account_model.created_at),
            updated_at=_as_utc(account_model.updated_at),
        )
