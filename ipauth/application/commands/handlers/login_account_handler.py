"""Login account handler (lockout state machine).

States per account:
- UNLOCKED: lock_until is None or in the past
- LOCKED: lock_until is in the future

Flow:
1. Find account by email; missing -> InvalidCredentials
2. LOCKED -> AccountLocked with remaining minutes (counters untouched)
3. Verify password (worker thread)
4. Wrong password -> atomic increment; the 5th failure sets a 15 minute
   lock -> InvalidCredentials
5. Correct password -> reset counters, issue tokens -> Success(LoginResult)

A missing account and a wrong password produce the same error so callers
cannot tell which field was wrong.
"""

import asyncio
from datetime import UTC, datetime

from ipauth.application.commands.auth_commands import LoginAccount
from ipauth.application.dtos import LoginResult, PublicAccount, TokenPair
from ipauth.application.errors import infrastructure_guard
from ipauth.core.enums import ErrorCode
from ipauth.core.errors import AuthenticationError, DomainError, NotFoundError
from ipauth.core.result import Failure, Result, Success
from ipauth.domain.entities.account import Account
from ipauth.domain.errors import AccountLockedError, AuthMessage
from ipauth.domain.protocols import (
    AccountRepositoryProtocol,
    LoggerProtocol,
    PasswordHashingProtocol,
    TokenGenerationProtocol,
)


class LoginAccountHandler:
    """Handler for email/password login with progressive lockout."""

    def __init__(
        self,
        account_repo: AccountRepositoryProtocol,
        password_service: PasswordHashingProtocol,
        token_service: TokenGenerationProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._account_repo = account_repo
        self._password_service = password_service
        self._token_service = token_service
        self._logger = logger

    async def handle(self, cmd: LoginAccount) -> Result[LoginResult, DomainError]:
        """Handle login.

        Returns:
            Success(LoginResult) on valid credentials for an unlocked account.
            Failure(AuthenticationError) on unknown email or wrong password.
            Failure(AccountLockedError) while the account is locked.
            Failure(NotFoundError) if the account vanished before the reset.

        Side Effects:
            - Increments failed_login_attempts on wrong password (may lock).
            - Clears failed_login_attempts and lock_until on success.

        Raises:
            AuthOperationError: On unexpected infrastructure failure.
        """
        with infrastructure_guard("login", self._logger):
            now = datetime.now(UTC)

            # Step 1: Find account
            account = await self._account_repo.find_by_email(cmd.email)
            if account is None:
                self._logger.info("login_failed", reason="account_not_found")
                return Failure(error=self._invalid_credentials())

            # Step 2: Locked accounts are refused before the password is checked
            if account.is_locked(now):
                retry_after = account.lock_remaining_minutes(now)
                self._logger.warning(
                    "login_refused_locked",
                    account_id=account.id,
                    retry_after_minutes=retry_after,
                )
                return Failure(
                    error=AccountLockedError(
                        code=ErrorCode.ACCOUNT_LOCKED,
                        message=AuthMessage.ACCOUNT_LOCKED,
                        retry_after_minutes=retry_after,
                    )
                )

            # Step 3: Verify password off the event loop
            password_ok = await asyncio.to_thread(
                self._password_service.verify_password,
                cmd.password,
                account.password_hash,
            )

            # Step 4: Wrong password
            if not password_ok:
                updated = await self._account_repo.record_failed_login(
                    account.id,
                    max_attempts=Account.lockout_threshold(),
                    lock_until=Account.lock_deadline(now),
                )
                if updated is not None and updated.is_locked(now):
                    self._logger.warning(
                        "account_locked",
                        account_id=account.id,
                        failed_login_attempts=updated.failed_login_attempts,
                    )
                else:
                    self._logger.info(
                        "login_failed",
                        reason="invalid_password",
                        account_id=account.id,
                    )
                return Failure(error=self._invalid_credentials())

            # Step 5: Success
            updated = await self._account_repo.update(
                account.id, failed_login_attempts=0, lock_until=None
            )
            if updated is None:
                # Row deleted between lookup and reset
                self._logger.info(
                    "login_failed", reason="account_deleted", account_id=account.id
                )
                return Failure(
                    error=NotFoundError(
                        code=ErrorCode.ACCOUNT_NOT_FOUND,
                        message=AuthMessage.ACCOUNT_NOT_FOUND,
                        resource_type="Account",
                        resource_id=str(account.id),
                    )
                )
            account = updated
            tokens = TokenPair.issue(self._token_service, account)

            self._logger.info("login_succeeded", account_id=account.id)

            return Success(
                value=LoginResult(
                    account=PublicAccount.from_account(account),
                    tokens=tokens,
                )
            )

    @staticmethod
    def _invalid_credentials() -> AuthenticationError:
        return AuthenticationError(
            code=ErrorCode.INVALID_CREDENTIALS,
            message=AuthMessage.INVALID_CREDENTIALS,
        )
