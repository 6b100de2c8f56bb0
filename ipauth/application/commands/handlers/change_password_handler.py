"""Change password handler (authenticated).

Flow:
1. Load account by id; missing -> AccountNotFound
2. Verify current password (worker thread); mismatch -> InvalidCredentials
3. Hash new password, store it and clear lockout counters

Known limitation: refresh tokens issued before the change stay valid until
their own expiry.
"""

import asyncio

from ipauth.application.commands.auth_commands import ChangePassword
from ipauth.application.dtos import PublicAccount
from ipauth.application.errors import infrastructure_guard
from ipauth.core.enums import ErrorCode
from ipauth.core.errors import AuthenticationError, DomainError, NotFoundError
from ipauth.core.result import Failure, Result, Success
from ipauth.domain.errors import AuthMessage
from ipauth.domain.protocols import (
    AccountRepositoryProtocol,
    LoggerProtocol,
    PasswordHashingProtocol,
)


class ChangePasswordHandler:
    """Handler for password change by an authenticated account."""

    def __init__(
        self,
        account_repo: AccountRepositoryProtocol,
        password_service: PasswordHashingProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._account_repo = account_repo
        self._password_service = password_service
        self._logger = logger

    async def handle(self, cmd: ChangePassword) -> Result[PublicAccount, DomainError]:
        """Handle password change.

        Returns:
            Success(PublicAccount) after the password is replaced.
            Failure(NotFoundError) if the id does not resolve.
            Failure(AuthenticationError) if the current password is wrong.
        """
        with infrastructure_guard("change_password", self._logger):
            account = await self._account_repo.find_by_id(cmd.account_id)
            if account is None:
                return Failure(
                    error=NotFoundError(
                        code=ErrorCode.ACCOUNT_NOT_FOUND,
                        message=AuthMessage.ACCOUNT_NOT_FOUND,
                        resource_type="Account",
                        resource_id=str(cmd.account_id),
                    )
                )

            current_ok = await asyncio.to_thread(
                self._password_service.verify_password,
                cmd.current_password,
                account.password_hash,
            )
            if not current_ok:
                self._logger.info("password_change_failed", account_id=account.id)
                return Failure(
                    error=AuthenticationError(
                        code=ErrorCode.INVALID_CREDENTIALS,
                        message=AuthMessage.CURRENT_PASSWORD_INCORRECT,
                    )
                )

            password_hash = await asyncio.to_thread(
                self._password_service.hash_password, cmd.new_password
            )
            updated = await self._account_repo.update(
                account.id,
                password_hash=password_hash,
                failed_login_attempts=0,
                lock_until=None,
            )

            self._logger.info("password_changed", account_id=account.id)
            return Success(value=PublicAccount.from_account(updated or account))
