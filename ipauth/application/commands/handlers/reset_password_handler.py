"""Reset password handler (consumes a reset token).

Flow:
1. Find account by token with expiry strictly in the future
2. None -> InvalidOrExpiredToken (no distinction between the two)
3. Hash new password (worker thread)
4. Store hash, clear reset fields and lift any lockout, re-checking the
   token in the same statement
"""

import asyncio
from datetime import UTC, datetime

from ipauth.application.commands.auth_commands import ResetPassword
from ipauth.application.dtos import PublicAccount
from ipauth.application.errors import infrastructure_guard
from ipauth.core.enums import ErrorCode
from ipauth.core.errors import DomainError
from ipauth.core.result import Failure, Result, Success
from ipauth.domain.errors import AuthMessage, TokenError
from ipauth.domain.protocols import (
    AccountRepositoryProtocol,
    LoggerProtocol,
    PasswordHashingProtocol,
)


class ResetPasswordHandler:
    """Handler for password reset consummation."""

    def __init__(
        self,
        account_repo: AccountRepositoryProtocol,
        password_service: PasswordHashingProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._account_repo = account_repo
        self._password_service = password_service
        self._logger = logger

    async def handle(self, cmd: ResetPassword) -> Result[PublicAccount, DomainError]:
        """Handle password reset.

        Returns:
            Success(PublicAccount) after the password is replaced.
            Failure(TokenError) with RESET_TOKEN_INVALID otherwise.

        Side Effects:
            - Clears reset_password_token and reset_password_expires.
            - Resets failed_login_attempts and lock_until.
        """
        with infrastructure_guard("reset_password", self._logger):
            now = datetime.now(UTC)

            account = await self._account_repo.find_by_reset_token(
                cmd.token, not_expired_before=now
            )
            if account is None:
                self._logger.info("password_reset_failed", reason="invalid_or_expired")
                return Failure(error=self._invalid_or_expired())

            password_hash = await asyncio.to_thread(
                self._password_service.hash_password, cmd.new_password
            )

            updated = await self._account_repo.consume_reset_token(
                cmd.token, not_expired_before=now, password_hash=password_hash
            )
            if updated is None:
                self._logger.info("password_reset_failed", reason="token_consumed")
                return Failure(error=self._invalid_or_expired())

            self._logger.info("password_reset_completed", account_id=updated.id)
            return Success(value=PublicAccount.from_account(updated))

    @staticmethod
    def _invalid_or_expired() -> TokenError:
        return TokenError(
            code=ErrorCode.RESET_TOKEN_INVALID,
            message=AuthMessage.INVALID_OR_EXPIRED_RESET_TOKEN,
            token_type="reset",
        )
