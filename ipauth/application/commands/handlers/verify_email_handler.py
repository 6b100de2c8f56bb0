"""Verify email handler.

Flow:
1. Find account by exact verification token; none -> InvalidToken
2. Already verified -> Success without modification
3. Set is_verified and clear the token in one conditional update

The token is cleared on success, so replaying it afterwards fails with
InvalidToken.
"""

from ipauth.application.commands.auth_commands import VerifyEmail
from ipauth.application.dtos import PublicAccount
from ipauth.application.errors import infrastructure_guard
from ipauth.core.enums import ErrorCode
from ipauth.core.errors import DomainError
from ipauth.core.result import Failure, Result, Success
from ipauth.domain.errors import AuthMessage, TokenError
from ipauth.domain.protocols import AccountRepositoryProtocol, LoggerProtocol


class VerifyEmailHandler:
    """Handler for email verification."""

    def __init__(
        self,
        account_repo: AccountRepositoryProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._account_repo = account_repo
        self._logger = logger

    async def handle(self, cmd: VerifyEmail) -> Result[PublicAccount, DomainError]:
        """Handle email verification.

        Returns:
            Success(PublicAccount) once the account is verified.
            Failure(TokenError) if no account holds the token.
        """
        with infrastructure_guard("verify_email", self._logger):
            account = await self._account_repo.find_by_verification_token(cmd.token)
            if account is None:
                self._logger.info("email_verification_failed", reason="token_not_found")
                return Failure(error=self._invalid_token())

            if account.is_verified:
                self._logger.info("email_already_verified", account_id=account.id)
                return Success(value=PublicAccount.from_account(account))

            verified = await self._account_repo.mark_verified(account.id, cmd.token)
            if verified is None:
                # Token consumed by a concurrent request
                self._logger.info("email_verification_failed", reason="token_consumed")
                return Failure(error=self._invalid_token())

            self._logger.info("email_verified", account_id=verified.id)
            return Success(value=PublicAccount.from_account(verified))

    @staticmethod
    def _invalid_token() -> TokenError:
        return TokenError(
            code=ErrorCode.TOKEN_INVALID,
            message=AuthMessage.INVALID_VERIFICATION_TOKEN,
            token_type="verification",
        )
