"""Request password reset handler.

Flow:
1. Find account by email
2. Not found -> same generic success (prevents account enumeration)
3. Found -> new token, expiry now + 1 hour, stored over any previous token
4. Return Success(PasswordResetRequestResult)

Only the latest token is valid. Delivering it is the caller's job.
"""

from ipauth.application.commands.auth_commands import RequestPasswordReset
from ipauth.application.dtos import PasswordResetRequestResult
from ipauth.application.errors import infrastructure_guard
from ipauth.core.constants import PASSWORD_RESET_EXPIRE_HOURS_DEFAULT
from ipauth.core.errors import DomainError
from ipauth.core.result import Result, Success
from ipauth.domain.protocols import (
    AccountRepositoryProtocol,
    LoggerProtocol,
    RandomTokenProtocol,
)


class RequestPasswordResetHandler:
    """Handler for password reset requests."""

    def __init__(
        self,
        account_repo: AccountRepositoryProtocol,
        opaque_token_service: RandomTokenProtocol,
        logger: LoggerProtocol,
        expiration_hours: int = PASSWORD_RESET_EXPIRE_HOURS_DEFAULT,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            account_repo: Account repository for persistence.
            opaque_token_service: Reset token generator.
            logger: Structured logger.
            expiration_hours: Reset token lifetime (default: 1).
        """
        self._account_repo = account_repo
        self._opaque_token_service = opaque_token_service
        self._logger = logger
        self._expiration_hours = expiration_hours

    async def handle(
        self, cmd: RequestPasswordReset
    ) -> Result[PasswordResetRequestResult, DomainError]:
        """Handle password reset request.

        Returns:
            Always Success(PasswordResetRequestResult). ``reset_token`` is
            None when no account matched.
        """
        with infrastructure_guard("request_password_reset", self._logger):
            account = await self._account_repo.find_by_email(cmd.email)
            if account is None:
                self._logger.info("password_reset_requested", account_found=False)
                return Success(value=PasswordResetRequestResult())

            token = self._opaque_token_service.generate_token()
            expires_at = self._opaque_token_service.calculate_expiration(
                hours=self._expiration_hours
            )
            await self._account_repo.update(
                account.id,
                reset_password_token=token,
                reset_password_expires=expires_at,
            )

            self._logger.info(
                "password_reset_requested", account_found=True, account_id=account.id
            )
            return Success(value=PasswordResetRequestResult(reset_token=token))
