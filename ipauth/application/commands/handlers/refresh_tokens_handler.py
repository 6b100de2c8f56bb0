"""Refresh tokens handler.

Flow:
1. Validate refresh token (signature, expiry, token type)
2. Load the referenced account
3. Issue a brand-new access/refresh pair

Known limitation: there is no revocation list, so the presented refresh
token stays valid until its own expiry.
"""

from ipauth.application.commands.auth_commands import RefreshTokens
from ipauth.application.dtos import TokenPair
from ipauth.application.errors import infrastructure_guard
from ipauth.core.enums import ErrorCode
from ipauth.core.errors import DomainError, NotFoundError
from ipauth.core.result import Failure, Result, Success
from ipauth.domain.errors import AuthMessage
from ipauth.domain.protocols import (
    AccountRepositoryProtocol,
    LoggerProtocol,
    TokenGenerationProtocol,
)


class RefreshTokensHandler:
    """Handler for exchanging a refresh token for a new token pair."""

    def __init__(
        self,
        account_repo: AccountRepositoryProtocol,
        token_service: TokenGenerationProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._account_repo = account_repo
        self._token_service = token_service
        self._logger = logger

    async def handle(self, cmd: RefreshTokens) -> Result[TokenPair, DomainError]:
        """Handle token refresh.

        Returns:
            Success(TokenPair) with new tokens.
            Failure(TokenError) with TOKEN_INVALID or TOKEN_EXPIRED.
            Failure(NotFoundError) if the account no longer exists.
        """
        with infrastructure_guard("refresh_tokens", self._logger):
            validation = self._token_service.validate_refresh_token(cmd.refresh_token)
            if isinstance(validation, Failure):
                self._logger.info("token_refresh_failed", reason=validation.error.code.value)
                return validation

            account_id = validation.value["id"]
            account = await self._account_repo.find_by_id(account_id)
            if account is None:
                self._logger.info("token_refresh_failed", reason="account_not_found")
                return Failure(
                    error=NotFoundError(
                        code=ErrorCode.ACCOUNT_NOT_FOUND,
                        message=AuthMessage.ACCOUNT_NOT_FOUND,
                        resource_type="Account",
                        resource_id=str(account_id),
                    )
                )

            self._logger.info("tokens_refreshed", account_id=account.id)
            return Success(value=TokenPair.issue(self._token_service, account))
