"""VerifyAccessToken query handler.

Resolves a bearer access token to the current public profile of the
account it was issued for. Claims are only trusted for the account id;
the profile is always read fresh from the store.
"""

from ipauth.application.dtos import PublicAccount
from ipauth.application.errors import infrastructure_guard
from ipauth.application.queries.account_queries import VerifyAccessToken
from ipauth.core.enums import ErrorCode
from ipauth.core.errors import DomainError, NotFoundError
from ipauth.core.result import Failure, Result, Success
from ipauth.domain.errors import AuthMessage
from ipauth.domain.protocols import (
    AccountRepositoryProtocol,
    LoggerProtocol,
    TokenGenerationProtocol,
)


class VerifyAccessTokenHandler:
    """Handler for VerifyAccessToken query."""

    def __init__(
        self,
        account_repo: AccountRepositoryProtocol,
        token_service: TokenGenerationProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._account_repo = account_repo
        self._token_service = token_service
        self._logger = logger

    async def handle(self, query: VerifyAccessToken) -> Result[PublicAccount, DomainError]:
        """Verify the token and load its account.

        Returns:
            Success(PublicAccount) for a valid token of an existing account.
            Failure(TokenError) with TOKEN_INVALID or TOKEN_EXPIRED.
            Failure(NotFoundError) if the account was removed.
        """
        with infrastructure_guard("verify_access_token", self._logger):
            validation = self._token_service.validate_access_token(query.access_token)
            if isinstance(validation, Failure):
                return validation

            account_id = validation.value["id"]
            account = await self._account_repo.find_by_id(account_id)
            if account is None:
                return Failure(
                    error=NotFoundError(
                        code=ErrorCode.ACCOUNT_NOT_FOUND,
                        message=AuthMessage.ACCOUNT_NOT_FOUND,
                        resource_type="Account",
                        resource_id=str(account_id),
                    )
                )
            return Success(value=PublicAccount.from_account(account))
