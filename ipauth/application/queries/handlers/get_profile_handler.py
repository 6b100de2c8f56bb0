"""GetProfile query handler.

Returns the public fields only, never the password hash or tokens.
"""

from ipauth.application.dtos import PublicAccount
from ipauth.application.errors import infrastructure_guard
from ipauth.application.queries.account_queries import GetProfile
from ipauth.core.enums import ErrorCode
from ipauth.core.errors import DomainError, NotFoundError
from ipauth.core.result import Failure, Result, Success
from ipauth.domain.errors import AuthMessage
from ipauth.domain.protocols import AccountRepositoryProtocol, LoggerProtocol


class GetProfileHandler:
    """Handler for GetProfile query."""

    def __init__(
        self,
        account_repo: AccountRepositoryProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._account_repo = account_repo
        self._logger = logger

    async def handle(self, query: GetProfile) -> Result[PublicAccount, DomainError]:
        with infrastructure_guard("get_profile", self._logger):
            account = await self._account_repo.find_by_id(query.account_id)
            if account is None:
                return Failure(
                    error=NotFoundError(
                        code=ErrorCode.ACCOUNT_NOT_FOUND,
                        message=AuthMessage.ACCOUNT_NOT_FOUND,
                        resource_type="Account",
                        resource_id=str(query.account_id),
                    )
                )
            return Success(value=PublicAccount.from_account(account))
