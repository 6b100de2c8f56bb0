"""GetAccountStats query handler."""

from datetime import UTC, datetime

from ipauth.application.dtos import AccountStats
from ipauth.application.errors import infrastructure_guard
from ipauth.application.queries.account_queries import GetAccountStats
from ipauth.core.errors import DomainError
from ipauth.core.result import Result, Success
from ipauth.domain.protocols import AccountRepositoryProtocol, LoggerProtocol


class GetAccountStatsHandler:
    """Handler for GetAccountStats query.

    Locked means lock_until is later than the moment the query runs.
    """

    def __init__(
        self,
        account_repo: AccountRepositoryProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._account_repo = account_repo
        self._logger = logger

    async def handle(self, query: GetAccountStats) -> Result[AccountStats, DomainError]:
        with infrastructure_guard("get_account_stats", self._logger):
            total = await self._account_repo.count()
            verified = await self._account_repo.count(is_verified=True)
            locked = await self._account_repo.count(locked_at=datetime.now(UTC))
            return Success(
                value=AccountStats(
                    total_accounts=total,
                    verified_accounts=verified,
                    unverified_accounts=total - verified,
                    locked_accounts=locked,
                )
            )
