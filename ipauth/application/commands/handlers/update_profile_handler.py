"""Update profile handler.

Flow:
1. Load account by id; missing -> AccountNotFound
2. Keep only fields that actually change
3. A new username/email held by a DIFFERENT account -> Conflict
4. Apply the partial update; a unique violation at write time -> Conflict
"""

from typing import Any

from ipauth.application.commands.auth_commands import UpdateProfile
from ipauth.application.dtos import PublicAccount
from ipauth.application.errors import infrastructure_guard
from ipauth.core.enums import ErrorCode
from ipauth.core.errors import ConflictError, DomainError, NotFoundError
from ipauth.core.result import Failure, Result, Success
from ipauth.domain.errors import AuthMessage
from ipauth.domain.protocols import AccountRepositoryProtocol, LoggerProtocol


class UpdateProfileHandler:
    """Handler for username/email/wallet updates."""

    def __init__(
        self,
        account_repo: AccountRepositoryProtocol,
        logger: LoggerProtocol,
    ) -> None:
        self._account_repo = account_repo
        self._logger = logger

    async def handle(self, cmd: UpdateProfile) -> Result[PublicAccount, DomainError]:
        """Handle profile update.

        Returns:
            Success(PublicAccount) with the updated fields (unchanged profile
            when nothing differs).
            Failure(NotFoundError) if the id does not resolve.
            Failure(ConflictError) if the new username or email is taken.
        """
        with infrastructure_guard("update_profile", self._logger):
            account = await self._account_repo.find_by_id(cmd.account_id)
            if account is None:
                return Failure(error=self._not_found(cmd.account_id))

            changes: dict[str, Any] = {}
            if cmd.username is not None and cmd.username != account.username:
                changes["username"] = cmd.username
            if cmd.email is not None and cmd.email != account.email:
                changes["email"] = cmd.email
            if (
                cmd.wallet_address is not None
                and cmd.wallet_address != account.wallet_address
            ):
                changes["wallet_address"] = cmd.wallet_address

            if not changes:
                return Success(value=PublicAccount.from_account(account))

            if "username" in changes or "email" in changes:
                existing = await self._account_repo.find_conflicting(
                    username=changes.get("username"),
                    email=changes.get("email"),
                    exclude_id=account.id,
                )
                if existing is not None:
                    if "email" in changes and existing.email == changes["email"]:
                        conflicting_field, message = "email", AuthMessage.EMAIL_TAKEN
                    else:
                        conflicting_field, message = "username", AuthMessage.USERNAME_TAKEN
                    self._logger.info(
                        "profile_update_conflict",
                        account_id=account.id,
                        conflicting_field=conflicting_field,
                    )
                    return Failure(
                        error=ConflictError(
                            code=ErrorCode.CONFLICT,
                            message=message,
                            resource_type="Account",
                            conflicting_field=conflicting_field,
                        )
                    )

            update_result = await self._account_repo.update_profile(account.id, **changes)
            if isinstance(update_result, Failure):
                # Value taken by a concurrent request after the pre-check
                self._logger.info(
                    "profile_update_conflict",
                    account_id=account.id,
                    conflicting_field=None,
                )
                return update_result
            updated = update_result.value
            if updated is None:
                return Failure(error=self._not_found(cmd.account_id))

            self._logger.info(
                "profile_updated", account_id=account.id, fields=sorted(changes)
            )
            return Success(value=PublicAccount.from_account(updated))

    @staticmethod
    def _not_found(account_id: int) -> NotFoundError:
        return NotFoundError(
            code=ErrorCode.ACCOUNT_NOT_FOUND,
            message=AuthMessage.ACCOUNT_NOT_FOUND,
            resource_type="Account",
            resource_id=str(account_id),
        )
