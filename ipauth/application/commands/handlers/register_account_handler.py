"""Register account handler.

Flow:
1. Reject if the username OR email is already taken
2. Hash password (worker thread)
3. Generate email verification token
4. Persist unverified account
5. Issue access/refresh token pair
6. Return Success(RegistrationResult)

Sending the verification email is the caller's job; the raw token is
returned for that purpose.
"""

import asyncio

from ipauth.application.commands.auth_commands import RegisterAccount
from ipauth.application.dtos import PublicAccount, RegistrationResult, TokenPair
from ipauth.application.errors import infrastructure_guard
from ipauth.core.enums import ErrorCode
from ipauth.core.errors import ConflictError, DomainError
from ipauth.core.result import Failure, Result, Success
from ipauth.domain.errors import AuthMessage
from ipauth.domain.protocols import (
    AccountRepositoryProtocol,
    LoggerProtocol,
    PasswordHashingProtocol,
    RandomTokenProtocol,
    TokenGenerationProtocol,
)


class RegisterAccountHandler:
    """Handler for account registration.

    Follows hexagonal architecture:
    - Application layer (this handler)
    - Domain layer (Account entity, protocols)
    - Infrastructure layer (injected adapters)
    """

    def __init__(
        self,
        account_repo: AccountRepositoryProtocol,
        password_service: PasswordHashingProtocol,
        token_service: TokenGenerationProtocol,
        opaque_token_service: RandomTokenProtocol,
        logger: LoggerProtocol,
    ) -> None:
        """Initialize handler with dependencies.

        Args:
            account_repo: Account repository for persistence.
            password_service: Password hashing service.
            token_service: JWT access/refresh token issuer.
            opaque_token_service: Verification token generator.
            logger: Structured logger.
        """
        self._account_repo = account_repo
        self._password_service = password_service
        self._token_service = token_service
        self._opaque_token_service = opaque_token_service
        self._logger = logger

    async def handle(self, cmd: RegisterAccount) -> Result[RegistrationResult, DomainError]:
        """Handle account registration.

        Returns:
            Success(RegistrationResult) with public fields, tokens and the
            raw verification token.
            Failure(ConflictError) if the username or email is taken.

        Raises:
            AuthOperationError: On unexpected infrastructure failure.
        """
        with infrastructure_guard("register", self._logger):
            # Step 1: Uniqueness pre-check (the unique constraints still back it up)
            existing = await self._account_repo.find_conflicting(
                username=cmd.username, email=cmd.email
            )
            if existing is not None:
                conflicting_field = "email" if existing.email == cmd.email else "username"
                self._logger.warning(
                    "registration_conflict", conflicting_field=conflicting_field
                )
                return Failure(
                    error=ConflictError(
                        code=ErrorCode.CONFLICT,
                        message=AuthMessage.ACCOUNT_ALREADY_EXISTS,
                        resource_type="Account",
                        conflicting_field=conflicting_field,
                    )
                )

            # Step 2: Hash password off the event loop
            password_hash = await asyncio.to_thread(
                self._password_service.hash_password, cmd.password
            )

            # Step 3: Verification token
            verification_token = self._opaque_token_service.generate_token()

            # Step 4: Persist
            create_result = await self._account_repo.create(
                username=cmd.username,
                email=cmd.email,
                password_hash=password_hash,
                wallet_address=cmd.wallet_address,
                verification_token=verification_token,
            )
            if isinstance(create_result, Failure):
                self._logger.warning("registration_conflict", conflicting_field=None)
                return create_result
            account = create_result.value

            # Step 5: Tokens
            tokens = TokenPair.issue(self._token_service, account)

            self._logger.info("account_registered", account_id=account.id)

            # Step 6: Return
            return Success(
                value=RegistrationResult(
                    account=PublicAccount.from_account(account),
                    tokens=tokens,
                    verification_token=verification_token,
                )
            )
