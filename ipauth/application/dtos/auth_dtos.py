"""Authentication DTOs (Data Transfer Objects).

Result dataclasses carried from handlers back to the caller. None of them
ever contains a password hash; opaque tokens appear only where the caller
must deliver them out of band (verification and reset).
"""

from dataclasses import dataclass
from datetime import datetime

from ipauth.core.constants import BEARER_TOKEN_TYPE
from ipauth.domain.entities.account import Account
from ipauth.domain.errors import AuthMessage
from ipauth.domain.protocols import TokenGenerationProtocol


@dataclass(frozen=True, kw_only=True)
class PublicAccount:
    """Public account fields.

    Attributes:
        id: Account identifier.
        username: Username.
        email: Email address.
        wallet_address: External chain address.
        is_verified: Email verification status.
        created_at: Creation timestamp.
    """

    id: int
    username: str
    email: str
    wallet_address: str
    is_verified: bool
    created_at: datetime | None = None

    @classmethod
    def from_account(cls, account: Account) -> "PublicAccount":
        return cls(
            id=account.id,
            username=account.username,
            email=account.email,
            wallet_address=account.wallet_address,
            is_verified=account.is_verified,
            created_at=account.created_at,
        )


@dataclass(frozen=True, kw_only=True)
class TokenPair:
    """Access and refresh tokens issued together.

    Attributes:
        access_token: JWT access token (24 hours).
        refresh_token: JWT refresh token (7 days).
        token_type: Token type (always "bearer").
        expires_in: Access token expiration in seconds.
    """

    access_token: str
    refresh_token: str
    token_type: str = BEARER_TOKEN_TYPE
    expires_in: int = 86400

    @classmethod
    def issue(cls, token_service: TokenGenerationProtocol, account: Account) -> "TokenPair":
        """Sign a fresh access/refresh pair for the account."""
        return cls(
            access_token=token_service.generate_access_token(
                account_id=account.id,
                username=account.username,
                email=account.email,
                wallet_address=account.wallet_address,
            ),
            refresh_token=token_service.generate_refresh_token(account.id),
            expires_in=token_service.access_token_expires_in,
        )


@dataclass(frozen=True, kw_only=True)
class RegistrationResult:
    """Response from successful registration.

    Attributes:
        account: Public fields of the new account.
        tokens: Issued token pair.
        verification_token: Raw email verification token for delivery.
    """

    account: PublicAccount
    tokens: TokenPair
    verification_token: str


@dataclass(frozen=True, kw_only=True)
class LoginResult:
    """Response from successful login."""

    account: PublicAccount
    tokens: TokenPair


@dataclass(frozen=True, kw_only=True)
class PasswordResetRequestResult:
    """Response from a password reset request.

    The message is identical whether or not the email exists.

    Attributes:
        message: Generic confirmation message.
        reset_token: Raw reset token for delivery, None when no account matched.
    """

    message: str = AuthMessage.RESET_REQUESTED
    reset_token: str | None = None


@dataclass(frozen=True, kw_only=True)
class AccountStats:
    """Account counts by state.

    Attributes:
        total_accounts: All accounts.
        verified_accounts: Accounts with a verified email.
        unverified_accounts: Accounts still awaiting verification.
        locked_accounts: Accounts whose lock has not yet expired.
    """

    total_accounts: int
    verified_accounts: int
    unverified_accounts: int
    locked_accounts: int
