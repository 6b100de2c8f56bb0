"""Authentication commands (CQRS write operations).

Commands represent intent to change system state. All commands are
immutable (frozen=True) and use keyword-only arguments (kw_only=True).

Pattern:
- Commands are data containers (no logic)
- Handlers execute business logic and return Result types
- Input shape is validated at the boundary (ipauth.schemas) before a
  command is built; the Annotated types document the expected shape
"""

from dataclasses import dataclass

from ipauth.domain.types import Email, OpaqueToken, Password, Username, WalletAddress


@dataclass(frozen=True, kw_only=True)
class RegisterAccount:
    """Register new account.

    Creates an unverified account, issues tokens and a verification token.

    Attributes:
        username: Unique username.
        email: Unique email address.
        password: Plaintext password (hashed before persistence).
        wallet_address: External chain address.

    Example:
        >>> command = RegisterAccount(
        ...     username="alice",
        ...     email="a@x.com",
        ...     password="Abcd1234",
        ...     wallet_address="0x" + "1" * 40,
        ... )
        >>> result = await handler.handle(command)
    """

    username: Username
    email: Email
    password: Password
    wallet_address: WalletAddress


@dataclass(frozen=True, kw_only=True)
class LoginAccount:
    """Log in with email and password, subject to lockout.

    Attributes:
        email: Account email address.
        password: Plaintext password.
    """

    email: str
    password: str


@dataclass(frozen=True, kw_only=True)
class RefreshTokens:
    """Exchange a refresh token for a brand-new token pair.

    The presented refresh token is not revoked.

    Attributes:
        refresh_token: JWT refresh token.
    """

    refresh_token: str


@dataclass(frozen=True, kw_only=True)
class VerifyEmail:
    """Verify email address with the token issued at registration.

    Attributes:
        token: Verification token.
    """

    token: OpaqueToken


@dataclass(frozen=True, kw_only=True)
class RequestPasswordReset:
    """Request a password reset token.

    Always succeeds with the same message, whether or not the email exists.

    Attributes:
        email: Account email address.
    """

    email: str


@dataclass(frozen=True, kw_only=True)
class ResetPassword:
    """Consume a reset token and set a new password.

    Attributes:
        token: Reset token from RequestPasswordReset.
        new_password: New plaintext password.
    """

    token: OpaqueToken
    new_password: Password


@dataclass(frozen=True, kw_only=True)
class ChangePassword:
    """Change password of an authenticated account.

    Attributes:
        account_id: Account id from an already verified session.
        current_password: Current plaintext password.
        new_password: New plaintext password.
    """

    account_id: int
    current_password: str
    new_password: Password


@dataclass(frozen=True, kw_only=True)
class UpdateProfile:
    """Update any subset of username, email and wallet address.

    Fields left as None are not changed.

    Example:
        >>> command = UpdateProfile(account_id=1, username="alice_2")
    """

    account_id: int
    username: Username | None = None
    email: Email | None = None
    wallet_address: WalletAddress | None = None
