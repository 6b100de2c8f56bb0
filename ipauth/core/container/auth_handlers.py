"""Authentication handler dependency factories.

Request-scoped handler instances. Each factory builds an AccountRepository
on the caller's session and pulls the app-scoped singletons from
``ipauth.core.container.infrastructure``.
"""

from typing import TYPE_CHECKING

from sqlalchemy.ext.asyncio import AsyncSession

from ipauth.core.config import get_settings
from ipauth.core.container.infrastructure import (
    get_logger,
    get_opaque_token_service,
    get_password_service,
    get_token_service,
)
from ipauth.infrastructure.persistence.repositories import AccountRepository

if TYPE_CHECKING:
    from ipauth.application.commands.handlers import (
        ChangePasswordHandler,
        LoginAccountHandler,
        RefreshTokensHandler,
        RegisterAccountHandler,
        RequestPasswordResetHandler,
        ResetPasswordHandler,
        UpdateProfileHandler,
        VerifyEmailHandler,
    )
    from ipauth.application.queries.handlers import (
        GetAccountStatsHandler,
        GetProfileHandler,
        VerifyAccessTokenHandler,
    )


def get_register_account_handler(session: AsyncSession) -> "RegisterAccountHandler":
    """Get RegisterAccount command handler (request-scoped).

    Dependencies:
    - AccountRepository (request-scoped, uses session)
    - BcryptPasswordService, JWTService, OpaqueTokenService (singletons)
    """
    from ipauth.application.commands.handlers import RegisterAccountHandler

    return RegisterAccountHandler(
        account_repo=AccountRepository(session=session),
        password_service=get_password_service(),
        token_service=get_token_service(),
        opaque_token_service=get_opaque_token_service(),
        logger=get_logger(),
    )


def get_login_account_handler(session: AsyncSession) -> "LoginAccountHandler":
    """Get LoginAccount command handler (request-scoped)."""
    from ipauth.application.commands.handlers import LoginAccountHandler

    return LoginAccountHandler(
        account_repo=AccountRepository(session=session),
        password_service=get_password_service(),
        token_service=get_token_service(),
        logger=get_logger(),
    )


def get_refresh_tokens_handler(session: AsyncSession) -> "RefreshTokensHandler":
    """Get RefreshTokens command handler (request-scoped)."""
    from ipauth.application.commands.handlers import RefreshTokensHandler

    return RefreshTokensHandler(
        account_repo=AccountRepository(session=session),
        token_service=get_token_service(),
        logger=get_logger(),
    )


def get_verify_email_handler(session: AsyncSession) -> "VerifyEmailHandler":
    """Get VerifyEmail command handler (request-scoped)."""
    from ipauth.application.commands.handlers import VerifyEmailHandler

    return VerifyEmailHandler(
        account_repo=AccountRepository(session=session),
        logger=get_logger(),
    )


def get_request_password_reset_handler(
    session: AsyncSession,
) -> "RequestPasswordResetHandler":
    """Get RequestPasswordReset command handler (request-scoped).

    Reset token lifetime comes from settings (default 1 hour).
    """
    from ipauth.application.commands.handlers import RequestPasswordResetHandler

    return RequestPasswordResetHandler(
        account_repo=AccountRepository(session=session),
        opaque_token_service=get_opaque_token_service(),
        logger=get_logger(),
        expiration_hours=get_settings().password_reset_expire_hours,
    )


def get_reset_password_handler(session: AsyncSession) -> "ResetPasswordHandler":
    """Get ResetPassword command handler (request-scoped)."""
    from ipauth.application.commands.handlers import ResetPasswordHandler

    return ResetPasswordHandler(
        account_repo=AccountRepository(session=session),
        password_service=get_password_service(),
        logger=get_logger(),
    )


def get_change_password_handler(session: AsyncSession) -> "ChangePasswordHandler":
    """Get ChangePassword command handler (request-scoped)."""
    from ipauth.application.commands.handlers import ChangePasswordHandler

    return ChangePasswordHandler(
        account_repo=AccountRepository(session=session),
        password_service=get_password_service(),
        logger=get_logger(),
    )


def get_update_profile_handler(session: AsyncSession) -> "UpdateProfileHandler":
    """Get UpdateProfile command handler (request-scoped)."""
    from ipauth.application.commands.handlers import UpdateProfileHandler

    return UpdateProfileHandler(
        account_repo=AccountRepository(session=session),
        logger=get_logger(),
    )


def get_get_profile_handler(session: AsyncSession) -> "GetProfileHandler":
    """Get GetProfile query handler (request-scoped)."""
    from ipauth.application.queries.handlers import GetProfileHandler

    return GetProfileHandler(
        account_repo=AccountRepository(session=session),
        logger=get_logger(),
    )


def get_verify_access_token_handler(
    session: AsyncSession,
) -> "VerifyAccessTokenHandler":
    """Get VerifyAccessToken query handler (request-scoped)."""
    from ipauth.application.queries.handlers import VerifyAccessTokenHandler

    return VerifyAccessTokenHandler(
        account_repo=AccountRepository(session=session),
        token_service=get_token_service(),
        logger=get_logger(),
    )


def get_get_account_stats_handler(session: AsyncSession) -> "GetAccountStatsHandler":
    """Get GetAccountStats query handler (request-scoped)."""
    from ipauth.application.queries.handlers import GetAccountStatsHandler

    return GetAccountStatsHandler(
        account_repo=AccountRepository(session=session),
        logger=get_logger(),
    )
