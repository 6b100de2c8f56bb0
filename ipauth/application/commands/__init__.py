"""Commands (CQRS write operations).

Usage:
    from ipauth.application.commands import LoginAccount
"""

from ipauth.application.commands.auth_commands import (
    ChangePassword,
    LoginAccount,
    RefreshTokens,
    RegisterAccount,
    RequestPasswordReset,
    ResetPassword,
    UpdateProfile,
    VerifyEmail,
)

__all__ = [
    "ChangePassword",
    "LoginAccount",
    "RefreshTokens",
    "RegisterAccount",
    "RequestPasswordReset",
    "ResetPassword",
    "UpdateProfile",
    "VerifyEmail",
]
