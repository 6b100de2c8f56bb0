"""Data transfer objects returned by handlers."""

from ipauth.application.dtos.auth_dtos import (
    AccountStats,
    LoginResult,
    PasswordResetRequestResult,
    PublicAccount,
    RegistrationResult,
    TokenPair,
)

__all__ = [
    "AccountStats",
    "LoginResult",
    "PasswordResetRequestResult",
    "PublicAccount",
    "RegistrationResult",
    "TokenPair",
]
