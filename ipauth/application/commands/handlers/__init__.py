"""Command handlers.

Each handler executes one command and returns a Result. Dependencies are
injected through protocols; handlers never import infrastructure.
"""

from ipauth.application.commands.handlers.change_password_handler import (
    ChangePasswordHandler,
)
from ipauth.application.commands.handlers.login_account_handler import (
    LoginAccountHandler,
)
from ipauth.application.commands.handlers.refresh_tokens_handler import (
    RefreshTokensHandler,
)
from ipauth.application.commands.handlers.register_account_handler import (
    RegisterAccountHandler,
)
from ipauth.application.commands.handlers.request_password_reset_handler import (
    RequestPasswordResetHandler,
)
from ipauth.application.commands.handlers.reset_password_handler import (
    ResetPasswordHandler,
)
from ipauth.application.commands.handlers.update_profile_handler import (
    UpdateProfileHandler,
)
from ipauth.application.commands.handlers.verify_email_handler import (
    VerifyEmailHandler,
)

__all__ = [
    "ChangePasswordHandler",
    "LoginAccountHandler",
    "RefreshTokensHandler",
    "RegisterAccountHandler",
    "RequestPasswordResetHandler",
    "ResetPasswordHandler",
    "UpdateProfileHandler",
    "VerifyEmailHandler",
]
