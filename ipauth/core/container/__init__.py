"""Dependency container (composition root).

Application-scoped singletons live in ``infrastructure``; request-scoped
handler factories live in ``auth_handlers``.

Usage:
    from ipauth.core.container import get_db_session, get_login_account_handler

    async with get_db_session() as session:
        handler = get_login_account_handler(session)
        result = await handler.handle(LoginAccount(email=..., password=...))
"""

from ipauth.core.container.auth_handlers import (
    get_change_password_handler,
    get_get_account_stats_handler,
    get_get_profile_handler,
    get_login_account_handler,
    get_refresh_tokens_handler,
    get_register_account_handler,
    get_request_password_reset_handler,
    get_reset_password_handler,
    get_update_profile_handler,
    get_verify_access_token_handler,
    get_verify_email_handler,
)
from ipauth.core.container.infrastructure import (
    get_database,
    get_db_session,
    get_logger,
    get_opaque_token_service,
    get_password_service,
    get_token_service,
)

__all__ = [
    # Infrastructure
    "get_database",
    "get_db_session",
    "get_logger",
    "get_opaque_token_service",
    "get_password_service",
    "get_token_service",
    # Handlers
    "get_change_password_handler",
    "get_get_account_stats_handler",
    "get_get_profile_handler",
    "get_login_account_handler",
    "get_refresh_tokens_handler",
    "get_register_account_handler",
    "get_request_password_reset_handler",
    "get_reset_password_handler",
    "get_update_profile_handler",
    "get_verify_access_token_handler",
    "get_verify_email_handler",
]
