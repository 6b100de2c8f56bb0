"""Infrastructure dependency factories.

Application-scoped singletons for core infrastructure services:
- Database (SQLAlchemy async engine)
- Password hashing (bcrypt)
- Token generation (JWT)
- Opaque tokens (verification/reset)
- Logging (structlog console)
"""

from contextlib import asynccontextmanager
from functools import lru_cache
from typing import TYPE_CHECKING, AsyncGenerator

from sqlalchemy.ext.asyncio import AsyncSession

from ipauth.core.config import get_settings
from ipauth.infrastructure.persistence.database import Database

if TYPE_CHECKING:
    from ipauth.domain.protocols import (
        LoggerProtocol,
        PasswordHashingProtocol,
        RandomTokenProtocol,
        TokenGenerationProtocol,
    )


# ============================================================================
# Application-Scoped Dependencies (Singletons)
# ============================================================================


@lru_cache()
def get_database() -> Database:
    """Get database manager singleton (app-scoped).

    Use get_db_session() for per-request sessions.
    """
    settings = get_settings()
    return Database(
        database_url=settings.database_url,
        echo=settings.db_echo,
    )


@lru_cache()
def get_password_service() -> "PasswordHashingProtocol":
    """Get password hashing service singleton (app-scoped).

    Returns BcryptPasswordService with the configured cost factor (default 12).
    """
    from ipauth.infrastructure.security import BcryptPasswordService

    return BcryptPasswordService(cost_factor=get_settings().bcrypt_rounds)


@lru_cache()
def get_token_service() -> "TokenGenerationProtocol":
    """Get JWT token service singleton (app-scoped).

    Returns JWTService with 24 hour access and 7 day refresh lifetimes.
    """
    from ipauth.infrastructure.security import JWTService

    settings = get_settings()
    return JWTService(
        secret_key=settings.secret_key,
        algorithm=settings.algorithm,
        access_expiration_hours=settings.access_token_expire_hours,
        refresh_expiration_days=settings.refresh_token_expire_days,
    )


@lru_cache()
def get_opaque_token_service() -> "RandomTokenProtocol":
    """Get opaque token service singleton (app-scoped)."""
    from ipauth.infrastructure.security import OpaqueTokenService

    return OpaqueTokenService()


@lru_cache()
def get_logger() -> "LoggerProtocol":
    """Return the application-scoped logger singleton.

    - development: ConsoleAdapter (human-readable)
    - testing/ci/production: ConsoleAdapter (JSON)
    """
    from ipauth.infrastructure.logging.console_adapter import ConsoleAdapter

    settings = get_settings()
    level = "DEBUG" if settings.debug else settings.log_level
    return ConsoleAdapter(use_json=not settings.is_development, level=level)


# ============================================================================
# Request-Scoped Dependencies (Per-Request)
# ============================================================================


@asynccontextmanager
async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """Get database session (request-scoped).

    Commits on success, rolls back on exception, always closes.

    Usage:
        async with get_db_session() as session:
            handler = get_login_account_handler(session)
    """
    db = get_database()
    async with db.get_session() as session:
        yield session
