"""Pytest configuration for async testing.

This configuration ensures:
1. Settings can load (a test secret and environment are provided)
2. Async tests are marked for pytest-asyncio automatically
3. Database fixtures use a fresh SQLite file per test
4. Shared builders for Account entities and test doubles
"""

import inspect
import os
from datetime import UTC, datetime
from unittest.mock import Mock

# Settings require SECRET_KEY; set test values before ipauth is imported
os.environ.setdefault("SECRET_KEY", "test-secret-key-that-is-at-least-32-chars")
os.environ.setdefault("ENVIRONMENT", "testing")

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402

from ipauth.domain.entities.account import Account  # noqa: E402
from ipauth.infrastructure.persistence.database import Database  # noqa: E402
from ipauth.infrastructure.security import (  # noqa: E402
    BcryptPasswordService,
    JWTService,
    OpaqueTokenService,
)

TEST_SECRET_KEY = "test-secret-key-that-is-at-least-32-chars"
WALLET = "0x" + "1" * 40


def create_account(
    account_id: int = 1,
    username: str = "alice",
    email: str = "a@x.com",
    password_hash: str = "$2b$12$hashed",
    wallet_address: str = WALLET,
    is_verified: bool = False,
    verification_token: str | None = "a" * 64,
    failed_login_attempts: int = 0,
    lock_until: datetime | None = None,
    reset_password_token: str | None = None,
    reset_password_expires: datetime | None = None,
) -> Account:
    """Build an Account entity with sensible defaults for tests."""
    now = datetime.now(UTC)
    return Account(
        id=account_id,
        username=username,
        email=email,
        password_hash=password_hash,
        wallet_address=wallet_address,
        is_verified=is_verified,
        verification_token=verification_token,
        failed_login_attempts=failed_login_attempts,
        lock_until=lock_until,
        reset_password_token=reset_password_token,
        reset_password_expires=reset_password_expires,
        created_at=now,
        updated_at=now,
    )


@pytest.fixture
def mock_logger():
    """Logger double; assertions can inspect its calls."""
    return Mock()


@pytest.fixture
def password_service():
    """Real bcrypt service at the minimum cost factor for speed."""
    return BcryptPasswordService(cost_factor=10)


@pytest.fixture
def token_service():
    """Real JWT service with the test secret."""
    return JWTService(secret_key=TEST_SECRET_KEY)


@pytest.fixture
def opaque_token_service():
    return OpaqueTokenService()


@pytest_asyncio.fixture
async def test_database(tmp_path):
    """Provide a fresh SQLite database with the schema created.

    Each test gets its own database file, so tests are fully isolated.
    """
    db = Database(database_url=f"sqlite+aiosqlite:///{tmp_path / 'ipauth_test.db'}")
    await db.create_all()
    yield db
    await db.drop_all()
    await db.close()


# Pytest markers for different test types
def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests with mocked dependencies")
    config.addinivalue_line(
        "markers", "integration: Integration tests with real database"
    )


def pytest_collection_modifyitems(config, items):
    """Automatically add asyncio marker to async test functions."""
    for item in items:
        if inspect.iscoroutinefunction(getattr(item, "function", None)):
            item.add_marker(pytest.mark.asyncio)


@pytest.fixture
def account_factory():
    """Return the create_account builder."""
    return create_account
