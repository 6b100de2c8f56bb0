"""Unit tests for the dependency container.

Tests cover:
- Infrastructure singletons are cached and built from settings
- Handler factories wire an AccountRepository on the given session
- Reset request handler picks up the configured expiry
"""

from unittest.mock import MagicMock

import pytest

from ipauth.application.commands.handlers import (
    LoginAccountHandler,
    RegisterAccountHandler,
    RequestPasswordResetHandler,
)
from ipauth.application.queries.handlers import GetProfileHandler
from ipauth.core.config import get_settings
from ipauth.core.container import (
    get_get_profile_handler,
    get_login_account_handler,
    get_opaque_token_service,
    get_password_service,
    get_register_account_handler,
    get_request_password_reset_handler,
    get_token_service,
)
from ipauth.infrastructure.persistence.repositories import AccountRepository
from ipauth.infrastructure.security import (
    BcryptPasswordService,
    JWTService,
    OpaqueTokenService,
)


@pytest.fixture(autouse=True)
def clear_caches():
    caches = [get_settings, get_password_service, get_token_service, get_opaque_token_service]
    for cached in caches:
        cached.cache_clear()
    yield
    for cached in caches:
        cached.cache_clear()


@pytest.mark.unit
class TestInfrastructureSingletons:
    def test_password_service_uses_configured_rounds(self):
        service = get_password_service()

        assert isinstance(service, BcryptPasswordService)
        assert service.cost_factor == get_settings().bcrypt_rounds
        assert get_password_service() is service

    def test_token_service_is_singleton(self):
        service = get_token_service()

        assert isinstance(service, JWTService)
        assert get_token_service() is service
        assert service.access_token_expires_in == 24 * 3600

    def test_opaque_token_service(self):
        assert isinstance(get_opaque_token_service(), OpaqueTokenService)


@pytest.mark.unit
class TestHandlerFactories:
    def test_register_handler_wiring(self):
        session = MagicMock()

        handler = get_register_account_handler(session)

        assert isinstance(handler, RegisterAccountHandler)
        assert isinstance(handler._account_repo, AccountRepository)
        assert handler._account_repo.session is session

    def test_login_handler_wiring(self):
        handler = get_login_account_handler(MagicMock())

        assert isinstance(handler, LoginAccountHandler)
        assert handler._token_service is get_token_service()

    def test_reset_request_handler_uses_settings_expiry(self):
        handler = get_request_password_reset_handler(MagicMock())

        assert isinstance(handler, RequestPasswordResetHandler)
        assert handler._expiration_hours == get_settings().password_reset_expire_hours

    def test_get_profile_handler(self):
        assert isinstance(get_get_profile_handler(MagicMock()), GetProfileHandler)
