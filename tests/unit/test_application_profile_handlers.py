"""Unit tests for profile and account query handlers.

Tests cover:
- GetProfileHandler: public fields, unknown id
- UpdateProfileHandler: partial update, no-op update, conflicts against
  other accounts, own values never conflict, conflict raised by the
  unique index at write time
- ChangePasswordHandler: success clears lockout, wrong current password,
  unknown id
- VerifyAccessTokenHandler: valid, refresh token rejected, unknown account
- GetAccountStatsHandler: counts by state
"""

from unittest.mock import AsyncMock, Mock

import pytest

from ipauth.application.commands.auth_commands import ChangePassword, UpdateProfile
from ipauth.application.commands.handlers.change_password_handler import (
    ChangePasswordHandler,
)
from ipauth.application.commands.handlers.update_profile_handler import (
    UpdateProfileHandler,
)
from ipauth.application.queries.account_queries import (
    GetAccountStats,
    GetProfile,
    VerifyAccessToken,
)
from ipauth.application.queries.handlers import (
    GetAccountStatsHandler,
    GetProfileHandler,
    VerifyAccessTokenHandler,
)
from ipauth.core.enums import ErrorCode
from ipauth.core.errors import AuthenticationError, ConflictError, NotFoundError
from ipauth.core.result import Failure, Success
from ipauth.domain.errors import AuthMessage

NEW_WALLET = "0x" + "2" * 40


@pytest.fixture
def account_repo():
    return AsyncMock()


@pytest.mark.unit
class TestGetProfile:
    @pytest.fixture
    def handler(self, account_repo, mock_logger):
        return GetProfileHandler(account_repo=account_repo, logger=mock_logger)

    async def test_returns_public_fields(self, handler, account_repo, account_factory):
        # Arrange
        account_repo.find_by_id.return_value = account_factory(account_id=5)

        # Act
        result = await handler.handle(GetProfile(account_id=5))

        # Assert
        assert isinstance(result, Success)
        assert result.value.id == 5
        assert result.value.username == "alice"
        assert result.value.email == "a@x.com"
        assert not hasattr(result.value, "password_hash")
        assert not hasattr(result.value, "verification_token")

    async def test_unknown_id_returns_not_found(self, handler, account_repo):
        account_repo.find_by_id.return_value = None

        result = await handler.handle(GetProfile(account_id=404))

        assert isinstance(result, Failure)
        assert isinstance(result.error, NotFoundError)
        assert result.error.code == ErrorCode.ACCOUNT_NOT_FOUND


@pytest.mark.unit
class TestUpdateProfile:
    @pytest.fixture
    def handler(self, account_repo, mock_logger):
        return UpdateProfileHandler(account_repo=account_repo, logger=mock_logger)

    async def test_updates_only_changed_fields(
        self, handler, account_repo, account_factory
    ):
        # Arrange
        account_repo.find_by_id.return_value = account_factory()
        account_repo.find_conflicting.return_value = None
        account_repo.update_profile.return_value = Success(
            value=account_factory(username="alice_2")
        )

        # Act
        result = await handler.handle(
            UpdateProfile(account_id=1, username="alice_2", email="a@x.com")
        )

        # Assert
        assert isinstance(result, Success)
        assert result.value.username == "alice_2"
        account_repo.find_conflicting.assert_awaited_once_with(
            username="alice_2", email=None, exclude_id=1
        )
        account_repo.update_profile.assert_awaited_once_with(1, username="alice_2")

    async def test_wallet_only_update_skips_conflict_check(
        self, handler, account_repo, account_factory
    ):
        account_repo.find_by_id.return_value = account_factory()
        account_repo.update_profile.return_value = Success(
            value=account_factory(wallet_address=NEW_WALLET)
        )

        result = await handler.handle(
            UpdateProfile(account_id=1, wallet_address=NEW_WALLET)
        )

        assert isinstance(result, Success)
        assert result.value.wallet_address == NEW_WALLET
        account_repo.find_conflicting.assert_not_called()

    async def test_same_values_are_a_noop(self, handler, account_repo, account_factory):
        """Submitting the account's own username is not a conflict."""
        account_repo.find_by_id.return_value = account_factory()

        result = await handler.handle(
            UpdateProfile(account_id=1, username="alice", email="a@x.com")
        )

        assert isinstance(result, Success)
        assert result.value.username == "alice"
        account_repo.find_conflicting.assert_not_called()
        account_repo.update_profile.assert_not_called()

    async def test_email_taken_by_other_account(
        self, handler, account_repo, account_factory
    ):
        # Arrange
        account_repo.find_by_id.return_value = account_factory()
        account_repo.find_conflicting.return_value = account_factory(
            account_id=2, username="bob", email="b@x.com"
        )

        # Act
        result = await handler.handle(UpdateProfile(account_id=1, email="b@x.com"))

        # Assert
        assert isinstance(result, Failure)
        assert isinstance(result.error, ConflictError)
        assert result.error.conflicting_field == "email"
        assert result.error.message == AuthMessage.EMAIL_TAKEN
        account_repo.update_profile.assert_not_called()

    async def test_username_taken_by_other_account(
        self, handler, account_repo, account_factory
    ):
        account_repo.find_by_id.return_value = account_factory()
        account_repo.find_conflicting.return_value = account_factory(
            account_id=2, username="bob", email="b@x.com"
        )

        result = await handler.handle(UpdateProfile(account_id=1, username="bob"))

        assert isinstance(result, Failure)
        assert result.error.conflicting_field == "username"
        assert result.error.message == AuthMessage.USERNAME_TAKEN

    async def test_unknown_id_returns_not_found(self, handler, account_repo):
        account_repo.find_by_id.return_value = None

        result = await handler.handle(UpdateProfile(account_id=9, username="zed"))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.ACCOUNT_NOT_FOUND

    async def test_conflict_at_write_time_is_returned(
        self, handler, account_repo, account_factory
    ):
        """Another account takes the username after the pre-check passed."""
        # Arrange
        conflict = ConflictError(
            code=ErrorCode.CONFLICT,
            message=AuthMessage.ACCOUNT_ALREADY_EXISTS,
            resource_type="Account",
        )
        account_repo.find_by_id.return_value = account_factory()
        account_repo.find_conflicting.return_value = None
        account_repo.update_profile.return_value = Failure(error=conflict)

        # Act
        result = await handler.handle(UpdateProfile(account_id=1, username="bob"))

        # Assert
        assert isinstance(result, Failure)
        assert result.error is conflict
        assert result.error.code == ErrorCode.CONFLICT

    async def test_account_deleted_before_write(
        self, handler, account_repo, account_factory
    ):
        account_repo.find_by_id.return_value = account_factory()
        account_repo.update_profile.return_value = Success(value=None)

        result = await handler.handle(
            UpdateProfile(account_id=1, wallet_address=NEW_WALLET)
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.ACCOUNT_NOT_FOUND


@pytest.mark.unit
class TestChangePassword:
    @pytest.fixture
    def hasher(self):
        mock = Mock()
        mock.verify_password.return_value = True
        mock.hash_password.return_value = "$2b$12$changed"
        return mock

    @pytest.fixture
    def handler(self, account_repo, hasher, mock_logger):
        return ChangePasswordHandler(
            account_repo=account_repo,
            password_service=hasher,
            logger=mock_logger,
        )

    async def test_change_password_success(
        self, handler, account_repo, hasher, account_factory
    ):
        # Arrange
        account = account_factory(failed_login_attempts=2)
        account_repo.find_by_id.return_value = account
        account_repo.update.return_value = account_factory(password_hash="$2b$12$changed")

        # Act
        result = await handler.handle(
            ChangePassword(
                account_id=1, current_password="Abcd1234", new_password="Newpass123"
            )
        )

        # Assert
        assert isinstance(result, Success)
        hasher.verify_password.assert_called_once_with("Abcd1234", account.password_hash)
        hasher.hash_password.assert_called_once_with("Newpass123")
        account_repo.update.assert_awaited_once_with(
            1,
            password_hash="$2b$12$changed",
            failed_login_attempts=0,
            lock_until=None,
        )

    async def test_wrong_current_password(self, handler, account_repo, hasher, account_factory):
        # Arrange
        account_repo.find_by_id.return_value = account_factory()
        hasher.verify_password.return_value = False

        # Act
        result = await handler.handle(
            ChangePassword(account_id=1, current_password="wrong", new_password="Newpass123")
        )

        # Assert
        assert isinstance(result, Failure)
        assert isinstance(result.error, AuthenticationError)
        assert result.error.message == AuthMessage.CURRENT_PASSWORD_INCORRECT
        hasher.hash_password.assert_not_called()
        account_repo.update.assert_not_called()

    async def test_unknown_id(self, handler, account_repo):
        account_repo.find_by_id.return_value = None

        result = await handler.handle(
            ChangePassword(account_id=7, current_password="x", new_password="Newpass123")
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.ACCOUNT_NOT_FOUND


@pytest.mark.unit
class TestVerifyAccessToken:
    @pytest.fixture
    def handler(self, account_repo, token_service, mock_logger):
        return VerifyAccessTokenHandler(
            account_repo=account_repo,
            token_service=token_service,
            logger=mock_logger,
        )

    async def test_valid_token_returns_fresh_profile(
        self, handler, account_repo, token_service, account_factory
    ):
        # Arrange
        token = token_service.generate_access_token(
            account_id=1, username="old_name", email="a@x.com", wallet_address="0x" + "1" * 40
        )
        account_repo.find_by_id.return_value = account_factory(username="new_name")

        # Act
        result = await handler.handle(VerifyAccessToken(access_token=token))

        # Assert
        assert isinstance(result, Success)
        assert result.value.username == "new_name"

    async def test_refresh_token_rejected(self, handler, account_repo, token_service):
        token = token_service.generate_refresh_token(1)

        result = await handler.handle(VerifyAccessToken(access_token=token))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.TOKEN_INVALID
        account_repo.find_by_id.assert_not_called()

    async def test_unknown_account(self, handler, account_repo, token_service):
        token = token_service.generate_access_token(
            account_id=3, username="ghost", email="g@x.com", wallet_address="0x" + "1" * 40
        )
        account_repo.find_by_id.return_value = None

        result = await handler.handle(VerifyAccessToken(access_token=token))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.ACCOUNT_NOT_FOUND


@pytest.mark.unit
class TestGetAccountStats:
    async def test_counts_by_state(self, account_repo, mock_logger):
        # Arrange
        async def count(*, is_verified=None, locked_at=None):
            if is_verified:
                return 6
            if locked_at is not None:
                return 1
            return 10

        account_repo.count.side_effect = count
        handler = GetAccountStatsHandler(account_repo=account_repo, logger=mock_logger)

        # Act
        result = await handler.handle(GetAccountStats())

        # Assert
        assert isinstance(result, Success)
        assert result.value.total_accounts == 10
        assert result.value.verified_accounts == 6
        assert result.value.unverified_accounts == 4
        assert result.value.locked_accounts == 1
