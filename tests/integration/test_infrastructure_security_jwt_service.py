"""Integration tests for JWTService (real PyJWT).

Tests cover:
- Access and refresh claims (id, type, iat, exp, jti)
- Lifetimes (24 hours / 7 days)
- Expired tokens map to TOKEN_EXPIRED
- Tampered, foreign-key-signed and wrong-type tokens map to TOKEN_INVALID
- Short secret rejected
"""

from datetime import UTC, datetime, timedelta

import jwt
import pytest
from freezegun import freeze_time

from ipauth.core.enums import ErrorCode
from ipauth.core.result import Failure, Success
from ipauth.infrastructure.security import JWTService

WALLET = "0x" + "1" * 40


def access_token_for(service: JWTService, account_id: int = 1) -> str:
    return service.generate_access_token(
        account_id=account_id, username="alice", email="a@x.com", wallet_address=WALLET
    )


@pytest.mark.integration
class TestJWTServiceGeneration:
    def test_access_token_claims(self, token_service):
        # Act
        result = token_service.validate_access_token(access_token_for(token_service, 7))

        # Assert
        assert isinstance(result, Success)
        claims = result.value
        assert claims["id"] == 7
        assert claims["username"] == "alice"
        assert claims["email"] == "a@x.com"
        assert claims["walletAddress"] == WALLET
        assert "wallet_address" not in claims
        assert claims["type"] == "access"
        assert claims["exp"] - claims["iat"] == 24 * 3600
        assert claims["jti"]

    def test_refresh_token_claims(self, token_service):
        result = token_service.validate_refresh_token(
            token_service.generate_refresh_token(7)
        )

        assert isinstance(result, Success)
        assert result.value["id"] == 7
        assert result.value["type"] == "refresh"
        assert "email" not in result.value
        assert result.value["exp"] - result.value["iat"] == 7 * 24 * 3600

    def test_tokens_are_unique(self, token_service):
        assert access_token_for(token_service) != access_token_for(token_service)

    def test_expires_in(self, token_service):
        assert token_service.access_token_expires_in == 86400

    def test_short_secret_rejected(self):
        with pytest.raises(ValueError):
            JWTService(secret_key="too-short")


@pytest.mark.integration
class TestJWTServiceValidation:
    def test_expired_access_token(self, token_service):
        # Arrange
        with freeze_time(datetime.now(UTC) - timedelta(hours=25)):
            token = access_token_for(token_service)

        # Act
        result = token_service.validate_access_token(token)

        # Assert
        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.TOKEN_EXPIRED

    def test_access_token_valid_just_before_expiry(self, token_service):
        with freeze_time(datetime.now(UTC) - timedelta(hours=23)):
            token = access_token_for(token_service)

        assert isinstance(token_service.validate_access_token(token), Success)

    def test_tampered_token(self, token_service):
        # Arrange
        header, payload, signature = access_token_for(token_service).split(".")
        flipped = "A" if signature[10] != "A" else "B"
        tampered = f"{header}.{payload}.{signature[:10]}{flipped}{signature[11:]}"

        # Act
        result = token_service.validate_access_token(tampered)

        # Assert
        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.TOKEN_INVALID

    def test_token_signed_with_other_key(self, token_service):
        other = JWTService(secret_key="another-secret-key-of-sufficient-length")

        result = token_service.validate_access_token(access_token_for(other))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.TOKEN_INVALID

    def test_refresh_token_is_not_an_access_token(self, token_service):
        result = token_service.validate_access_token(
            token_service.generate_refresh_token(1)
        )

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.TOKEN_INVALID

    def test_access_token_is_not_a_refresh_token(self, token_service):
        result = token_service.validate_refresh_token(access_token_for(token_service))

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.TOKEN_INVALID

    def test_missing_exp_is_invalid(self, token_service):
        # Arrange
        token = jwt.encode(
            {"id": 1, "type": "access", "iat": int(datetime.now(UTC).timestamp())},
            "test-secret-key-that-is-at-least-32-chars",
            algorithm="HS256",
        )

        # Act
        result = token_service.validate_access_token(token)

        # Assert
        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.TOKEN_INVALID

    def test_non_integer_id_is_invalid(self, token_service):
        now = int(datetime.now(UTC).timestamp())
        token = jwt.encode(
            {"id": "1", "type": "access", "iat": now, "exp": now + 60},
            "test-secret-key-that-is-at-least-32-chars",
            algorithm="HS256",
        )

        result = token_service.validate_access_token(token)

        assert isinstance(result, Failure)
        assert result.error.code == ErrorCode.TOKEN_INVALID
