"""JWT token service (adapter).

Implements TokenGenerationProtocol using PyJWT.

Token Claims:
    - Access: id, username, email, walletAddress, type="access"
    - Refresh: id, type="refresh"
    - Both: iat, exp, jti (uuid7)

Validation failures are returned as ``TokenError`` with code
TOKEN_EXPIRED for a correctly signed but expired token and TOKEN_INVALID
for everything else (bad signature, malformed, wrong token type).
"""

from datetime import UTC, datetime, timedelta
from typing import Any

import jwt
from jwt.exceptions import ExpiredSignatureError, InvalidTokenError
from uuid_extensions import uuid7

from ipauth.core.constants import (
    ACCESS_TOKEN_EXPIRE_HOURS_DEFAULT,
    REFRESH_TOKEN_EXPIRE_DAYS_DEFAULT,
)
from ipauth.core.enums import ErrorCode
from ipauth.core.result import Failure, Result, Success
from ipauth.domain.errors import AuthMessage, TokenError

ACCESS_TOKEN_TYPE = "access"
REFRESH_TOKEN_TYPE = "refresh"


class JWTService:
    """JWT access/refresh token generation and validation service.

    Usage:
        from ipauth.core.container import get_token_service

        token_service = get_token_service()
        token = token_service.generate_access_token(
            account_id=account.id,
            username=account.username,
            email=account.email,
            wallet_address=account.wallet_address,
        )
        result = token_service.validate_access_token(token)
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        access_expiration_hours: int = ACCESS_TOKEN_EXPIRE_HOURS_DEFAULT,
        refresh_expiration_days: int = REFRESH_TOKEN_EXPIRE_DAYS_DEFAULT,
    ) -> None:
        """Initialize JWT service.

        Args:
            secret_key: Secret key for HMAC signing, at least 32 bytes.
            algorithm: Signing algorithm shared by both token kinds.
            access_expiration_hours: Access token lifetime (default: 24).
            refresh_expiration_days: Refresh token lifetime (default: 7).

        Raises:
            ValueError: If secret_key is too short (< 32 bytes).
        """
        if len(secret_key) < 32:
            msg = "JWT secret key must be at least 32 bytes (256 bits)"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._algorithm = algorithm
        self._access_ttl = timedelta(hours=access_expiration_hours)
        self._refresh_ttl = timedelta(days=refresh_expiration_days)

    @property
    def access_token_expires_in(self) -> int:
        """Access token lifetime in seconds."""
        return int(self._access_ttl.total_seconds())

    def generate_access_token(
        self,
        account_id: int,
        username: str,
        email: str,
        wallet_address: str,
    ) -> str:
        """Generate JWT access token.

        Example:
            >>> service = JWTService(secret_key="x" * 32)
            >>> token = service.generate_access_token(
            ...     account_id=1,
            ...     username="alice",
            ...     email="a@x.com",
            ...     wallet_address="0x" + "1" * 40,
            ... )
            >>> len(token.split("."))
            3
        """
        return self._encode(
            {
                "id": account_id,
                "username": username,
                "email": email,
                "walletAddress": wallet_address,
                "type": ACCESS_TOKEN_TYPE,
            },
            self._access_ttl,
        )

    def generate_refresh_token(self, account_id: int) -> str:
        """Generate JWT refresh token carrying only the account id."""
        return self._encode(
            {"id": account_id, "type": REFRESH_TOKEN_TYPE},
            self._refresh_ttl,
        )

    def validate_access_token(self, token: str) -> Result[dict[str, Any], TokenError]:
        """Validate an access token and extract its claims."""
        return self._decode(token, ACCESS_TOKEN_TYPE)

    def validate_refresh_token(self, token: str) -> Result[dict[str, Any], TokenError]:
        """Validate a refresh token and extract its claims."""
        return self._decode(token, REFRESH_TOKEN_TYPE)

    def _encode(self, claims: dict[str, Any], ttl: timedelta) -> str:
        now = datetime.now(UTC)
        payload = {
            **claims,
            "iat": int(now.timestamp()),
            "exp": int((now + ttl).timestamp()),
            "jti": str(uuid7()),
        }
        token: str = jwt.encode(payload, self._secret_key, algorithm=self._algorithm)
        return token

    def _decode(
        self, token: str, expected_type: str
    ) -> Result[dict[str, Any], TokenError]:
        try:
            # PyJWT validates signature and exp
            payload: dict[str, Any] = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"require": ["exp", "iat"]},
            )
        except ExpiredSignatureError:
            return Failure(
                error=TokenError(
                    code=ErrorCode.TOKEN_EXPIRED,
                    message=AuthMessage.EXPIRED_TOKEN,
                    token_type=expected_type,
                )
            )
        except InvalidTokenError:
            return Failure(error=self._invalid(expected_type))

        if payload.get("type") != expected_type or not isinstance(
            payload.get("id"), int
        ):
            return Failure(error=self._invalid(expected_type))

        return Success(value=payload)

    @staticmethod
    def _invalid(token_type: str) -> TokenError:
        return TokenError(
            code=ErrorCode.TOKEN_INVALID,
            message=AuthMessage.INVALID_TOKEN,
            token_type=token_type,
        )
