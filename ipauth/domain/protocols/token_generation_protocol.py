"""Token generation protocol for domain layer.

Token Strategy:
    - Access tokens: JWT carrying {id, username, email, wallet_address}, 24 hours
    - Refresh tokens: JWT carrying {id}, 7 days
    - Stateless validation (no database lookup)
    - Refresh tokens are not revoked when a new pair is issued
"""

from typing import Any, Protocol

from ipauth.core.result import Result
from ipauth.domain.errors import TokenError


class TokenGenerationProtocol(Protocol):
    """JWT access/refresh token generation and validation interface.

    Usage:
        result = self._token_service.validate_refresh_token(token)
        match result:
            case Success(value=payload):
                account_id = payload["id"]
            case Failure(error=error):
                # error.code is TOKEN_INVALID or TOKEN_EXPIRED
                ...
    """

    @property
    def access_token_expires_in(self) -> int:
        """Access token lifetime in seconds."""
        ...

    def generate_access_token(
        self,
        account_id: int,
        username: str,
        email: str,
        wallet_address: str,
    ) -> str:
        """Generate a signed access token carrying the account's identity claims."""
        ...

    def generate_refresh_token(self, account_id: int) -> str:
        """Generate a signed refresh token carrying only the account id."""
        ...

    def validate_access_token(self, token: str) -> Result[dict[str, Any], TokenError]:
        """Validate an access token and return its claims."""
        ...

    def validate_refresh_token(self, token: str) -> Result[dict[str, Any], TokenError]:
        """Validate a refresh token and return its claims."""
        ...
