"""Opaque token service for email verification and password reset.

Token Strategy:
    - 32-byte random hex string (64 characters)
    - Stored in plain text on the account row (already unguessable)
    - Matched by exact value, single use
"""

import secrets
from datetime import UTC, datetime, timedelta

from ipauth.core.constants import TOKEN_BYTES


class OpaqueTokenService:
    """Random opaque token generation service.

    Usage:
        service = OpaqueTokenService()
        token = service.generate_token()
        expires = service.calculate_expiration(hours=1)
    """

    def __init__(self, token_bytes: int = TOKEN_BYTES) -> None:
        self._token_bytes = token_bytes

    def generate_token(self) -> str:
        """Generate a random hex token.

        Example:
            >>> token = OpaqueTokenService().generate_token()
            >>> len(token)
            64
        """
        return secrets.token_hex(self._token_bytes)

    def calculate_expiration(self, hours: int) -> datetime:
        """Return the UTC timestamp ``hours`` from now."""
        return datetime.now(UTC) + timedelta(hours=hours)
