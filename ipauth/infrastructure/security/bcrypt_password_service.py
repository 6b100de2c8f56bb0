"""Bcrypt password hashing service (adapter).

Implements PasswordHashingProtocol using bcrypt, cost factor 12 by default.

Performance:
    - Cost factor is logarithmic: each +1 doubles computation time
    - 12 = ~250ms per hash, so callers on the event loop run hash and
      verify through ``asyncio.to_thread``
"""

import bcrypt

from ipauth.core.constants import BCRYPT_ROUNDS_DEFAULT


class BcryptPasswordService:
    """Bcrypt password hashing service.

    Usage:
        from ipauth.core.container import get_password_service

        password_service = get_password_service()
        password_hash = password_service.hash_password("Abcd1234")
        is_valid = password_service.verify_password("Abcd1234", password_hash)
    """

    def __init__(self, cost_factor: int = BCRYPT_ROUNDS_DEFAULT) -> None:
        """Initialize bcrypt password service.

        Args:
            cost_factor: Bcrypt cost factor (default: 12).

        Raises:
            ValueError: If cost_factor is below 10 or above 20.
        """
        if cost_factor < 10:
            msg = "Cost factor must be at least 10 for security"
            raise ValueError(msg)
        if cost_factor > 20:
            msg = "Cost factor above 20 is impractically slow"
            raise ValueError(msg)

        self._cost_factor = cost_factor

    @property
    def cost_factor(self) -> int:
        return self._cost_factor

    def hash_password(self, password: str) -> str:
        """Hash a plaintext password using bcrypt.

        Returns:
            Hashed password string (bcrypt format: $2b$12$...), 60 characters.

        Example:
            >>> service = BcryptPasswordService()
            >>> service.hash_password("Abcd1234") != service.hash_password("Abcd1234")
            True
        """
        salt = bcrypt.gensalt(rounds=self._cost_factor)
        password_hash = bcrypt.hashpw(password.encode("utf-8"), salt)
        return password_hash.decode("utf-8")

    def verify_password(self, password: str, password_hash: str) -> bool:
        """Verify a plaintext password against a bcrypt hash.

        Returns:
            True if password matches hash, False otherwise. A malformed hash
            also yields False.
        """
        try:
            # bcrypt.checkpw does constant-time comparison
            return bcrypt.checkpw(
                password.encode("utf-8"), password_hash.encode("utf-8")
            )
        except (ValueError, AttributeError):
            return False
