"""Security adapters: password hashing, JWT and opaque tokens."""

from ipauth.infrastructure.security.bcrypt_password_service import BcryptPasswordService
from ipauth.infrastructure.security.jwt_service import JWTService
from ipauth.infrastructure.security.opaque_token_service import OpaqueTokenService

__all__ = ["BcryptPasswordService", "JWTService", "OpaqueTokenService"]
