"""Domain protocols (ports).

Usage:
    from ipauth.domain.protocols import AccountRepositoryProtocol, LoggerProtocol
"""

from ipauth.domain.protocols.account_repository import AccountRepositoryProtocol
from ipauth.domain.protocols.logger_protocol import LoggerProtocol
from ipauth.domain.protocols.password_hashing_protocol import PasswordHashingProtocol
from ipauth.domain.protocols.random_token_protocol import RandomTokenProtocol
from ipauth.domain.protocols.token_generation_protocol import TokenGenerationProtocol

__all__ = [
    "AccountRepositoryProtocol",
    "LoggerProtocol",
    "PasswordHashingProtocol",
    "RandomTokenProtocol",
    "TokenGenerationProtocol",
]
