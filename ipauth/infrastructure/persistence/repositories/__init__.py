"""Repository implementations."""

from ipauth.infrastructure.persistence.repositories.account_repository import (
    AccountRepository,
)

__all__ = ["AccountRepository"]
