"""Domain entities."""

from ipauth.domain.entities.account import Account

__all__ = ["Account"]
