"""Database models.

Importing this package registers every table on ``BaseModel.metadata``.
"""

from ipauth.infrastructure.persistence.base import BaseModel
from ipauth.infrastructure.persistence.models.account import AccountModel

__all__ = ["AccountModel", "BaseModel"]
