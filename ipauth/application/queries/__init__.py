"""Queries (CQRS read operations)."""

from ipauth.application.queries.account_queries import (
    GetAccountStats,
    GetProfile,
    VerifyAccessToken,
)

__all__ = ["GetAccountStats", "GetProfile", "VerifyAccessToken"]
