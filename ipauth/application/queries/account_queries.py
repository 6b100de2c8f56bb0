"""Account queries (CQRS read operations).

Queries are side-effect free. All queries are immutable and keyword-only.
"""

from dataclasses import dataclass


@dataclass(frozen=True, kw_only=True)
class GetProfile:
    """Read the public profile of an account.

    Attributes:
        account_id: Account to read.
    """

    account_id: int


@dataclass(frozen=True, kw_only=True)
class VerifyAccessToken:
    """Resolve an access token to the account it was issued for.

    Attributes:
        access_token: JWT access token.
    """

    access_token: str


@dataclass(frozen=True, kw_only=True)
class GetAccountStats:
    """Count accounts by verification and lockout state."""
