"""Query handlers (side-effect free)."""

from ipauth.application.queries.handlers.get_account_stats_handler import (
    GetAccountStatsHandler,
)
from ipauth.application.queries.handlers.get_profile_handler import GetProfileHandler
from ipauth.application.queries.handlers.verify_access_token_handler import (
    VerifyAccessTokenHandler,
)

__all__ = ["GetAccountStatsHandler", "GetProfileHandler", "VerifyAccessTokenHandler"]
