"""Core enums package.

Usage:
    from ipauth.core.enums import ErrorCode, Environment
"""

from ipauth.core.enums.environment import Environment
from ipauth.core.enums.error_code import ErrorCode

__all__ = ["ErrorCode", "Environment"]
