"""Validation functions behind the annotated types in ``ipauth.domain.types``.

Each validator receives a value that already passed the Field constraints
(length, pattern) and either returns it unchanged or raises ValueError,
which pydantic reports as a validation error.

Values are never normalized: usernames and emails are stored exactly as
given, and uniqueness is case-sensitive.
"""

import re

USERNAME_PATTERN = re.compile(r"^[a-zA-Z0-9_]+$")
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
WALLET_ADDRESS_PATTERN = re.compile(r"^0x[a-fA-F0-9]{40}$")
HEX_TOKEN_PATTERN = re.compile(r"^[a-fA-F0-9]+$")


def validate_username(value: str) -> str:
    """Allow letters, digits and underscore only."""
    if not USERNAME_PATTERN.match(value):
        raise ValueError("Username can only contain letters, numbers, and underscores")
    return value


def validate_email(value: str) -> str:
    """Check the address has a local part, an @ and a dotted domain."""
    if not EMAIL_PATTERN.match(value):
        raise ValueError("Please provide a valid email address")
    return value


def validate_strong_password(value: str) -> str:
    """Require at least one lowercase letter, one uppercase letter and one digit.

    Raises:
        ValueError: Naming every missing character class.
    """
    missing = []
    if not re.search(r"[a-z]", value):
        missing.append("one lowercase letter")
    if not re.search(r"[A-Z]", value):
        missing.append("one uppercase letter")
    if not re.search(r"\d", value):
        missing.append("one number")
    if missing:
        raise ValueError("Password must contain at least " + ", ".join(missing))
    return value


def validate_wallet_address(value: str) -> str:
    """Check the value is a 0x-prefixed, 40-hex-digit address.

    Ownership of the address is not proven here.
    """
    if not WALLET_ADDRESS_PATTERN.match(value):
        raise ValueError("Please provide a valid Ethereum wallet address")
    return value


def validate_token_format(value: str) -> str:
    """Check an opaque verification/reset token is hex."""
    if not HEX_TOKEN_PATTERN.match(value):
        raise ValueError("Token must be a hexadecimal string")
    return value
