"""Annotated types with centralized validation.

Define validation once, use everywhere. All custom types use pydantic's
Annotated with Field constraints and AfterValidator.

Usage:
    from ipauth.domain.types import Email, Password, Username

    class RegisterRequest(BaseModel):
        username: Username
        email: Email
        password: Password
"""

from typing import Annotated

from pydantic import AfterValidator, Field

from ipauth.domain.validators import (
    validate_email,
    validate_strong_password,
    validate_token_format,
    validate_username,
    validate_wallet_address,
)

# ============================================================================
# Identity Types
# ============================================================================

Username = Annotated[
    str,
    Field(
        min_length=3,
        max_length=30,
        description="Unique username (letters, digits, underscore)",
        examples=["alice"],
    ),
    AfterValidator(validate_username),
]

Email = Annotated[
    str,
    Field(
        min_length=5,
        max_length=255,
        description="Email address (stored as given, no normalization)",
        examples=["alice@example.com"],
    ),
    AfterValidator(validate_email),
]
"""Email address.

Examples:
    >>> class Req(BaseModel):
    ...     email: Email
    >>> Req(email="A@X.com").email
    'A@X.com'
"""

WalletAddress = Annotated[
    str,
    Field(
        min_length=42,
        max_length=42,
        description="External chain wallet address",
        examples=["0x" + "1" * 40],
    ),
    AfterValidator(validate_wallet_address),
]

# ============================================================================
# Credential Types
# ============================================================================

Password = Annotated[
    str,
    Field(
        min_length=8,
        max_length=128,
        description="Password with strength requirements",
        examples=["Abcd1234"],
    ),
    AfterValidator(validate_strong_password),
]
"""Password with strength validation.

Requirements:
- At least 8 characters
- At least one uppercase letter
- At least one lowercase letter
- At least one digit
"""

OpaqueToken = Annotated[
    str,
    Field(
        min_length=16,
        max_length=128,
        description="Email verification or password reset token (hex)",
    ),
    AfterValidator(validate_token_format),
]
