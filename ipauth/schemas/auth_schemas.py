"""Authentication request schemas.

Pydantic models that validate caller-supplied input before a command is
built. Shape problems surface here as ValidationFailure; handlers only ever
see well-formed commands.

Usage:
    result = parse_request(RegisterRequest, payload)
    match result:
        case Success(value=request):
            outcome = await handler.handle(request.to_command())
        case Failure(error=error):
            # error.code is ErrorCode.VALIDATION_FAILED
            ...
"""

from typing import Any, Self, TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic import ValidationError as PydanticValidationError

from ipauth.application.commands import (
    ChangePassword,
    LoginAccount,
    RefreshTokens,
    RegisterAccount,
    RequestPasswordReset,
    ResetPassword,
    UpdateProfile,
    VerifyEmail,
)
from ipauth.core.enums import ErrorCode
from ipauth.core.errors import ValidationError
from ipauth.core.result import Failure, Result, Success
from ipauth.domain.types import (
    Email,
    OpaqueToken,
    Password,
    Username,
    WalletAddress,
)

RequestT = TypeVar("RequestT", bound=BaseModel)


# =============================================================================
# Registration / Login
# =============================================================================


class RegisterRequest(BaseModel):
    """Registration input."""

    username: Username
    email: Email
    password: Password
    wallet_address: WalletAddress = Field(..., alias="walletAddress")

    model_config = ConfigDict(
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "username": "alice",
                "email": "a@x.com",
                "password": "Abcd1234",
                "walletAddress": "0x" + "1" * 40,
            }
        },
    )

    def to_command(self) -> RegisterAccount:
        return RegisterAccount(
            username=self.username,
            email=self.email,
            password=self.password,
            wallet_address=self.wallet_address,
        )


class LoginRequest(BaseModel):
    """Login input. Only presence is checked; strength rules don't apply."""

    email: Email
    password: str = Field(..., min_length=1, description="Account password")

    def to_command(self) -> LoginAccount:
        return LoginAccount(email=self.email, password=self.password)


# =============================================================================
# Tokens
# =============================================================================


class RefreshRequest(BaseModel):
    """Refresh token input."""

    refresh_token: str = Field(..., min_length=1, alias="refreshToken")

    model_config = ConfigDict(populate_by_name=True)

    def to_command(self) -> RefreshTokens:
        return RefreshTokens(refresh_token=self.refresh_token)


class VerifyEmailRequest(BaseModel):
    """Email verification input."""

    token: OpaqueToken

    def to_command(self) -> VerifyEmail:
        return VerifyEmail(token=self.token)


# =============================================================================
# Password Reset / Change
# =============================================================================


class ForgotPasswordRequest(BaseModel):
    """Password reset request input."""

    email: Email

    def to_command(self) -> RequestPasswordReset:
        return RequestPasswordReset(email=self.email)


class ResetPasswordRequest(BaseModel):
    """Password reset consummation input."""

    token: OpaqueToken
    new_password: Password = Field(..., alias="newPassword")

    model_config = ConfigDict(populate_by_name=True)

    def to_command(self) -> ResetPassword:
        return ResetPassword(token=self.token, new_password=self.new_password)


class ChangePasswordRequest(BaseModel):
    """Password change input (account id comes from the verified session)."""

    current_password: str = Field(..., min_length=1, alias="currentPassword")
    new_password: Password = Field(..., alias="newPassword")

    model_config = ConfigDict(populate_by_name=True)

    def to_command(self, account_id: int) -> ChangePassword:
        return ChangePassword(
            account_id=account_id,
            current_password=self.current_password,
            new_password=self.new_password,
        )


# =============================================================================
# Profile
# =============================================================================


class UpdateProfileRequest(BaseModel):
    """Profile update input: any non-empty subset of the three fields."""

    username: Username | None = None
    email: Email | None = None
    wallet_address: WalletAddress | None = Field(default=None, alias="walletAddress")

    model_config = ConfigDict(populate_by_name=True)

    @model_validator(mode="after")
    def require_one_field(self) -> Self:
        if self.username is None and self.email is None and self.wallet_address is None:
            raise ValueError("At least one of username, email or walletAddress is required")
        return self

    def to_command(self, account_id: int) -> UpdateProfile:
        return UpdateProfile(
            account_id=account_id,
            username=self.username,
            email=self.email,
            wallet_address=self.wallet_address,
        )


# =============================================================================
# Validation boundary
# =============================================================================


def parse_request(
    model: type[RequestT], data: dict[str, Any]
) -> Result[RequestT, ValidationError]:
    """Validate raw input into a request model.

    Returns:
        Success(model instance), or Failure(ValidationError) describing the
        first invalid field.
    """
    try:
        return Success(value=model.model_validate(data))
    except PydanticValidationError as e:
        first = e.errors()[0]
        field = ".".join(str(part) for part in first["loc"]) or None
        return Failure(
            error=ValidationError(
                code=ErrorCode.VALIDATION_FAILED,
                message=first["msg"],
                field=field,
                details={
                    ".".join(str(part) for part in err["loc"]) or "__root__": err["msg"]
                    for err in e.errors()
                },
            )
        )
