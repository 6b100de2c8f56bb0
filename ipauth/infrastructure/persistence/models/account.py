"""Account database model.

Security:
    - password_hash: NEVER stores plaintext passwords (bcrypt hashed)
    - verification_token / reset_password_token: opaque, single use
    - failed_login_attempts / lock_until: lockout bookkeeping
"""

from datetime import datetime

from sqlalchemy import Boolean, DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from ipauth.infrastructure.persistence.base import BaseMutableModel


class AccountModel(BaseMutableModel):
    """Account model for authentication and profile data.

    Fields:
        id: Integer primary key (from BaseMutableModel)
        created_at / updated_at: from BaseMutableModel
        username: Unique username (indexed)
        email: Unique email address (indexed, stored as given)
        password_hash: Bcrypt hash
        wallet_address: External chain address
        is_verified: Email verification status
        verification_token: Pending email verification token (nullable)
        failed_login_attempts: Consecutive failed logins
        lock_until: Lock expiry (nullable)
        reset_password_token: Pending reset token (nullable)
        reset_password_expires: Reset token expiry (nullable)
    """

    __tablename__ = "accounts"

    username: Mapped[str] = mapped_column(
        String(30),
        nullable=False,
        unique=True,
        index=True,
        comment="Unique username (3-30 chars, letters, digits, underscore)",
    )

    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
        comment="Unique email address (stored as given)",
    )

    password_hash: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Bcrypt hashed password (cost factor 12)",
    )

    wallet_address: Mapped[str] = mapped_column(
        String(42),
        nullable=False,
        comment="External chain wallet address (ownership asserted, not proven)",
    )

    is_verified: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=False,
        index=True,
        comment="Email verification status",
    )

    verification_token: Mapped[str | None] = mapped_column(
        String(128),
        nullable=True,
        index=True,
        comment="Email verification token (cleared once verified)",
    )

    failed_login_attempts: Mapped[int] = mapped_column(
        Integer,
        nullable=False,
        default=0,
        comment="Consecutive failed login attempts (resets on success)",
    )

    lock_until: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        default=None,
        comment="Timestamp until which account is locked (15 min after 5 failures)",
    )

    reset_password_token: Mapped[str | None] = mapped_column(
        String(128),
        nullable=True,
        index=True,
        comment="Pending password reset token (latest request only)",
    )

    reset_password_expires: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        comment="Password reset token expiry (1 hour after request)",
    )
