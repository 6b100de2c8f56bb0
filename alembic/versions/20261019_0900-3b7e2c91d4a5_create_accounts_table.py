"""create_accounts_table

Revision ID: 3b7e2c91d4a5
Revises:
Create Date: 2026-10-19 09:00:00.000000+00:00

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3b7e2c91d4a5"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create accounts table."""
    op.create_table(
        "accounts",
        # Primary key and timestamps from BaseMutableModel
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
        ),
        # Identity
        sa.Column(
            "username",
            sa.String(length=30),
            nullable=False,
            comment="Unique username (3-30 chars, letters, digits, underscore)",
        ),
        sa.Column(
            "email",
            sa.String(length=255),
            nullable=False,
            comment="Unique email address (stored as given)",
        ),
        sa.Column(
            "password_hash",
            sa.String(length=255),
            nullable=False,
            comment="Bcrypt hashed password (cost factor 12)",
        ),
        sa.Column(
            "wallet_address",
            sa.String(length=42),
            nullable=False,
            comment="External chain wallet address (ownership asserted, not proven)",
        ),
        # Verification
        sa.Column(
            "is_verified",
            sa.Boolean(),
            nullable=False,
            comment="Email verification status",
        ),
        sa.Column(
            "verification_token",
            sa.String(length=128),
            nullable=True,
            comment="Email verification token (cleared once verified)",
        ),
        # Lockout
        sa.Column(
            "failed_login_attempts",
            sa.Integer(),
            nullable=False,
            comment="Consecutive failed login attempts (resets on success)",
        ),
        sa.Column(
            "lock_until",
            sa.DateTime(timezone=True),
            nullable=True,
            comment="Timestamp until which account is locked (15 min after 5 failures)",
        ),
        # Password reset
        sa.Column(
            "reset_password_token",
            sa.String(length=128),
            nullable=True,
            comment="Pending password reset token (latest request only)",
        ),
        sa.Column(
            "reset_password_expires",
            sa.DateTime(timezone=True),
            nullable=True,
            comment="Password reset token expiry (1 hour after request)",
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_accounts_username", "accounts", ["username"], unique=True)
    op.create_index("ix_accounts_email", "accounts", ["email"], unique=True)
    op.create_index("ix_accounts_is_verified", "accounts", ["is_verified"])
    op.create_index("ix_accounts_verification_token", "accounts", ["verification_token"])
    op.create_index(
        "ix_accounts_reset_password_token", "accounts", ["reset_password_token"]
    )


def downgrade() -> None:
    """Drop accounts table."""
    op.drop_index("ix_accounts_reset_password_token", table_name="accounts")
    op.drop_index("ix_accounts_verification_token", table_name="accounts")
    op.drop_index("ix_accounts_is_verified", table_name="accounts")
    op.drop_index("ix_accounts_email", table_name="accounts")
    op.drop_index("ix_accounts_username", table_name="accounts")
    op.drop_table("accounts")
