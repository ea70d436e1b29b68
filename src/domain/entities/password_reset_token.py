"""
PasswordResetToken Entity

Single-use password reset tokens.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..base import utc_now


class PasswordResetToken(SQLModel, table=True):
    """
    PasswordResetToken entity - single-use password reset tokens.

    Business Rules:
    - Expires after 1 hour
    - Token is stored as SHA-256 hash of a secure random string
    - Single-use: deleted as soon as it is consumed
    - Expired tokens are deleted on lookup or by the sweep
    """

    __tablename__ = "password_reset_tokens"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    email: str = Field(max_length=255)
    token_hash: str = Field(unique=True, max_length=64)  # SHA-256 output

    # Timestamps
    expires_at: datetime = Field(sa_column=Column(DateTime))
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_password_reset_email", "email"),
        Index("idx_password_reset_expires_at", "expires_at"),
    )
