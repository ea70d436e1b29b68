"""
User Entity

Represents a person who can sign in to the template manager.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from ..base import utc_now
from .enums import UserRole


class User(SQLModel, table=True):
    """
    User entity - identity record for authentication.

    Business Rules:
    - Email is unique and stored lowercase
    - Password stored as peppered bcrypt hash
    - Role determines authorization tier (read, read-write, admin)
    - Never hard-deleted; deactivation flips is_active
    """

    __tablename__ = "users"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255)
    email: str = Field(unique=True, index=True, max_length=255)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars

    role: UserRole = Field(default=UserRole.read_write)
    is_active: bool = Field(default=True)
    email_verified: bool = Field(default=False)
    avatar_url: Optional[str] = Field(default=None, max_length=512)

    # Timestamps
    created_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utc_now, sa_column=Column(DateTime))
    last_login_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_user_role", "role"),
        Index("idx_user_is_active", "is_active"),
    )
