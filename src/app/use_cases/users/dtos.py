"""
User Management DTOs
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from src.domain.entities import User


class UpdateUserCommand(BaseModel):
    """Fields an admin may change on an account. None leaves a field untouched."""

    name: Optional[str] = None
    role: Optional[str] = None
    is_active: Optional[bool] = None


class UserDetails(BaseModel):
    """Full user record as seen by admins (no credentials)"""

    id: str
    name: str
    email: str
    role: str
    avatar_url: Optional[str] = None
    is_active: bool
    email_verified: bool
    created_at: datetime
    updated_at: datetime
    last_login_at: Optional[datetime] = None

    @classmethod
    def from_user(cls, user: User) -> "UserDetails":
        return cls(
            id=str(user.id),
            name=user.name,
            email=user.email,
            role=user.role.value,
            avatar_url=user.avatar_url,
            is_active=user.is_active,
            email_verified=user.email_verified,
            created_at=user.created_at,
            updated_at=user.updated_at,
            last_login_at=user.last_login_at,
        )
