"""
Identity snapshot

Public projection of a User carried inside session tokens and returned by
the API. Never contains credentials.
"""

from typing import Optional

from pydantic import BaseModel

from .entities import User


class UserIdentity(BaseModel):
    """Identity snapshot embedded in session tokens"""

    id: str
    name: str
    email: str
    role: str
    avatar_url: Optional[str] = None

    @classmethod
    def from_user(cls, user: User) -> "UserIdentity":
        return cls(
            id=str(user.id),
            name=user.name,
            email=user.email,
            role=user.role.value,
            avatar_url=user.avatar_url,
        )
