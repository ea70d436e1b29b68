from datetime import datetime, timedelta
from typing import Optional

from jose import JWTError, jwt
from pydantic import ValidationError

from config import ApplicationConfig
from src.domain.base import utc_now
from src.domain.identity import UserIdentity

ALGORITHM = "HS256"


def issue_session_token(
    identity: UserIdentity, now: Optional[datetime] = None
) -> str:
    """
    Issue a self-contained session token

    Args:
        identity: Identity snapshot to embed
        now: Issue instant (naive UTC), defaults to the current time

    Returns:
        JWT string (HS256, SESSION_TOKEN_TTL_DAYS expiry)
    """
    now = now or utc_now()
    payload = {
        "sub": identity.id,
        "name": identity.name,
        "email": identity.email,
        "role": identity.role,
        "avatar_url": identity.avatar_url,
        "iat": now,
        "exp": now + timedelta(days=ApplicationConfig.SESSION_TOKEN_TTL_DAYS),
    }
    return jwt.encode(payload, ApplicationConfig.AUTH_SECRET, algorithm=ALGORITHM)


def parse_session_token(token: str) -> Optional[UserIdentity]:
    """
    Verify and decode a session token

    Args:
        token: JWT token string

    Returns:
        Embedded identity snapshot, or None if malformed, forged or expired
    """
    try:
        payload = jwt.decode(
            token, ApplicationConfig.AUTH_SECRET, algorithms=[ALGORITHM]
        )
        return UserIdentity(
            id=payload["sub"],
            name=payload["name"],
            email=payload["email"],
            role=payload["role"],
            avatar_url=payload.get("avatar_url"),
        )
    except (JWTError, KeyError, ValidationError):
        return None
