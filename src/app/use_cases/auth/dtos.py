"""
Authentication Use Case DTOs (Data Transfer Objects)

All Response classes for auth domain.
Provides type safety and clear contracts between layers.
"""

from datetime import datetime

from pydantic import BaseModel

from src.domain.identity import UserIdentity


# ============================================================================
# Response DTOs
# ============================================================================


class AuthResponse(BaseModel):
    """Response for register and login use cases"""

    user: UserIdentity
    token: str


class VerifySessionResponse(BaseModel):
    """Response for verify session use case"""

    user: UserIdentity


class RequestPasswordResetResponse(BaseModel):
    """Response for request password reset use case"""

    token: str
    expires_at: datetime
    message: str


class ResetPasswordResponse(BaseModel):
    """Response for reset password use case"""

    status: str
    message: str
