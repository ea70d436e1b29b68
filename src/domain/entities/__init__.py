"""
Template Manager Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

from .enums import UserRole
from .user import User
from .password_reset_token import PasswordResetToken

__all__ = [
    "UserRole",
    "User",
    "PasswordResetToken",
]
