"""
User Management Use Cases

All user-related business logic.
"""

from .get_user_use_case import GetUserUseCase
from .update_user_use_case import UpdateUserUseCase
from .dtos import UpdateUserCommand, UserDetails

__all__ = [
    "GetUserUseCase",
    "UpdateUserUseCase",
    "UpdateUserCommand",
    "UserDetails",
]
