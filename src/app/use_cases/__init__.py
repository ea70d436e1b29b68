"""
Use Cases

All use cases are organized into domain folders:
- auth/: Registration, login, session verification, password reset
- users/: User lookup and admin management
- admin/: Maintenance operations

Import from subdirectories for better organization.
"""

from .auth import (
    RegisterUseCase,
    RegisterCommand,
    LoginUseCase,
    VerifySessionUseCase,
    RequestPasswordResetUseCase,
    ResetPasswordUseCase,
)
from .users import (
    GetUserUseCase,
    UpdateUserUseCase,
)
from .admin import (
    PurgeExpiredResetTokensUseCase,
    EnsureDefaultAdminUseCase,
)

__all__ = [
    # Auth
    "RegisterUseCase",
    "RegisterCommand",
    "LoginUseCase",
    "VerifySessionUseCase",
    "RequestPasswordResetUseCase",
    "ResetPasswordUseCase",
    # Users
    "GetUserUseCase",
    "UpdateUserUseCase",
    # Admin
    "PurgeExpiredResetTokensUseCase",
    "EnsureDefaultAdminUseCase",
]
