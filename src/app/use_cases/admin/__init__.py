"""
Admin Use Cases

System administration and maintenance operations.
"""

from .purge_expired_reset_tokens_use_case import (
    PurgeExpiredResetTokensResponse,
    PurgeExpiredResetTokensUseCase,
)
from .ensure_default_admin_use_case import EnsureDefaultAdminUseCase

__all__ = [
    "PurgeExpiredResetTokensUseCase",
    "PurgeExpiredResetTokensResponse",
    "EnsureDefaultAdminUseCase",
]
