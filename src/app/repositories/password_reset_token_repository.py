from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from src.domain.entities import PasswordResetToken


class IPasswordResetTokenRepository(ABC):
    """PasswordResetToken repository interface - application layer"""

    @abstractmethod
    async def create(self, token: PasswordResetToken) -> PasswordResetToken:
        """Create a new password reset token"""
        pass

    @abstractmethod
    async def get_by_token_hash(self, token_hash: str) -> Optional[PasswordResetToken]:
        """Get password reset token by token hash"""
        pass

    @abstractmethod
    async def delete_by_token_hash(self, token_hash: str) -> bool:
        """Delete token by hash. Returns False if it was already gone."""
        pass

    @abstractmethod
    async def delete_expired(self, now: datetime) -> int:
        """Delete every token that expired before now. Returns count."""
        pass
