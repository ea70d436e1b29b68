"""
Request Password Reset Use Case

Handles generating single-use password reset tokens.
"""

import logging
from datetime import timedelta

from libs.result import Error, Result, Return
from config import ApplicationConfig
from src.app.services.reset_tokens import generate_reset_token, hash_reset_token
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import normalize_email, utc_now
from src.domain.entities import PasswordResetToken
from .dtos import RequestPasswordResetResponse

logger = logging.getLogger(__name__)


class RequestPasswordResetUseCase:
    """
    Use case for requesting password reset.

    Business Rules:
    - Email must belong to an existing account (USER_NOT_FOUND otherwise)
    - Token is 32 bytes from the OS CSPRNG, URL-safe encoded
    - Only the SHA-256 hash of the token is stored
    - Token expires in RESET_TOKEN_TTL_MINUTES (1 hour by default)
    - Plain token is returned to the caller for delivery (email is out of scope)
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, email: str) -> Result[RequestPasswordResetResponse]:
        """
        Execute request password reset use case.

        Args:
            email: User's email address

        Returns:
            Result with the plain reset token and its expiry, or Error
        """
        async with self.uow:
            user = await self.uow.users.get_by_email(normalize_email(email))
            if user is None:
                return Return.err(
                    Error("USER_NOT_FOUND", "No account found with this email address")
                )

            reset_token = generate_reset_token()
            now = utc_now()

            password_reset_token = PasswordResetToken(
                email=user.email,
                token_hash=hash_reset_token(reset_token),
                created_at=now,
                expires_at=now + timedelta(minutes=ApplicationConfig.RESET_TOKEN_TTL_MINUTES),
            )
            password_reset_token = await self.uow.password_reset_tokens.create(
                password_reset_token
            )

            await self.uow.commit()

            logger.info(f"Password reset token issued for user {user.id}")

            return Return.ok(
                RequestPasswordResetResponse(
                    token=reset_token,
                    expires_at=password_reset_token.expires_at,
                    message="Password reset token generated",
                )
            )
