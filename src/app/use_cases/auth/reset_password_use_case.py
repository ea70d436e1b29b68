"""
Reset Password Use Case

Consumes a single-use reset token and sets a new password.
"""

import logging

from libs.result import Error, Result, Return
from src.app.services.password_hasher import hash_password
from src.app.services.password_policy import evaluate_password_strength, weak_password_error
from src.app.services.reset_tokens import hash_reset_token
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from .dtos import ResetPasswordResponse

logger = logging.getLogger(__name__)

INVALID_TOKEN = Error("INVALID_TOKEN", "Invalid or expired reset token")


class ResetPasswordUseCase:
    """
    Use case for resetting a password with a reset token.

    Business Rules:
    - Token is looked up by its SHA-256 hash
    - Expired tokens are deleted and rejected with TOKEN_EXPIRED
    - The token is claimed by deleting it; a concurrent caller that loses
      the delete sees INVALID_TOKEN
    - New password must pass the strength policy, checked after the
      token is found and known to be unexpired
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, token: str, new_password: str) -> Result[ResetPasswordResponse]:
        """
        Execute reset password use case.

        Args:
            token: Plain reset token issued by RequestPasswordResetUseCase
            new_password: New password to set

        Returns:
            Result with confirmation status, or Error

        Errors:
            - INVALID_TOKEN: Token not found or already consumed
            - TOKEN_EXPIRED: Token is past its expiry (and has been purged)
            - WEAK_PASSWORD: Password does not meet the strength policy
            - USER_NOT_FOUND: Account behind the token no longer exists
        """
        if not token:
            return Return.err(INVALID_TOKEN)

        token_hash = hash_reset_token(token)

        async with self.uow:
            reset_token = await self.uow.password_reset_tokens.get_by_token_hash(token_hash)
            if reset_token is None:
                return Return.err(INVALID_TOKEN)

            now = utc_now()
            if now > reset_token.expires_at:
                await self.uow.password_reset_tokens.delete_by_token_hash(token_hash)
                await self.uow.commit()
                return Return.err(Error("TOKEN_EXPIRED", "Reset token has expired"))

            # Token stays claimable when the new password is rejected
            strength = evaluate_password_strength(new_password)
            if not strength.is_valid:
                return Return.err(weak_password_error(strength))

            claimed = await self.uow.password_reset_tokens.delete_by_token_hash(token_hash)
            if not claimed:
                return Return.err(INVALID_TOKEN)

            user = await self.uow.users.get_by_email(reset_token.email)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            user.password_hash = hash_password(new_password)
            user.updated_at = now
            await self.uow.users.update(user)

            await self.uow.commit()

            logger.info(f"Password reset completed for user {user.id}")

            return Return.ok(
                ResetPasswordResponse(
                    status="success",
                    message="Password reset successfully",
                )
            )
