"""
Login Use Case

Handles user authentication and returns a session token.
"""

import logging

from libs.result import Error, Result, Return
from src.api.utils.jwt import issue_session_token
from src.app.services.password_hasher import burn_verification_time, verify_password
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import normalize_email, utc_now
from src.domain.identity import UserIdentity
from .dtos import AuthResponse

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = Error("INVALID_CREDENTIALS", "Invalid email or password")


class LoginUseCase:
    """
    Use case for user login and session token issuance.

    Business Rules:
    - Unknown email and wrong password produce the same error
    - A dummy hash check runs for unknown emails so timing matches
    - Deactivated accounts are rejected before the password is checked
    - Updates user.last_login_at
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, email: str, password: str) -> Result[AuthResponse]:
        """
        Execute login use case.

        Args:
            email: User email (any case)
            password: Plain text password

        Returns:
            Result with AuthResponse containing identity and token, or Error
        """
        async with self.uow:
            user = await self.uow.users.get_by_email(normalize_email(email))

            if user is None:
                burn_verification_time()
                return Return.err(INVALID_CREDENTIALS)

            if not user.is_active:
                return Return.err(
                    Error(
                        "ACCOUNT_DEACTIVATED",
                        "Account is deactivated. Please contact support.",
                    )
                )

            if not verify_password(password, user.password_hash):
                return Return.err(INVALID_CREDENTIALS)

            user.last_login_at = utc_now()
            await self.uow.users.update(user)

            await self.uow.commit()

            identity = UserIdentity.from_user(user)

        token = issue_session_token(identity)
        logger.info(f"User {identity.id} logged in")

        return Return.ok(AuthResponse(user=identity, token=token))
