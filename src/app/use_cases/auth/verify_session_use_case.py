"""
Verify Session Use Case

Resolves a session token to the user's current identity.
"""

from uuid import UUID

from libs.result import Error, Result, Return
from src.api.utils.jwt import parse_session_token
from src.app.services.unit_of_work import UnitOfWork
from src.domain.identity import UserIdentity
from .dtos import VerifySessionResponse

INVALID_TOKEN = Error("INVALID_TOKEN", "Invalid or expired session token")


class VerifySessionUseCase:
    """
    Use case for verifying a bearer session token.

    Business Rules:
    - Token signature and expiry are checked without server-side state
    - The user is re-fetched so role and active changes apply immediately
    - The returned identity is the current one, not the token's snapshot
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, token: str) -> Result[VerifySessionResponse]:
        snapshot = parse_session_token(token)
        if snapshot is None:
            return Return.err(INVALID_TOKEN)

        try:
            user_id = UUID(snapshot.id)
        except ValueError:
            return Return.err(INVALID_TOKEN)

        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            if not user.is_active:
                return Return.err(
                    Error(
                        "ACCOUNT_DEACTIVATED",
                        "Account is deactivated. Please contact support.",
                    )
                )

            return Return.ok(VerifySessionResponse(user=UserIdentity.from_user(user)))
