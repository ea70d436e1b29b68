"""
Update User Use Case

Admin changes to a user's role, name or active flag.
"""

import logging
from uuid import UUID

from libs.result import Error, Result, Return
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utc_now
from src.domain.entities import UserRole
from src.domain.identity import UserIdentity
from .dtos import UpdateUserCommand, UserDetails

logger = logging.getLogger(__name__)


class UpdateUserUseCase:
    """
    Use case for admin user management.

    Business Rules:
    - Only admins can update users
    - Role must be one of read, read-write, admin
    - Admin cannot demote or deactivate themselves
    - Deactivation is a flag flip; users are never deleted
    - Existing session tokens stay signed but VerifySession sees the change
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor: UserIdentity, user_id: UUID, command: UpdateUserCommand
    ) -> Result[UserDetails]:
        """
        Execute update user use case.

        Args:
            actor: Current identity of the caller (freshly verified)
            user_id: User ID being changed
            command: Fields to change

        Returns:
            Result with the updated user, or Error
        """
        if actor.role != UserRole.admin.value:
            return Return.err(Error("FORBIDDEN", "Admin role required"))

        new_role = None
        if command.role is not None:
            try:
                new_role = UserRole(command.role)
            except ValueError:
                return Return.err(
                    Error(
                        "INVALID_ROLE",
                        f"Invalid role: {command.role}. Must be one of: read, read-write, admin",
                    )
                )

        is_self = actor.id == str(user_id)
        if is_self and (
            (new_role is not None and new_role != UserRole.admin)
            or command.is_active is False
        ):
            return Return.err(
                Error("CANNOT_DEMOTE_SELF", "Admin cannot demote or deactivate themselves")
            )

        async with self.uow:
            user = await self.uow.users.get_by_id(user_id)
            if user is None:
                return Return.err(Error("USER_NOT_FOUND", "User not found"))

            if command.name is not None:
                user.name = command.name.strip()
            if new_role is not None:
                user.role = new_role
            if command.is_active is not None:
                user.is_active = command.is_active
            user.updated_at = utc_now()

            await self.uow.users.update(user)
            await self.uow.commit()

            logger.info(
                f"User {user.id} updated by {actor.id}: "
                f"role={user.role.value} is_active={user.is_active}"
            )

            return Return.ok(UserDetails.from_user(user))
