"""
Ensure Default Admin Use Case

Seeds an admin account into an empty user store at startup.
"""

import logging

from libs.result import Result, Return
from src.app.services.password_hasher import hash_password
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import normalize_email
from src.domain.entities import User, UserRole

logger = logging.getLogger(__name__)


class EnsureDefaultAdminUseCase:
    """
    Business Rules:
    - Only runs when no users exist at all
    - Seeded admin has email_verified=True
    - Returns True when an account was created
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, name: str, email: str, password: str, avatar_url_template: str
    ) -> Result[bool]:
        async with self.uow:
            if await self.uow.users.count() > 0:
                return Return.ok(False)

            email = normalize_email(email)
            admin = User(
                name=name,
                email=email,
                password_hash=hash_password(password),
                role=UserRole.admin,
                is_active=True,
                email_verified=True,
                avatar_url=avatar_url_template.format(email=email),
            )
            await self.uow.users.create(admin)
            await self.uow.commit()

        logger.info(f"No users found, created default admin {email}")
        return Return.ok(True)
