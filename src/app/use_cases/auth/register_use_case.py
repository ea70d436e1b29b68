import logging

from libs.result import Error, Result, Return

from config import ApplicationConfig
from src.api.utils.jwt import issue_session_token
from src.app.services.errors import DuplicateRecordError
from src.app.services.password_hasher import hash_password
from src.app.services.password_policy import evaluate_password_strength, weak_password_error
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import normalize_email
from src.domain.entities import User, UserRole
from src.domain.identity import UserIdentity
from .dtos import AuthResponse
from .register_dto import RegisterCommand

logger = logging.getLogger(__name__)

DUPLICATE_ACCOUNT = Error("DUPLICATE_ACCOUNT", "User with this email already exists")


class RegisterUseCase:
    """
    Register Use Case

    Command/Response Pattern:
    - Input: RegisterCommand (validated business intent)
    - Output: Result[AuthResponse] (identity snapshot + session token)

    Business Logic:
    1. Normalize email (lowercase)
    2. Reject if email already exists (DUPLICATE_ACCOUNT)
    3. Enforce password strength policy (WEAK_PASSWORD)
    4. Hash password (peppered bcrypt)
    5. Create User with role=read-write, active, email not verified
    6. Issue session token for the new identity
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, command: RegisterCommand) -> Result[AuthResponse]:
        """
        Execute register use case

        Args:
            command: RegisterCommand with name, email, password

        Returns:
            Result[AuthResponse] with identity and token,
            or Error(DUPLICATE_ACCOUNT / WEAK_PASSWORD)
        """
        email = normalize_email(command.email)

        async with self.uow:
            existing_user = await self.uow.users.get_by_email(email)
            if existing_user:
                return Return.err(DUPLICATE_ACCOUNT)

            strength = evaluate_password_strength(command.password)
            if not strength.is_valid:
                return Return.err(weak_password_error(strength))

            user = User(
                name=command.name.strip(),
                email=email,
                password_hash=hash_password(command.password),
                role=UserRole.read_write,
                is_active=True,
                email_verified=False,
                avatar_url=ApplicationConfig.AVATAR_URL_TEMPLATE.format(email=email),
            )

            # Unique index catches a concurrent registration for the same email
            try:
                user = await self.uow.users.create(user)
                await self.uow.commit()
            except DuplicateRecordError:
                return Return.err(DUPLICATE_ACCOUNT)

            identity = UserIdentity.from_user(user)

        token = issue_session_token(identity)
        logger.info(f"Registered user {identity.id}")

        return Return.ok(AuthResponse(user=identity, token=token))
