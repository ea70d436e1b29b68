from typing import Optional

from fastapi import Depends, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from libs.result import Error
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import ClientError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import VerifySessionUseCase
from src.domain.identity import UserIdentity

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer(auto_error=False)

SESSION_ERROR_STATUS = {
    "INVALID_TOKEN": status.HTTP_401_UNAUTHORIZED,
    "ACCOUNT_DEACTIVATED": status.HTTP_403_FORBIDDEN,
    "USER_NOT_FOUND": status.HTTP_404_NOT_FOUND,
}


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> UserIdentity:
    """
    Dependency to resolve the bearer session token to the current user.

    The token is verified and the user re-fetched, so role changes and
    deactivation apply before the token's natural expiry.

    Raises:
        ClientError: 401 if token is missing/invalid/expired,
            403 if the account is deactivated, 404 if the user is gone
    """
    if credentials is None:
        raise ClientError(
            Error("INVALID_TOKEN", "Access token required"),
            status_code=status.HTTP_401_UNAUTHORIZED,
        )

    result = await VerifySessionUseCase(uow).execute(credentials.credentials)

    if result.is_err():
        error = result.error
        raise ClientError(
            error,
            status_code=SESSION_ERROR_STATUS.get(error.code, status.HTTP_401_UNAUTHORIZED),
        )

    return result.value.user
