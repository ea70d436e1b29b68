"""
Admin API Routes - System Administration Endpoints

User management requires a session token belonging to an admin.
Maintenance endpoints are for internal services and use the Admin API Key.
"""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.api.error import ClientError, ServerError
from src.api.utils.admin_auth import verify_admin_api_key
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.admin import (
    PurgeExpiredResetTokensResponse,
    PurgeExpiredResetTokensUseCase,
)
from src.app.use_cases.users import UpdateUserCommand, UpdateUserUseCase, UserDetails
from src.depends import get_current_user, get_unit_of_work
from src.domain.identity import UserIdentity

router = APIRouter(prefix="/admin", tags=["Admin"])


class UpdateUserRequest(BaseModel):
    """Admin user update payload"""

    name: Optional[str] = Field(None, min_length=1, max_length=255)
    role: Optional[str] = Field(None, description="read, read-write or admin")
    is_active: Optional[bool] = None


@router.patch(
    "/users/{user_id}", status_code=status.HTTP_200_OK, response_model=UserDetails
)
async def update_user(
    user_id: UUID,
    request: UpdateUserRequest,
    current_user: UserIdentity = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Update User

    Changes a user's role, name or active flag. Deactivating a user blocks
    their login and every session token they already hold.

    Raises:
        - 400 Bad Request: INVALID_ROLE, CANNOT_DEMOTE_SELF
        - 401 Unauthorized: Missing or invalid session token
        - 403 Forbidden: FORBIDDEN (caller is not an admin)
        - 404 Not Found: USER_NOT_FOUND
    """
    command = UpdateUserCommand(
        name=request.name, role=request.role, is_active=request.is_active
    )

    use_case = UpdateUserUseCase(uow)
    result = await use_case.execute(current_user, user_id, command)

    if result.is_err():
        error = result.error
        if error.code in ("INVALID_ROLE", "CANNOT_DEMOTE_SELF"):
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code == "FORBIDDEN":
            raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
        elif error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


@router.delete(
    "/password-reset-tokens/expired",
    status_code=status.HTTP_200_OK,
    response_model=PurgeExpiredResetTokensResponse,
    dependencies=[Depends(verify_admin_api_key)],
)
async def purge_expired_reset_tokens(uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    Purge Expired Reset Tokens

    Sweep for schedulers. Idempotent.

    Requires: X-Admin-API-Key header
    """
    use_case = PurgeExpiredResetTokensUseCase(uow)
    result = await use_case.execute()

    if result.is_err():
        raise ServerError(result.error)

    return result.value
