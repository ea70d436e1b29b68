from uuid import UUID

from fastapi import APIRouter, Depends, status

from src.api.error import ClientError, ServerError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.users import GetUserUseCase
from src.depends import get_current_user, get_unit_of_work
from src.domain.identity import UserIdentity

router = APIRouter(prefix="/users", tags=["User"])


@router.get("/{user_id}", status_code=status.HTTP_200_OK, response_model=UserIdentity)
async def get_user(
    user_id: UUID,
    current_user: UserIdentity = Depends(get_current_user),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Get User

    Returns the public identity of any user. Requires a valid session.

    Raises:
        - 401 Unauthorized: Missing or invalid session token
        - 404 Not Found: USER_NOT_FOUND
    """
    use_case = GetUserUseCase(uow)
    result = await use_case.execute(user_id)

    if result.is_err():
        error = result.error
        if error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value
