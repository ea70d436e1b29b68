from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, EmailStr, Field

from src.api.error import ClientError, ServerError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    AuthResponse,
    LoginUseCase,
    RegisterCommand,
    RegisterUseCase,
    RequestPasswordResetResponse,
    RequestPasswordResetUseCase,
    ResetPasswordResponse,
    ResetPasswordUseCase,
    VerifySessionResponse,
)
from src.depends import get_current_user, get_unit_of_work
from src.domain.identity import UserIdentity

router = APIRouter(prefix="/auth", tags=["Authentication"])


class RegisterRequest(BaseModel):
    """
    Register HTTP request payload

    Validates incoming HTTP request before converting to RegisterCommand.
    """

    name: str = Field(..., min_length=1, max_length=255, description="Display name")
    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=1, description="User password (strength checked by policy)")


@router.post(
    "/register", status_code=status.HTTP_201_CREATED, response_model=AuthResponse
)
async def register(
    request: RegisterRequest, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """
    User Registration

    Creates a read-write account and returns a session token.

    Raises:
        - 400 Bad Request: DUPLICATE_ACCOUNT or WEAK_PASSWORD
        - 422 Unprocessable Entity: Invalid input (handled by FastAPI)
        - 500 Internal Server Error: Server error
    """
    command = RegisterCommand(
        name=request.name, email=request.email, password=request.password
    )

    use_case = RegisterUseCase(uow)
    result = await use_case.execute(command)

    if result.is_err():
        error = result.error
        if error.code in ("DUPLICATE_ACCOUNT", "WEAK_PASSWORD"):
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        raise ServerError(error)

    return result.value


class LoginRequest(BaseModel):
    """Login HTTP request payload"""

    email: EmailStr = Field(..., description="User email address")
    password: str = Field(..., min_length=1, description="User password")


@router.post("/login", status_code=status.HTTP_200_OK, response_model=AuthResponse)
async def login(request: LoginRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    User Login

    Raises:
        - 401 Unauthorized: INVALID_CREDENTIALS (same for unknown email and wrong password)
        - 403 Forbidden: ACCOUNT_DEACTIVATED
        - 500 Internal Server Error: Server error
    """
    use_case = LoginUseCase(uow)
    result = await use_case.execute(request.email, request.password)

    if result.is_err():
        error = result.error
        if error.code == "INVALID_CREDENTIALS":
            raise ClientError(error, status_code=status.HTTP_401_UNAUTHORIZED)
        elif error.code == "ACCOUNT_DEACTIVATED":
            raise ClientError(error, status_code=status.HTTP_403_FORBIDDEN)
        raise ServerError(error)

    return result.value


@router.get("/verify", status_code=status.HTTP_200_OK, response_model=VerifySessionResponse)
async def verify(current_user: UserIdentity = Depends(get_current_user)):
    """
    Verify Session

    Returns the current identity behind a bearer token. Errors are raised
    by get_current_user (401 INVALID_TOKEN, 403 ACCOUNT_DEACTIVATED,
    404 USER_NOT_FOUND).
    """
    return VerifySessionResponse(user=current_user)


class ForgotPasswordRequest(BaseModel):
    """Request password reset HTTP request payload"""

    email: EmailStr = Field(..., description="User email address")


@router.post(
    "/forgot-password",
    status_code=status.HTTP_200_OK,
    response_model=RequestPasswordResetResponse,
)
async def forgot_password(
    request: ForgotPasswordRequest, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """
    Request Password Reset

    Issues a single-use reset token valid for one hour. The token is returned
    so the caller can deliver it (email delivery is not handled here).

    Raises:
        - 404 Not Found: USER_NOT_FOUND
        - 500 Internal Server Error: Server error
    """
    use_case = RequestPasswordResetUseCase(uow)
    result = await use_case.execute(request.email)

    if result.is_err():
        error = result.error
        if error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value


class ResetPasswordRequest(BaseModel):
    """Reset password HTTP request payload"""

    token: str = Field(..., min_length=1, description="Password reset token")
    new_password: str = Field(..., min_length=1, description="New password (strength checked by policy)")


@router.post(
    "/reset-password",
    status_code=status.HTTP_200_OK,
    response_model=ResetPasswordResponse,
)
async def reset_password(
    request: ResetPasswordRequest, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """
    Reset Password

    Raises:
        - 400 Bad Request: INVALID_TOKEN or WEAK_PASSWORD
        - 404 Not Found: USER_NOT_FOUND
        - 410 Gone: TOKEN_EXPIRED
        - 500 Internal Server Error: Server error
    """
    use_case = ResetPasswordUseCase(uow)
    result = await use_case.execute(request.token, request.new_password)

    if result.is_err():
        error = result.error
        if error.code in ("INVALID_TOKEN", "WEAK_PASSWORD"):
            raise ClientError(error, status_code=status.HTTP_400_BAD_REQUEST)
        elif error.code == "TOKEN_EXPIRED":
            raise ClientError(error, status_code=status.HTTP_410_GONE)
        elif error.code == "USER_NOT_FOUND":
            raise ClientError(error, status_code=status.HTTP_404_NOT_FOUND)
        raise ServerError(error)

    return result.value
