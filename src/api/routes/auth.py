from fastapi import APIRouter, Depends, status
from pydantic import BaseModel, Field

from src.api.error import raise_for_error
from src.api.responses import success
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    AuthContext,
    LoginUseCase,
    LogoutUseCase,
    RefreshTokenUseCase,
    RegisterCommand,
    RegisterUseCase,
)
from src.depends import get_current_auth, get_unit_of_work

router = APIRouter(tags=["Authentication"])


class RegisterRequest(BaseModel):
    """
    Register HTTP request payload

    Only presence and type are checked here. Email format, password
    strength and confirmation are validated by RegisterUseCase so every
    field error is reported in one response.
    """

    name: str = Field(..., description="Display name")
    email: str = Field(..., description="User email address")
    password: str = Field(..., description="User password")
    password_confirmation: str = Field(..., description="Repeat of the password")


@router.post("/register", status_code=status.HTTP_201_CREATED)
async def register(
    request: RegisterRequest, uow: UnitOfWork = Depends(get_unit_of_work)
):
    """
    User Registration

    Creates an account and returns the first access token.

    Raises:
        - 422 Unprocessable Entity: Invalid input or email already taken
    """
    command = RegisterCommand(
        name=request.name,
        email=request.email,
        password=request.password,
        password_confirmation=request.password_confirmation,
    )

    result = await RegisterUseCase(uow).execute(command)
    if result.is_err():
        raise_for_error(result.error)

    return success("User registered successfully", result.value)


class LoginRequest(BaseModel):
    """
    Login HTTP request payload
    """

    email: str = Field(..., description="User email address")
    password: str = Field(..., description="User password")


@router.post("/login", status_code=status.HTTP_200_OK)
async def login(request: LoginRequest, uow: UnitOfWork = Depends(get_unit_of_work)):
    """
    User Login

    Revokes every previous token of the user and returns a fresh one.

    Raises:
        - 401 Unauthorized: Invalid credentials
    """
    result = await LoginUseCase(uow).execute(request.email, request.password)
    if result.is_err():
        raise_for_error(result.error)

    return success("Login successful", result.value)


@router.post("/logout", status_code=status.HTTP_200_OK)
async def logout(
    auth: AuthContext = Depends(get_current_auth),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Revoke the presented token.

    Raises:
        - 401 Unauthorized: Missing or invalid token
    """
    result = await LogoutUseCase(uow).execute(auth)
    if result.is_err():
        raise_for_error(result.error)

    return success("Successfully logged out")


@router.post("/refresh-token", status_code=status.HTTP_200_OK)
async def refresh_token(
    auth: AuthContext = Depends(get_current_auth),
    uow: UnitOfWork = Depends(get_unit_of_work),
):
    """
    Rotate the presented token.

    The old token stops working; the response carries its replacement.

    Raises:
        - 401 Unauthorized: Missing or invalid token
    """
    result = await RefreshTokenUseCase(uow).execute(auth)
    if result.is_err():
        raise_for_error(result.error)

    return success("Token refreshed successfully", result.value)
