"""
Authentication Use Cases

All authentication and session-token business logic.
"""

from .register_use_case import RegisterUseCase
from .login_use_case import LoginUseCase
from .logout_use_case import LogoutUseCase
from .refresh_token_use_case import RefreshTokenUseCase
from .authenticate_token_use_case import AuthenticateTokenUseCase
from .dtos import (
    AuthContext,
    AuthResponse,
    RegisterCommand,
    TokenResponse,
    UserInfo,
)

__all__ = [
    # Use Cases
    "RegisterUseCase",
    "LoginUseCase",
    "LogoutUseCase",
    "RefreshTokenUseCase",
    "AuthenticateTokenUseCase",
    # DTOs - Commands
    "RegisterCommand",
    "AuthContext",
    # DTOs - Responses
    "AuthResponse",
    "TokenResponse",
    "UserInfo",
]
