"""
Authentication Use Case DTOs (Data Transfer Objects)

All Command and Response classes for auth domain.
Provides type safety and clear contracts between layers.
"""

from uuid import UUID

from pydantic import BaseModel

from src.domain.entities import User


# ============================================================================
# Command DTOs
# ============================================================================


class RegisterCommand(BaseModel):
    """
    Register command - raw registration intent

    Content rules (email format, password strength, confirmation)
    are checked by RegisterUseCase so all problems are reported together.
    """

    name: str
    email: str
    password: str
    password_confirmation: str


class AuthContext(BaseModel):
    """Caller identity resolved from a bearer token"""

    user_id: UUID
    token_id: UUID
    name: str
    email: str


# ============================================================================
# Response DTOs
# ============================================================================


class UserInfo(BaseModel):
    """Public user information in authentication responses"""

    id: str
    name: str
    email: str
    created_at: str

    @classmethod
    def from_entity(cls, user: User) -> "UserInfo":
        return cls(
            id=str(user.id),
            name=user.name,
            email=user.email,
            created_at=user.created_at.isoformat(),
        )


class AuthResponse(BaseModel):
    """Response for register and login use cases"""

    user: UserInfo
    token: str


class TokenResponse(BaseModel):
    """Response for refresh token use case"""

    token: str
