"""
Use Cases

All use cases are organized into domain folders:
- auth/: Registration, login and bearer tokens
- families/: Families, rosters and invitations
- recipes/: Recipe storage

Import from subdirectories for better organization.
"""

from .auth import (
    AuthenticateTokenUseCase,
    LoginUseCase,
    LogoutUseCase,
    RefreshTokenUseCase,
    RegisterUseCase,
)
from .families import (
    AcceptInvitationUseCase,
    CreateFamilyUseCase,
    DeleteFamilyUseCase,
    InviteMemberUseCase,
    LeaveFamilyUseCase,
    ListFamiliesUseCase,
    RemoveMemberUseCase,
)
from .recipes import CreateRecipeUseCase

__all__ = [
    # Auth
    "RegisterUseCase",
    "LoginUseCase",
    "LogoutUseCase",
    "RefreshTokenUseCase",
    "AuthenticateTokenUseCase",
    # Families
    "CreateFamilyUseCase",
    "DeleteFamilyUseCase",
    "LeaveFamilyUseCase",
    "RemoveMemberUseCase",
    "ListFamiliesUseCase",
    "InviteMemberUseCase",
    "AcceptInvitationUseCase",
    # Recipes
    "CreateRecipeUseCase",
]
