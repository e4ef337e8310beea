"""
Family Recipes Domain Entities

All domain entities organized by model.
Each entity in its own file for better maintainability.
"""

# Export all enums
from .enums import (
    FamilyRole,
    InvitationStatus,
    RecipeVisibility,
)

# Export all entities
from .user import User
from .family import Family
from .family_member import FamilyMember
from .family_invitation import FamilyInvitation
from .access_token import AccessToken
from .recipe import Recipe

__all__ = [
    # Enums
    "FamilyRole",
    "InvitationStatus",
    "RecipeVisibility",
    # Entities
    "User",
    "Family",
    "FamilyMember",
    "FamilyInvitation",
    "AccessToken",
    "Recipe",
]
