"""
Family Recipes Domain Enums

All enumeration types used across domain entities.
"""

from enum import Enum


class FamilyRole(str, Enum):
    """Roster role within a family; admin is held by the owner only"""

    admin = "admin"
    member = "member"


class InvitationStatus(str, Enum):
    """Derived invitation lifecycle state"""

    pending = "pending"
    redeemed = "redeemed"
    expired = "expired"


class RecipeVisibility(str, Enum):
    """Who may see a recipe"""

    private = "private"
    family = "family"
    public = "public"

    @property
    def label(self) -> str:
        return self.value.capitalize()
