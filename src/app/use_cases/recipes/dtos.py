"""
Recipe Use Case DTOs (Data Transfer Objects)
"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, Field

from src.domain.entities import Recipe, RecipeVisibility


# ============================================================================
# Command DTOs
# ============================================================================


class CreateRecipeCommand(BaseModel):
    """
    Create recipe command.

    Field rules are enforced here; family existence is checked by
    CreateRecipeUseCase.
    """

    title: str = Field(min_length=3, max_length=255)
    description: Optional[str] = Field(default=None, max_length=65535)
    visibility: RecipeVisibility = RecipeVisibility.private
    family_id: Optional[UUID] = None
    image_path: Optional[str] = Field(default=None, max_length=255)
    prep_time: Optional[int] = Field(default=None, ge=0)
    cook_time: Optional[int] = Field(default=None, ge=0)
    servings: Optional[int] = Field(default=None, ge=1)


# ============================================================================
# Response DTOs
# ============================================================================


class RecipeResponse(BaseModel):
    """Stored recipe"""

    id: str
    user_id: str
    family_id: Optional[str]
    title: str
    description: Optional[str]
    visibility: str
    visibility_label: str
    image_path: Optional[str]
    prep_time: Optional[int]
    cook_time: Optional[int]
    servings: Optional[int]
    created_at: str
    updated_at: str

    @classmethod
    def from_entity(cls, recipe: Recipe) -> "RecipeResponse":
        return cls(
            id=str(recipe.id),
            user_id=str(recipe.user_id),
            family_id=str(recipe.family_id) if recipe.family_id else None,
            title=recipe.title,
            description=recipe.description,
            visibility=recipe.visibility.value,
            visibility_label=recipe.visibility.label,
            image_path=recipe.image_path,
            prep_time=recipe.prep_time,
            cook_time=recipe.cook_time,
            servings=recipe.servings,
            created_at=recipe.created_at.isoformat(),
            updated_at=recipe.updated_at.isoformat(),
        )
