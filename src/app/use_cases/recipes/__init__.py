"""
Recipe Use Cases
"""

from .create_recipe_use_case import CreateRecipeUseCase
from .dtos import CreateRecipeCommand, RecipeResponse

__all__ = [
    "CreateRecipeUseCase",
    "CreateRecipeCommand",
    "RecipeResponse",
]
