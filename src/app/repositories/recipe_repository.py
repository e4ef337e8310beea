from abc import ABC, abstractmethod

from src.domain.entities import Recipe


class IRecipeRepository(ABC):
    """Recipe repository interface - application layer"""

    @abstractmethod
    async def create(self, recipe: Recipe) -> Recipe:
        """Create a new recipe"""
        pass
