from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.recipe_repository import IRecipeRepository
from src.domain.entities import Recipe


class RecipeRepository(IRecipeRepository):
    """Recipe repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def create(self, recipe: Recipe) -> Recipe:
        """Create a new recipe"""
        self.session.add(recipe)
        await self.session.flush()
        await self.session.refresh(recipe)
        return recipe
