"""
Create Recipe Use Case
"""

import logging
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import Recipe
from src.domain.result import Error, Result, Return

from .dtos import CreateRecipeCommand, RecipeResponse

logger = logging.getLogger(__name__)


class CreateRecipeUseCase:
    """
    Use case for storing a recipe.

    Business Rules:
    - Recipe belongs to the caller
    - family_id, when given, must reference an existing family
    - Membership of that family is not required
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor_id: UUID, command: CreateRecipeCommand
    ) -> Result[RecipeResponse]:
        async with self.uow:
            if command.family_id is not None:
                family = await self.uow.families.get_by_id(command.family_id)
                if family is None:
                    return Return.err(
                        Error.validation(
                            {"family_id": ["The selected family id is invalid."]}
                        )
                    )

            now = utcnow()
            recipe = await self.uow.recipes.create(
                Recipe(
                    user_id=actor_id,
                    family_id=command.family_id,
                    title=command.title,
                    description=command.description,
                    visibility=command.visibility,
                    image_path=command.image_path,
                    prep_time=command.prep_time,
                    cook_time=command.cook_time,
                    servings=command.servings,
                    created_at=now,
                    updated_at=now,
                )
            )

            await self.uow.commit()

            logger.info("User %s created recipe %s", actor_id, recipe.id)

            return Return.ok(RecipeResponse.from_entity(recipe))
