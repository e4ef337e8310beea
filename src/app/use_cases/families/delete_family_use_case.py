"""
Delete Family Use Case
"""

import logging
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.domain.policies import can_delete_family
from src.domain.result import Error, Result, Return

from .dtos import DeleteFamilyResponse

logger = logging.getLogger(__name__)

FAMILY_NOT_FOUND = Error.not_found("FAMILY_NOT_FOUND", "Family not found.")


class DeleteFamilyUseCase:
    """
    Use case for deleting a family.

    Business Rules:
    - Only the owner can delete
    - Roster rows and invitations go with the family
    - Recipes survive with family_id cleared
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor_id: UUID, family_id: UUID
    ) -> Result[DeleteFamilyResponse]:
        async with self.uow:
            family = await self.uow.families.get_by_id(family_id)
            if family is None:
                return Return.err(FAMILY_NOT_FOUND)

            if not can_delete_family(family, actor_id):
                return Return.err(
                    Error.authorization(
                        "NOT_FAMILY_OWNER",
                        "You are not authorized to delete this family.",
                    )
                )

            await self.uow.families.delete(family)
            await self.uow.commit()

            logger.info("User %s deleted family %s", actor_id, family_id)

            return Return.ok(DeleteFamilyResponse(family_id=str(family_id)))
