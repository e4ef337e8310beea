"""
Create Family Use Case

Creates a family and puts its creator on the roster as admin.
"""

import logging
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import Family, FamilyMember, FamilyRole
from src.domain.result import Error, Result, Return
from src.domain.rules import validate_family_name

from .dtos import FamilyResponse

logger = logging.getLogger(__name__)


class CreateFamilyUseCase:
    """
    Use case for creating a family.

    Business Rules:
    - Name is trimmed and must be 3-255 characters
    - The creator becomes owner and gets a roster row with role=admin
    - Family and roster row are committed together
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, actor_id: UUID, name: str) -> Result[FamilyResponse]:
        """
        Execute create family use case.

        Args:
            actor_id: User creating the family
            name: Requested family name

        Returns:
            Result with FamilyResponse, or Error
        """
        errors = validate_family_name(name)
        if errors:
            return Return.err(Error.validation(errors))

        async with self.uow:
            owner = await self.uow.users.get_by_id(actor_id)
            if owner is None:
                return Return.err(Error.not_found("USER_NOT_FOUND", "User not found."))

            now = utcnow()
            family = await self.uow.families.create(
                Family(
                    name=name.strip(),
                    owner_id=actor_id,
                    created_at=now,
                    updated_at=now,
                )
            )
            member = await self.uow.members.create(
                FamilyMember(
                    family_id=family.id,
                    user_id=actor_id,
                    role=FamilyRole.admin,
                    joined_at=now,
                )
            )

            await self.uow.commit()

            logger.info("User %s created family %s", actor_id, family.id)

            return Return.ok(
                FamilyResponse.from_entities(family, owner, [(member, owner)])
            )
