import logging
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.domain.policies import is_member, is_owner
from src.domain.result import Error, Result, Return

from .delete_family_use_case import FAMILY_NOT_FOUND

logger = logging.getLogger(__name__)


class LeaveFamilyUseCase:
    """
    Remove the caller from a family roster.

    The owner cannot leave; deleting the family is the only way out.
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, actor_id: UUID, family_id: UUID) -> Result[None]:
        async with self.uow:
            family = await self.uow.families.get_by_id(family_id)
            if family is None:
                return Return.err(FAMILY_NOT_FOUND)

            if is_owner(family, actor_id):
                return Return.err(
                    Error.domain(
                        "OWNER_CANNOT_LEAVE",
                        "family",
                        "The owner cannot leave the family; delete the family instead.",
                    )
                )

            roster = [member for member, _ in await self.uow.members.get_roster([family_id])]
            if not is_member(roster, actor_id):
                return Return.err(
                    Error.domain(
                        "NOT_A_MEMBER", "family", "You are not a member of this family."
                    )
                )

            await self.uow.members.delete_by_family_and_user(family_id, actor_id)

            await self.uow.commit()

            logger.info("User %s left family %s", actor_id, family_id)

            return Return.ok()
