"""
Remove Member Use Case

Handles removing a user from a family roster.
"""

import logging
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.domain.policies import can_remove_members, is_owner
from src.domain.result import Error, Result, Return

from .delete_family_use_case import FAMILY_NOT_FOUND
from .dtos import RemoveMemberResponse

logger = logging.getLogger(__name__)


class RemoveMemberUseCase:
    """
    Use case for removing a member from a family.

    Business Rules:
    - Only the owner can remove members
    - The owner cannot be removed
    - Target must be on the roster
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor_id: UUID, family_id: UUID, target_user_id: UUID
    ) -> Result[RemoveMemberResponse]:
        """
        Execute remove member use case.

        Args:
            actor_id: User performing the removal
            family_id: Family to remove from
            target_user_id: User to remove

        Returns:
            Result with RemoveMemberResponse, or Error
        """
        async with self.uow:
            family = await self.uow.families.get_by_id(family_id)
            if family is None:
                return Return.err(FAMILY_NOT_FOUND)

            if not can_remove_members(family, actor_id):
                return Return.err(
                    Error.authorization(
                        "NOT_FAMILY_OWNER",
                        "You are not authorized to remove members from this family.",
                    )
                )

            target = await self.uow.users.get_by_id(target_user_id)
            if target is None:
                return Return.err(Error.not_found("USER_NOT_FOUND", "User not found."))

            if is_owner(family, target_user_id):
                return Return.err(
                    Error.domain(
                        "CANNOT_REMOVE_OWNER",
                        "user",
                        "Cannot remove the owner from the family.",
                    )
                )

            removed = await self.uow.members.delete_by_family_and_user(
                family_id, target_user_id
            )
            if not removed:
                return Return.err(
                    Error.domain(
                        "NOT_A_MEMBER", "user", "User is not a member of this family."
                    )
                )

            await self.uow.commit()

            logger.info(
                "User %s removed user %s from family %s",
                actor_id,
                target_user_id,
                family_id,
            )

            return Return.ok(RemoveMemberResponse(removed=removed))
