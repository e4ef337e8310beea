"""
Accept Invitation Use Case

Redeems an invitation code and joins the caller to the family.
"""

import logging
from uuid import UUID

from src.app.repositories.errors import DuplicateEntryError
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import FamilyMember, FamilyRole
from src.domain.result import Error, Result, Return

from .dtos import FamilyResponse
from .summaries import load_family_responses

logger = logging.getLogger(__name__)

INVALID_INVITATION = Error.not_found(
    "INVALID_INVITATION", "Invalid or expired invitation code."
)


class AcceptInvitationUseCase:
    """
    Use case for redeeming an invitation code.

    Business Rules:
    - Unknown, used and expired codes all fail the same way
    - Redemption is a compare-and-set on used_at, so a code joins at most once
    - An existing roster row keeps its role; new members join as member
    - Losing a concurrent join for the same user still redeems the code
    - Marking the code used and joining the roster commit together
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, actor_id: UUID, code: str) -> Result[FamilyResponse]:
        """
        Execute accept invitation use case.

        Args:
            actor_id: User redeeming the code
            code: Invitation code, case-insensitive

        Returns:
            Result with FamilyResponse, or Error
        """
        code = (code or "").strip().upper()
        if not code:
            return Return.err(INVALID_INVITATION)

        async with self.uow:
            now = utcnow()
            invitation = await self.uow.invitations.get_valid_by_code(code, now)
            if invitation is None:
                return Return.err(INVALID_INVITATION)

            family = await self.uow.families.get_by_id(invitation.family_id)
            if family is None:
                return Return.err(INVALID_INVITATION)

            if not await self.uow.invitations.mark_used(invitation.id, now):
                return Return.err(INVALID_INVITATION)

            member = await self.uow.members.get_by_family_and_user(family.id, actor_id)
            if member is None:
                try:
                    await self.uow.members.create(
                        FamilyMember(
                            family_id=family.id,
                            user_id=actor_id,
                            role=FamilyRole.member,
                            joined_at=now,
                        )
                    )
                except DuplicateEntryError:
                    logger.info("User %s joined family %s concurrently", actor_id, family.id)

            await self.uow.commit()

            logger.info(
                "User %s redeemed invitation %s for family %s",
                actor_id,
                invitation.id,
                family.id,
            )

            responses = await load_family_responses(self.uow, [family])
            return Return.ok(responses[0])
