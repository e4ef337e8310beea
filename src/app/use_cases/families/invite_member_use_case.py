"""
Invite Member Use Case

Issues a single-use invitation code for a family.
"""

import logging
from datetime import timedelta
from typing import Optional
from uuid import UUID

from config import ApplicationConfig
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import FamilyInvitation
from src.domain.policies import can_invite_members
from src.domain.result import Error, ErrorKind, Result, Return
from src.domain.rules import generate_invitation_code, validate_email_address

from .delete_family_use_case import FAMILY_NOT_FOUND
from .dtos import InviteMemberResponse

logger = logging.getLogger(__name__)


class InviteMemberUseCase:
    """
    Use case for inviting a member to a family.

    Business Rules:
    - Only the owner can invite
    - Code is 8 uppercase hex characters, regenerated on collision
    - Invitation expires after INVITATION_TTL_DAYS
    - The optional email is stored as a label only; an empty one counts as absent
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(
        self, actor_id: UUID, family_id: UUID, email: Optional[str] = None
    ) -> Result[InviteMemberResponse]:
        """
        Execute invite member use case.

        Args:
            actor_id: User sending the invite
            family_id: Target family
            email: Optional address the code is meant for

        Returns:
            Result with InviteMemberResponse, or Error
        """
        email = email or None
        if email is not None:
            messages = validate_email_address(email)
            if messages:
                return Return.err(Error.validation({"email": messages}))

        async with self.uow:
            family = await self.uow.families.get_by_id(family_id)
            if family is None:
                return Return.err(FAMILY_NOT_FOUND)

            if not can_invite_members(family, actor_id):
                return Return.err(
                    Error.authorization(
                        "NOT_FAMILY_OWNER",
                        "You are not authorized to invite members to this family.",
                    )
                )

            for _ in range(ApplicationConfig.INVITATION_CODE_ATTEMPTS):
                code = generate_invitation_code()
                if await self.uow.invitations.get_by_code(code) is None:
                    break
            else:
                logger.error(
                    "Could not generate a unique invitation code for family %s", family_id
                )
                return Return.err(
                    Error(
                        "CODE_GENERATION_FAILED",
                        "Could not generate a unique invitation code.",
                        ErrorKind.internal,
                    )
                )

            now = utcnow()
            invitation = await self.uow.invitations.create(
                FamilyInvitation(
                    family_id=family_id,
                    code=code,
                    email=email,
                    expires_at=now + timedelta(days=ApplicationConfig.INVITATION_TTL_DAYS),
                    created_at=now,
                )
            )

            await self.uow.commit()

            logger.info(
                "User %s created invitation %s for family %s",
                actor_id,
                invitation.id,
                family_id,
            )

            return Return.ok(
                InviteMemberResponse(
                    family_id=str(family_id),
                    code=invitation.code,
                    expires_at=invitation.expires_at.isoformat(),
                )
            )
