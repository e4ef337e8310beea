from datetime import datetime
from typing import Optional
from uuid import UUID

from sqlalchemy import or_, update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.invitation_repository import IInvitationRepository
from src.domain.entities import FamilyInvitation


class InvitationRepository(IInvitationRepository):
    """Invitation repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_code(self, code: str) -> Optional[FamilyInvitation]:
        """Get invitation by code regardless of state"""
        stmt = select(FamilyInvitation).where(FamilyInvitation.code == code)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_valid_by_code(
        self, code: str, now: datetime
    ) -> Optional[FamilyInvitation]:
        """Get invitation by code if unused and not expired at `now`"""
        stmt = select(FamilyInvitation).where(
            FamilyInvitation.code == code,
            FamilyInvitation.used_at.is_(None),
            or_(
                FamilyInvitation.expires_at.is_(None),
                FamilyInvitation.expires_at > now,
            ),
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def create(self, invitation: FamilyInvitation) -> FamilyInvitation:
        """Create a new invitation"""
        self.session.add(invitation)
        await self.session.flush()
        await self.session.refresh(invitation)
        return invitation

    async def mark_used(self, invitation_id: UUID, now: datetime) -> bool:
        """Set used_at only where it is still NULL"""
        stmt = (
            update(FamilyInvitation)
            .where(
                FamilyInvitation.id == invitation_id,
                FamilyInvitation.used_at.is_(None),
            )
            .values(used_at=now)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount == 1
