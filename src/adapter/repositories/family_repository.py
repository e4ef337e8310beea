from typing import List, Optional
from uuid import UUID

from sqlalchemy import delete, update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.family_repository import IFamilyRepository
from src.domain.entities import Family, FamilyInvitation, FamilyMember, Recipe


class FamilyRepository(IFamilyRepository):
    """Family repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, family_id: UUID) -> Optional[Family]:
        """Get family by ID"""
        stmt = select(Family).where(Family.id == family_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def list_for_user(self, user_id: UUID) -> List[Family]:
        """Get every family whose roster contains the user"""
        stmt = (
            select(Family)
            .join(FamilyMember, FamilyMember.family_id == Family.id)
            .where(FamilyMember.user_id == user_id)
            .order_by(Family.created_at)
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create(self, family: Family) -> Family:
        """Create a new family"""
        self.session.add(family)
        await self.session.flush()
        await self.session.refresh(family)
        return family

    async def delete(self, family: Family) -> None:
        """
        Delete a family.

        Cascades are issued explicitly so they hold on SQLite, where
        foreign key enforcement is off by default.
        """
        await self.session.execute(
            delete(FamilyMember).where(FamilyMember.family_id == family.id)
        )
        await self.session.execute(
            delete(FamilyInvitation).where(FamilyInvitation.family_id == family.id)
        )
        await self.session.execute(
            update(Recipe).where(Recipe.family_id == family.id).values(family_id=None)
        )
        await self.session.delete(family)
        await self.session.flush()
