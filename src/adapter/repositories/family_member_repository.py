from typing import Iterable, List, Optional, Tuple
from uuid import UUID

from sqlalchemy import delete
from sqlalchemy.exc import IntegrityError
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.errors import DuplicateEntryError
from src.app.repositories.family_member_repository import IFamilyMemberRepository
from src.domain.entities import FamilyMember, User


class FamilyMemberRepository(IFamilyMemberRepository):
    """Family roster repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_family_and_user(
        self, family_id: UUID, user_id: UUID
    ) -> Optional[FamilyMember]:
        """Get the roster row for a user in a family"""
        stmt = select(FamilyMember).where(
            FamilyMember.family_id == family_id, FamilyMember.user_id == user_id
        )
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def get_roster(
        self, family_ids: Iterable[UUID]
    ) -> List[Tuple[FamilyMember, User]]:
        """Batch-fetch roster rows joined to their users for several families"""
        ids = list(set(family_ids))
        if not ids:
            return []
        stmt = (
            select(FamilyMember, User)
            .join(User, User.id == FamilyMember.user_id)
            .where(FamilyMember.family_id.in_(ids))
            .order_by(FamilyMember.joined_at)
        )
        result = await self.session.execute(stmt)
        return [(member, user) for member, user in result.all()]

    async def create(self, member: FamilyMember) -> FamilyMember:
        """Add a roster row.

        The insert runs in a savepoint so a duplicate leaves the rest of the
        transaction usable.
        """
        try:
            async with self.session.begin_nested():
                self.session.add(member)
                await self.session.flush()
        except IntegrityError as e:
            raise DuplicateEntryError(
                f"User {member.user_id} is already in family {member.family_id}"
            ) from e
        await self.session.refresh(member)
        return member

    async def delete_by_family_and_user(self, family_id: UUID, user_id: UUID) -> int:
        """Remove a user from a family roster"""
        stmt = delete(FamilyMember).where(
            FamilyMember.family_id == family_id, FamilyMember.user_id == user_id
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
