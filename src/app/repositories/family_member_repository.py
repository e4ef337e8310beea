from abc import ABC, abstractmethod
from typing import Iterable, List, Optional, Tuple
from uuid import UUID

from src.domain.entities import FamilyMember, User


class IFamilyMemberRepository(ABC):
    """Family roster repository interface - application layer"""

    @abstractmethod
    async def get_by_family_and_user(
        self, family_id: UUID, user_id: UUID
    ) -> Optional[FamilyMember]:
        """Get the roster row for a user in a family"""
        pass

    @abstractmethod
    async def get_roster(
        self, family_ids: Iterable[UUID]
    ) -> List[Tuple[FamilyMember, User]]:
        """Batch-fetch roster rows joined to their users for several families"""
        pass

    @abstractmethod
    async def create(self, member: FamilyMember) -> FamilyMember:
        """Add a roster row. Raises DuplicateEntryError if the user is already on it."""
        pass

    @abstractmethod
    async def delete_by_family_and_user(self, family_id: UUID, user_id: UUID) -> int:
        """Remove a user from a family roster. Returns count of removed rows."""
        pass
