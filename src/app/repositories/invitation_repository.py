from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional
from uuid import UUID

from src.domain.entities import FamilyInvitation


class IInvitationRepository(ABC):
    """Invitation repository interface - application layer"""

    @abstractmethod
    async def get_by_code(self, code: str) -> Optional[FamilyInvitation]:
        """Get invitation by code regardless of state"""
        pass

    @abstractmethod
    async def get_valid_by_code(
        self, code: str, now: datetime
    ) -> Optional[FamilyInvitation]:
        """Get invitation by code if unused and not expired at `now`"""
        pass

    @abstractmethod
    async def create(self, invitation: FamilyInvitation) -> FamilyInvitation:
        """Create a new invitation"""
        pass

    @abstractmethod
    async def mark_used(self, invitation_id: UUID, now: datetime) -> bool:
        """
        Set used_at if still unused (compare-and-set).
        Returns False if another redemption got there first.
        """
        pass
