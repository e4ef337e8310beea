from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from src.domain.entities import Family


class IFamilyRepository(ABC):
    """Family repository interface - application layer"""

    @abstractmethod
    async def get_by_id(self, family_id: UUID) -> Optional[Family]:
        """Get family by ID"""
        pass

    @abstractmethod
    async def list_for_user(self, user_id: UUID) -> List[Family]:
        """Get every family whose roster contains the user"""
        pass

    @abstractmethod
    async def create(self, family: Family) -> Family:
        """Create a new family"""
        pass

    @abstractmethod
    async def delete(self, family: Family) -> None:
        """Delete a family with its roster and invitations; detach its recipes"""
        pass
