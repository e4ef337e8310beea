from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from src.domain.entities import AccessToken


class IAccessTokenRepository(ABC):
    """Access token repository interface - application layer"""

    @abstractmethod
    async def get_by_hash(self, token_hash: str) -> Optional[AccessToken]:
        """Get token by its SHA-256 hash"""
        pass

    @abstractmethod
    async def create(self, token: AccessToken) -> AccessToken:
        """Store a new token"""
        pass

    @abstractmethod
    async def delete_by_id(self, token_id: UUID) -> bool:
        """Revoke a specific token. Returns True if it existed."""
        pass

    @abstractmethod
    async def delete_all_by_user_id(self, user_id: UUID) -> int:
        """Revoke every token of a user. Returns count of revoked tokens."""
        pass
