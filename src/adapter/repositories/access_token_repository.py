from typing import Optional
from uuid import UUID

from sqlalchemy import delete
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from src.app.repositories.access_token_repository import IAccessTokenRepository
from src.domain.entities import AccessToken


class AccessTokenRepository(IAccessTokenRepository):
    """Access token repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_hash(self, token_hash: str) -> Optional[AccessToken]:
        """Get token by its SHA-256 hash (unique index lookup)"""
        stmt = select(AccessToken).where(AccessToken.token_hash == token_hash)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    async def create(self, token: AccessToken) -> AccessToken:
        """Store a new token"""
        self.session.add(token)
        await self.session.flush()
        await self.session.refresh(token)
        return token

    async def delete_by_id(self, token_id: UUID) -> bool:
        """Revoke a specific token by ID"""
        stmt = delete(AccessToken).where(AccessToken.id == token_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def delete_all_by_user_id(self, user_id: UUID) -> int:
        """Revoke every token of a user"""
        stmt = delete(AccessToken).where(AccessToken.user_id == user_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
