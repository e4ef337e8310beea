"""
Access Token Entity

Opaque bearer tokens bound to a user.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import utcnow


class AccessToken(SQLModel, table=True):
    """
    AccessToken entity - one live session.

    Business Rules:
    - Only the SHA-256 hex digest of the token is stored
    - Revocation deletes the row
    - Login deletes every token of the user before issuing a new one
    - Refresh deletes only the presented token
    """

    __tablename__ = "access_tokens"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    user_id: UUID = Field(
        foreign_key="users.id", nullable=False, index=True, ondelete="CASCADE"
    )
    name: str = Field(max_length=255)
    token_hash: str = Field(unique=True, index=True, max_length=64)  # SHA-256 hex

    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    expires_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        now = now or utcnow()
        return self.expires_at is not None and self.expires_at <= now
