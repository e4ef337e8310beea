"""
Family Entity

A group of users sharing recipes, owned by exactly one user.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, SQLModel

from src.domain.base import utcnow


class Family(SQLModel, table=True):
    """
    Family entity.

    Business Rules:
    - owner_id always has a roster row with role=admin
    - Only the owner can delete the family, invite or remove members
    - Deleting the family cascades to roster and invitations
    """

    __tablename__ = "families"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    name: str = Field(max_length=255)
    owner_id: UUID = Field(foreign_key="users.id", nullable=False, index=True)

    # Timestamps
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    updated_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
