"""
Family Member Entity

Roster row linking a User to a Family with a role.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow

from .enums import FamilyRole


class FamilyMember(SQLModel, table=True):
    """
    FamilyMember entity - one roster entry.

    Business Rules:
    - (family_id, user_id) must be unique
    - The owner's row carries role=admin and is only removed with the family
    """

    __tablename__ = "family_members"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    family_id: UUID = Field(
        foreign_key="families.id", nullable=False, index=True, ondelete="CASCADE"
    )
    user_id: UUID = Field(
        foreign_key="users.id", nullable=False, index=True, ondelete="CASCADE"
    )

    role: FamilyRole = Field(default=FamilyRole.member, nullable=False)
    joined_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (
        Index("idx_family_member_family_user", "family_id", "user_id", unique=True),
    )
