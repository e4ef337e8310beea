"""
Family Invitation Entity

Single-use, time-boxed join codes for a family.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from src.domain.base import utcnow

from .enums import InvitationStatus


class FamilyInvitation(SQLModel, table=True):
    """
    FamilyInvitation entity.

    Business Rules:
    - Created by the family owner, expires after 3 days by default
    - Code is 8 uppercase hex characters, unique
    - Redeemable once: used_at is set on redemption and never cleared
    - email is informational and not checked against the redeemer
    """

    __tablename__ = "family_invitations"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    family_id: UUID = Field(
        foreign_key="families.id", nullable=False, index=True, ondelete="CASCADE"
    )
    code: str = Field(unique=True, index=True, max_length=16)
    email: Optional[str] = Field(default=None, max_length=255)

    expires_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    used_at: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    created_at: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))

    __table_args__ = (Index("idx_family_invitation_expires_at", "expires_at"),)

    def is_used(self) -> bool:
        return self.used_at is not None

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        now = now or utcnow()
        return self.expires_at is not None and self.expires_at <= now

    def is_valid(self, now: Optional[datetime] = None) -> bool:
        return not self.is_used() and not self.is_expired(now)

    def status(self, now: Optional[datetime] = None) -> InvitationStatus:
        if self.is_used():
            return InvitationStatus.redeemed
        if self.is_expired(now):
            return InvitationStatus.expired
        return InvitationStatus.pending
