"""
Family Use Case DTOs (Data Transfer Objects)

All Command and Response classes for family domain.
Provides type safety and clear contracts between layers.
"""

from typing import Iterable, List, Optional, Tuple

from pydantic import BaseModel

from src.domain.entities import Family, FamilyMember, User


# ============================================================================
# Response DTOs
# ============================================================================


class OwnerInfo(BaseModel):
    """Family owner summary"""

    id: str
    name: str
    email: str


class MemberInfo(BaseModel):
    """One roster entry with the member's public details"""

    id: str
    name: str
    email: str
    role: str
    joined_at: str


class FamilyResponse(BaseModel):
    """Family with its owner and full roster"""

    id: str
    name: str
    owner_id: str
    created_at: str
    updated_at: str
    owner: Optional[OwnerInfo] = None
    members: List[MemberInfo] = []

    @classmethod
    def from_entities(
        cls,
        family: Family,
        owner: Optional[User],
        roster: Iterable[Tuple[FamilyMember, User]],
    ) -> "FamilyResponse":
        return cls(
            id=str(family.id),
            name=family.name,
            owner_id=str(family.owner_id),
            created_at=family.created_at.isoformat(),
            updated_at=family.updated_at.isoformat(),
            owner=(
                OwnerInfo(id=str(owner.id), name=owner.name, email=owner.email)
                if owner is not None
                else None
            ),
            members=[
                MemberInfo(
                    id=str(user.id),
                    name=user.name,
                    email=user.email,
                    role=member.role.value,
                    joined_at=member.joined_at.isoformat(),
                )
                for member, user in roster
            ],
        )


class DeleteFamilyResponse(BaseModel):
    """Response for delete family use case"""

    family_id: str


class InviteMemberResponse(BaseModel):
    """Response for invite member use case"""

    family_id: str
    code: str
    expires_at: Optional[str]


class RemoveMemberResponse(BaseModel):
    """Response for remove member use case"""

    removed: int
