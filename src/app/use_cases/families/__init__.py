"""
Family Use Cases

All family, roster and invitation business logic.
"""

from .create_family_use_case import CreateFamilyUseCase
from .delete_family_use_case import DeleteFamilyUseCase
from .leave_family_use_case import LeaveFamilyUseCase
from .remove_member_use_case import RemoveMemberUseCase
from .list_families_use_case import ListFamiliesUseCase
from .invite_member_use_case import InviteMemberUseCase
from .accept_invitation_use_case import AcceptInvitationUseCase
from .dtos import (
    DeleteFamilyResponse,
    FamilyResponse,
    InviteMemberResponse,
    MemberInfo,
    OwnerInfo,
    RemoveMemberResponse,
)

__all__ = [
    # Use Cases
    "CreateFamilyUseCase",
    "DeleteFamilyUseCase",
    "LeaveFamilyUseCase",
    "RemoveMemberUseCase",
    "ListFamiliesUseCase",
    "InviteMemberUseCase",
    "AcceptInvitationUseCase",
    # DTOs - Responses
    "FamilyResponse",
    "OwnerInfo",
    "MemberInfo",
    "DeleteFamilyResponse",
    "InviteMemberResponse",
    "RemoveMemberResponse",
]
