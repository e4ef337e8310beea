"""
Family Authorization Predicates

Pure checks over an explicit (family, user) pair. Only the owner carries
elevated privileges; there is no multi-admin concept.
"""

from typing import Iterable
from uuid import UUID

from src.domain.entities import Family, FamilyMember


def is_owner(family: Family, user_id: UUID) -> bool:
    return family.owner_id == user_id


def is_member(roster: Iterable[FamilyMember], user_id: UUID) -> bool:
    return any(member.user_id == user_id for member in roster)


def can_delete_family(family: Family, user_id: UUID) -> bool:
    return is_owner(family, user_id)


def can_invite_members(family: Family, user_id: UUID) -> bool:
    return is_owner(family, user_id)


def can_remove_members(family: Family, user_id: UUID) -> bool:
    return is_owner(family, user_id)
