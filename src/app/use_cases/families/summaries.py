from collections import defaultdict
from typing import Dict, List, Sequence, Tuple
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.domain.entities import Family, FamilyMember, User

from .dtos import FamilyResponse


async def load_family_responses(
    uow: UnitOfWork, families: Sequence[Family]
) -> List[FamilyResponse]:
    """
    Build FamilyResponse objects for several families.

    Rosters and owners are fetched with one batch query each, whatever the
    number of families.
    """
    if not families:
        return []

    family_ids = [family.id for family in families]
    rosters: Dict[UUID, List[Tuple[FamilyMember, User]]] = defaultdict(list)
    for member, user in await uow.members.get_roster(family_ids):
        rosters[member.family_id].append((member, user))

    owners = {
        user.id: user
        for user in await uow.users.get_by_ids({family.owner_id for family in families})
    }

    return [
        FamilyResponse.from_entities(
            family, owners.get(family.owner_id), rosters.get(family.id, [])
        )
        for family in families
    ]
