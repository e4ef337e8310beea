from typing import List
from uuid import UUID

from src.app.services.unit_of_work import UnitOfWork
from src.domain.result import Result, Return

from .dtos import FamilyResponse
from .summaries import load_family_responses


class ListFamiliesUseCase:
    """List every family the caller belongs to, with owner and roster"""

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self, actor_id: UUID) -> Result[List[FamilyResponse]]:
        async with self.uow:
            families = await self.uow.families.list_for_user(actor_id)
            return Return.ok(await load_family_responses(self.uow, families))
