from sqlmodel.ext.asyncio.session import AsyncSession

from src.adapter.repositories.access_token_repository import AccessTokenRepository
from src.adapter.repositories.family_member_repository import FamilyMemberRepository
from src.adapter.repositories.family_repository import FamilyRepository
from src.adapter.repositories.invitation_repository import InvitationRepository
from src.adapter.repositories.recipe_repository import RecipeRepository
from src.adapter.repositories.user_repository import UserRepository
from src.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.users = UserRepository(self.session)
        self.families = FamilyRepository(self.session)
        self.members = FamilyMemberRepository(self.session)
        self.invitations = InvitationRepository(self.session)
        self.tokens = AccessTokenRepository(self.session)
        self.recipes = RecipeRepository(self.session)
        return self

    async def __aexit__(self, *args):
        # No-op after commit; discards anything left uncommitted otherwise
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
