from abc import ABC, abstractmethod

from src.app.repositories.access_token_repository import IAccessTokenRepository
from src.app.repositories.family_member_repository import IFamilyMemberRepository
from src.app.repositories.family_repository import IFamilyRepository
from src.app.repositories.invitation_repository import IInvitationRepository
from src.app.repositories.recipe_repository import IRecipeRepository
from src.app.repositories.user_repository import IUserRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    users: IUserRepository
    families: IFamilyRepository
    members: IFamilyMemberRepository
    invitations: IInvitationRepository
    tokens: IAccessTokenRepository
    recipes: IRecipeRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
