import pytest
from unittest.mock import AsyncMock, MagicMock


@pytest.fixture
def mock_uow():
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    # Repositories: every method is awaitable
    uow.users = AsyncMock()
    uow.families = AsyncMock()
    uow.members = AsyncMock()
    uow.invitations = AsyncMock()
    uow.tokens = AsyncMock()
    uow.recipes = AsyncMock()

    # create() hands back what it was given
    for repo in (uow.users, uow.families, uow.members, uow.invitations, uow.tokens, uow.recipes):
        repo.create.side_effect = lambda entity: entity

    return uow
