from uuid import uuid4

import pytest

from src.app.use_cases.families import RemoveMemberUseCase
from src.domain.entities import Family, User
from src.domain.result import ErrorKind


@pytest.fixture
def owner_id():
    return uuid4()


@pytest.fixture
def family(owner_id):
    return Family(id=uuid4(), name="Smith Family", owner_id=owner_id)


@pytest.fixture
def target():
    return User(id=uuid4(), name="Jane Doe", email="jane@example.com", password_hash="x")


@pytest.mark.asyncio
async def test_remove_member(mock_uow, owner_id, family, target):
    mock_uow.families.get_by_id.return_value = family
    mock_uow.users.get_by_id.return_value = target
    mock_uow.members.delete_by_family_and_user.return_value = 1

    result = await RemoveMemberUseCase(mock_uow).execute(owner_id, family.id, target.id)

    assert result.is_ok()
    assert result.value.removed == 1
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_non_owner_cannot_remove(mock_uow, family, target):
    mock_uow.families.get_by_id.return_value = family

    result = await RemoveMemberUseCase(mock_uow).execute(uuid4(), family.id, target.id)

    assert result.is_err()
    assert result.error.kind == ErrorKind.authorization
    mock_uow.members.delete_by_family_and_user.assert_not_called()


@pytest.mark.asyncio
async def test_cannot_remove_owner(mock_uow, owner_id, family):
    mock_uow.families.get_by_id.return_value = family
    mock_uow.users.get_by_id.return_value = User(
        id=owner_id, name="John", email="john@example.com", password_hash="x"
    )

    result = await RemoveMemberUseCase(mock_uow).execute(owner_id, family.id, owner_id)

    assert result.is_err()
    assert result.error.code == "CANNOT_REMOVE_OWNER"
    assert result.error.errors == {"user": ["Cannot remove the owner from the family."]}
    mock_uow.members.delete_by_family_and_user.assert_not_called()


@pytest.mark.asyncio
async def test_target_not_member(mock_uow, owner_id, family, target):
    mock_uow.families.get_by_id.return_value = family
    mock_uow.users.get_by_id.return_value = target
    mock_uow.members.delete_by_family_and_user.return_value = 0

    result = await RemoveMemberUseCase(mock_uow).execute(owner_id, family.id, target.id)

    assert result.is_err()
    assert result.error.code == "NOT_A_MEMBER"
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_unknown_target_user(mock_uow, owner_id, family):
    mock_uow.families.get_by_id.return_value = family
    mock_uow.users.get_by_id.return_value = None

    result = await RemoveMemberUseCase(mock_uow).execute(owner_id, family.id, uuid4())

    assert result.is_err()
    assert result.error.code == "USER_NOT_FOUND"
    assert result.error.kind == ErrorKind.not_found
