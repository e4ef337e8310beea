from uuid import uuid4

import bcrypt
import pytest

from src.app.use_cases.auth import LoginUseCase
from src.domain.entities import User
from src.domain.result import ErrorKind


@pytest.fixture
def user():
    password_hash = bcrypt.hashpw(b"Password123", bcrypt.gensalt(12))
    return User(
        id=uuid4(),
        name="John Smith",
        email="john@example.com",
        password_hash=password_hash.decode(),
    )


@pytest.mark.asyncio
async def test_successful_login(mock_uow, user):
    mock_uow.users.get_by_email.return_value = user
    mock_uow.tokens.delete_all_by_user_id.return_value = 2

    result = await LoginUseCase(mock_uow).execute("john@example.com", "Password123")

    assert result.is_ok()
    assert result.value.user.id == str(user.id)
    assert result.value.token

    mock_uow.tokens.delete_all_by_user_id.assert_awaited_once_with(user.id)
    mock_uow.tokens.create.assert_awaited_once()
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_login_wrong_password(mock_uow, user):
    mock_uow.users.get_by_email.return_value = user

    result = await LoginUseCase(mock_uow).execute("john@example.com", "WrongPass1")

    assert result.is_err()
    assert result.error.code == "INVALID_CREDENTIALS"
    assert result.error.kind == ErrorKind.authentication
    mock_uow.tokens.delete_all_by_user_id.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_login_unknown_email(mock_uow):
    mock_uow.users.get_by_email.return_value = None

    result = await LoginUseCase(mock_uow).execute("nobody@example.com", "Password123")

    assert result.is_err()
    assert result.error.code == "INVALID_CREDENTIALS"
    mock_uow.tokens.create.assert_not_called()


@pytest.mark.asyncio
async def test_login_overlong_password_is_invalid_credentials(mock_uow, user):
    mock_uow.users.get_by_email.return_value = user

    result = await LoginUseCase(mock_uow).execute("john@example.com", "a1" * 40)

    assert result.is_err()
    assert result.error.code == "INVALID_CREDENTIALS"
    assert result.error.kind == ErrorKind.authentication
    mock_uow.tokens.create.assert_not_called()
