from uuid import UUID

from config import ApplicationConfig
from src.api.utils.tokens import generate_token, token_expiry
from src.app.services.unit_of_work import UnitOfWork
from src.domain.base import utcnow
from src.domain.entities import AccessToken


async def issue_token(uow: UnitOfWork, user_id: UUID) -> str:
    """
    Persist a new access token for the user inside the caller's transaction.

    Returns:
        The plain token. It is not recoverable afterwards.
    """
    token, token_hash = generate_token()
    now = utcnow()
    await uow.tokens.create(
        AccessToken(
            user_id=user_id,
            name=ApplicationConfig.TOKEN_NAME,
            token_hash=token_hash,
            created_at=now,
            expires_at=token_expiry(now),
        )
    )
    return token
