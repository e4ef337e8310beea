from typing import Optional

from fastapi import Depends, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import ClientError
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import AuthContext, AuthenticateTokenUseCase
from src.domain.result import Error

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

security = HTTPBearer(auto_error=False)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


async def get_current_auth(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    uow: UnitOfWork = Depends(get_unit_of_work),
) -> AuthContext:
    """
    Dependency resolving the bearer token from the Authorization header.

    Args:
        credentials: Bearer token from Authorization header, if any
        uow: Request-scoped unit of work, shared with the route

    Returns:
        AuthContext with the caller and the presented token id

    Raises:
        ClientError: 401 UNAUTHENTICATED if the token is missing, unknown or expired
    """
    if credentials is None:
        raise ClientError(Error.authentication(), status_code=status.HTTP_401_UNAUTHORIZED)

    result = await AuthenticateTokenUseCase(uow).execute(credentials.credentials)
    if result.is_err():
        raise ClientError(Error.authentication(), status_code=status.HTTP_401_UNAUTHORIZED)

    return result.value
