from typing import Dict
from uuid import UUID

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.app import create_app
from src.app.use_cases.auth.token_issuer import issue_token
from src.depends import get_unit_of_work
from tests.fixtures.json_loader import TestDataLoader


@pytest_asyncio.fixture
def test_data():
    return TestDataLoader()


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
async def client(db_session):
    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work

    transport = ASGITransport(app=app)
    async with AsyncClient(
        transport=transport, base_url=f"http://test{ApplicationConfig.API_PREFIX}/"
    ) as ac:
        yield ac


@pytest_asyncio.fixture
def register(client: AsyncClient):
    """Register a user from test_data.json and return the response data"""

    async def _register(name: str) -> Dict:
        response = await client.post("/register", json=TestDataLoader.user(name))
        assert response.status_code == 201, response.text
        return response.json()["data"]

    return _register


@pytest_asyncio.fixture
def issue_extra_token(db_session):
    """Issue another live token for a user, as a second session would hold"""

    async def _issue(user_id: str) -> str:
        uow = SqlAlchemyUnitOfWork(db_session)
        async with uow:
            token = await issue_token(uow, UUID(user_id))
            await uow.commit()
        return token

    return _issue
