"""Pytest configuration and fixtures"""

import os
import uuid
from types import SimpleNamespace
from typing import AsyncGenerator

# (注意) 必須在匯入 app 之前設定，Settings 在匯入時讀取環境變數
os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["JWT_SECRET_KEY"] = "test-session-secret"
os.environ["IDENTITY_PROVIDER_SECRET"] = "test-identity-secret"
os.environ["AUTO_CREATE_TABLES"] = "false"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from consult_match.main import app
from consult_match.core.database import Base, get_db, json_serializer
from consult_match.core.security import create_access_token
from consult_match.models.user import User, UserRoleEnum, UserStatusEnum

# Test database URL (in-memory，每個測試重新建立)
TEST_DATABASE_URL = "sqlite+aiosqlite://"

ENTREPRENEUR_PROFILE = {
    "companyName": "Padaria Aurora",
    "companyDescription": "Pães artesanais",
    "industry": "Varejo",
    "businessStage": "launch",
    "state": "SP",
    "city": "São Paulo",
    "consultationAreas": ["Marketing", "Finanças"],
}

CONSULTANT_PROFILE = {
    "title": "Consultora de Marketing Digital",
    "bio": "Ajudo pequenas empresas a crescer online",
    "experience": 8,
    "hourlyRate": 150,
    "state": "RJ",
    "city": "Rio de Janeiro",
    "industries": ["Marketing", "Varejo"],
}


@pytest_asyncio.fixture
async def session_factory() -> AsyncGenerator[async_sessionmaker, None]:
    """Create a fresh in-memory database with all tables"""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        json_serializer=json_serializer,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(session_factory) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client with overridden database dependency (one session per request)"""

    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


def auth_headers(user_id: str) -> dict:
    return {"Authorization": f"Bearer {create_access_token({'sub': user_id})}"}


@pytest.fixture
def create_user(session_factory):
    """Insert a user directly (as if the identity provider callback already ran)"""

    async def _create_user(
        first_name: str = "Ana",
        last_name: str = "Souza",
        role: UserRoleEnum = None,
        status: UserStatusEnum = UserStatusEnum.active,
    ) -> SimpleNamespace:
        user_id = str(uuid.uuid4())
        async with session_factory() as session:
            session.add(User(
                user_id=user_id,
                email=f"{user_id[:8]}@example.com",
                first_name=first_name,
                last_name=last_name,
                role=role,
                status=status,
                email_verified=True,
            ))
            await session.commit()
        return SimpleNamespace(user_id=user_id, headers=auth_headers(user_id))

    return _create_user


@pytest.fixture
def onboard_entrepreneur(client, create_user):
    async def _onboard(first_name: str = "Bruno", **overrides) -> SimpleNamespace:
        user = await create_user(first_name=first_name)
        response = await client.post(
            "/api/profiles/entrepreneur",
            json={**ENTREPRENEUR_PROFILE, **overrides},
            headers=user.headers,
        )
        assert response.status_code == 201, response.text
        user.profile = response.json()
        return user

    return _onboard


@pytest.fixture
def onboard_consultant(client, create_user):
    async def _onboard(first_name: str = "Carla", **overrides) -> SimpleNamespace:
        user = await create_user(first_name=first_name)
        response = await client.post(
            "/api/profiles/consultant",
            json={**CONSULTANT_PROFILE, **overrides},
            headers=user.headers,
        )
        assert response.status_code == 201, response.text
        user.profile = response.json()
        return user

    return _onboard


@pytest.fixture
def publish_project(client):
    """Create a project through the API (PUBLISHED by default)"""

    async def _publish(owner, title: str = "Plano de marketing", status: str = "PUBLISHED", **fields) -> dict:
        response = await client.post(
            "/api/projects",
            json={"title": title, "description": "Preciso de ajuda", "status": status, **fields},
            headers=owner.headers,
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _publish
