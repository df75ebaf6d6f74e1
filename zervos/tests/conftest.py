"""Async test fixtures for Zervos tests using SQLite."""

from __future__ import annotations

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from zervos.config import settings
from zervos.database import build_engine, get_db
from zervos.models.base import Base
from zervos.security.tokens import issue_token
from zervos.services.organization_svc import ensure_organization


@pytest.fixture(scope="session")
def anyio_backend():
    return "asyncio"


@pytest_asyncio.fixture
async def engine():
    eng = build_engine("sqlite+aiosqlite:///:memory:")
    async with eng.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield eng
    await eng.dispose()


@pytest_asyncio.fixture
async def db(engine):
    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def organization(db: AsyncSession):
    """The default tenant, i.e. what requests without an organization header resolve to."""
    return await ensure_organization(db, settings.default_org_uuid, "Test Org")


@pytest_asyncio.fixture
async def client(engine):
    """HTTPX async test client against the Zervos app."""
    from zervos.app import app

    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    return {"Authorization": f"Bearer {issue_token(1, 'admin@test.com')}"}
