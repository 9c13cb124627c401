import os

# Settings are read at import time, so the environment is prepared first.
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")
os.environ["ASYNC_DATABASE_URL"] = "sqlite+aiosqlite://"

from types import SimpleNamespace

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from userauth.api.v1.models import User
from userauth.core.helpers import TokenIssuer, get_token_issuer
from userauth.core.models import Base
from userauth.db.session import get_session
from userauth.main import app


TEST_SECRET = "unit-test-secret"
TEST_ISSUER = "test-issuer"
TEST_AUDIENCE = "test-audience"


@pytest_asyncio.fixture
async def engine():
    """Shared in-memory SQLite database, one per test."""
    engine = create_async_engine("sqlite+aiosqlite://", poolclass=StaticPool)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(bind=engine, class_=AsyncSession, expire_on_commit=False, autoflush=False)


@pytest_asyncio.fixture
async def session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def token_issuer():
    return TokenIssuer(TEST_SECRET, TEST_ISSUER, TEST_AUDIENCE)


@pytest.fixture
def seed_users(session):
    """Insert users in order, so ids follow the list order starting at 1."""
    async def _seed(*rows):
        users = []
        for email, password, role in rows:
            user = User(email=email, password=password, role=role)
            session.add(user)
            await session.flush()
            users.append(user)
        await session.commit()
        return users

    return _seed


@pytest.fixture
def admin_token(token_issuer):
    return token_issuer.issue(SimpleNamespace(id=1000, email="root@x.com", role="admin"))


@pytest.fixture
def user_token(token_issuer):
    return token_issuer.issue(SimpleNamespace(id=1001, email="plain@x.com", role="user"))


@pytest_asyncio.fixture
async def client(session_factory, token_issuer):
    async def override_get_session():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session
    app.dependency_overrides[get_token_issuer] = lambda: token_issuer

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
