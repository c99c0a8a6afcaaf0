"""Shared fixtures: fresh in-memory database per test, HTTP client, users."""
import base64
import os

# Settings are read at import time; keep tests off the real database and fast.
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("BCRYPT_ROUNDS", "4")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from app.db.base import Base  # noqa: E402
from app.db.session import get_db  # noqa: E402
from app.main import app  # noqa: E402
from app.services.users import create_user  # noqa: E402


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(test_session_factory):
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(test_db):
    async def _make_user(email, password, first_name="Test", last_name="User"):
        return await create_user(
            test_db,
            first_name=first_name,
            last_name=last_name,
            email_address=email,
            password=password,
        )

    return _make_user


@pytest.fixture
def basic_auth():
    def _basic_auth(login, secret):
        token = base64.b64encode(f"{login}:{secret}".encode("utf-8")).decode("ascii")
        return {"Authorization": f"Basic {token}"}

    return _basic_auth


@pytest.fixture
async def alice(make_user):
    return await make_user("a@x.com", "secret1", first_name="Alice", last_name="Anders")


@pytest.fixture
async def bob(make_user):
    return await make_user("b@x.com", "secret2", first_name="Bob", last_name="Berg")
