"""Test fixtures — a fresh in-memory database per test.

Learn: each test gets its own async engine on an in-memory SQLite
database (StaticPool keeps the single connection alive so every session
sees the same database). Tables are created from the ORM metadata and
everything is thrown away when the test ends.

The app's get_db dependency is overridden the same way production wires
it: every request opens its own AsyncSession and closes it afterwards,
so anything a failed request left uncommitted is rolled back. Tests
read the database through a separate db_session.

Login is real: clients join and log in through the API, so the session
cookie and the login gate are exercised exactly as in production.
"""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from blogboard.db.engine import get_db
from blogboard.db.models import Base, User
from blogboard.main import app

TEST_DB_URL = "sqlite+aiosqlite://"
PASSWORD = "password_123"


@pytest_asyncio.fixture()
async def engine():
    """Brand new in-memory database with all tables created."""
    engine = create_async_engine(
        TEST_DB_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    try:
        yield engine
    finally:
        await engine.dispose()


@pytest_asyncio.fixture()
async def db_session(engine):
    """Session for the test body (repository tests, direct DB checks)."""
    session = AsyncSession(bind=engine, expire_on_commit=False)
    try:
        yield session
    finally:
        await session.close()


@pytest.fixture()
def request_sessions() -> list[AsyncSession]:
    """Every session handed to a request during the test, in order."""
    return []


@pytest_asyncio.fixture()
async def make_client(engine, request_sessions):
    """Factory for HTTP clients sharing the test database.

    Each client has its own cookie jar, i.e. its own login session.
    """
    session_factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)

    async def override_get_db():
        async with session_factory() as session:
            request_sessions.append(session)
            yield session

    app.dependency_overrides[get_db] = override_get_db
    clients: list[AsyncClient] = []

    def _make() -> AsyncClient:
        ac = AsyncClient(transport=ASGITransport(app=app), base_url="http://test")
        clients.append(ac)
        return ac

    yield _make

    for ac in clients:
        await ac.aclose()
    app.dependency_overrides.clear()


@pytest_asyncio.fixture()
async def client(make_client):
    """Anonymous client — no session cookie."""
    return make_client()


async def join_and_login(ac: AsyncClient, username: str) -> dict:
    """Register `username` and log the client in. Returns the session user."""
    r = await ac.post(
        "/api/v1/auth/join",
        json={
            "username": username,
            "password": PASSWORD,
            "email": f"{username}@example.com",
        },
    )
    assert r.status_code == 201, r.text
    r = await ac.post(
        "/api/v1/auth/login",
        json={"username": username, "password": PASSWORD},
    )
    assert r.status_code == 200, r.text
    return r.json()


@pytest_asyncio.fixture()
async def auth_client(make_client):
    """Client logged in as 'alice'."""
    ac = make_client()
    await join_and_login(ac, "alice")
    return ac


@pytest_asyncio.fixture()
async def other_client(make_client):
    """Second client, logged in as 'bob'."""
    ac = make_client()
    await join_and_login(ac, "bob")
    return ac


@pytest_asyncio.fixture()
async def author(db_session) -> User:
    """A persisted user for repository-level tests."""
    user = User(username="u1", password_hash="x", email="u1@example.com")
    db_session.add(user)
    await db_session.commit()
    return user
