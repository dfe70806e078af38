"""
Shared test fixtures.

Database-backed tests run against an in-memory SQLite database through
aiosqlite. StaticPool keeps a single connection so every session sees the
same schema and rows.
"""

from typing import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from cms.api.dependencies.database import get_db
from cms.api.main import app
from cms.shared.models import Base, ContentType, User, UserRole


class CountingHasher:
    """Deterministic PasswordHasher that records how often it was used."""

    def __init__(self) -> None:
        self.hash_calls = 0
        self.verify_calls = 0

    def hash(self, raw: str) -> str:
        self.hash_calls += 1
        return f"hashed:{raw}"

    def verify(self, raw: str, digest: str) -> bool:
        self.verify_calls += 1
        return digest == f"hashed:{raw}"


# ═══════════════════════════════════════════════════════════════════════════════
# DATABASE
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.fixture
async def engine():
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
def session_factory(engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)


@pytest.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest.fixture
def hasher() -> CountingHasher:
    return CountingHasher()


# ═══════════════════════════════════════════════════════════════════════════════
# FACTORIES
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.fixture
def make_user(db_session):
    async def _make_user(
        username: str = "alice",
        email: str | None = None,
        role: UserRole = UserRole.AUTHOR,
        active: bool = True,
    ) -> User:
        user = User(
            username=username,
            email=email or f"{username}@example.com",
            password="hashed:secret123",
            role=role,
            active=active,
        )
        db_session.add(user)
        await db_session.flush()
        await db_session.refresh(user)
        return user

    return _make_user


@pytest.fixture
def make_content_type(db_session):
    async def _make_content_type(
        owner: User,
        name: str = "Blog Post",
        api_identifier: str = "blog_post",
    ) -> ContentType:
        content_type = ContentType(
            name=name,
            api_identifier=api_identifier,
            description="Long-form articles",
            field_definitions='{"fields": [{"name": "title", "type": "text", "required": true}]}',
            active=True,
            version=1,
            created_by_id=owner.id,
            updated_by_id=owner.id,
        )
        db_session.add(content_type)
        await db_session.flush()
        await db_session.refresh(content_type)
        return content_type

    return _make_content_type


# ═══════════════════════════════════════════════════════════════════════════════
# API
# ═══════════════════════════════════════════════════════════════════════════════


@pytest.fixture
async def client(session_factory) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client bound to the app, with get_db pointed at the test database."""

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def register_and_login(client):
    """Create a user over HTTP, log in, and return (user_json, auth_headers)."""

    async def _register_and_login(username: str = "admin", role: str = "ADMIN"):
        password = "password123"
        response = await client.post(
            "/api/users",
            json={
                "username": username,
                "email": f"{username}@example.com",
                "password": password,
                "role": role,
            },
        )
        assert response.status_code == 201, response.text

        login = await client.post(
            "/api/auth/login",
            json={"username": username, "password": password},
        )
        assert login.status_code == 200, login.text
        token = login.json()["access_token"]
        return response.json(), {"Authorization": f"Bearer {token}"}

    return _register_and_login
