"""Pytest configuration and fixtures."""

import os
from typing import AsyncGenerator, List

# Set test env vars before any app import
os.environ.setdefault("SECRET_KEY", "testsecretkey_for_unit_tests_only_1234567890")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("RATE_LIMIT_STORAGE_URI", "memory://")
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("FRONTEND_URL", "http://frontend.test")

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from cashvelo.api.deps import get_email_service
from cashvelo.core.database import get_db
from cashvelo.core.security import create_access_token, hash_password
from cashvelo.main import app
from cashvelo.models import Base
from cashvelo.models.user import User

# Test database URL
TEST_DATABASE_URL = os.environ.get("TEST_DATABASE_URL", "sqlite+aiosqlite:///:memory:")


class RecordingEmailService:
    """Stands in for EmailService and keeps what would have been sent."""

    def __init__(self):
        self.sent: List[dict] = []
        self.fail = False

    async def send_password_reset_email(self, to_email: str, username: str, reset_url: str) -> bool:
        if self.fail:
            return False
        self.sent.append({"to_email": to_email, "username": username, "reset_url": reset_url})
        return True


def auth_headers(user: User) -> dict:
    token = create_access_token(
        user_id=str(user.id),
        email=user.email,
        username=user.username,
    )
    return {"Authorization": f"Bearer {token}"}


def _engine_kwargs(url: str) -> dict:
    if url.startswith("sqlite"):
        # One shared connection so the in-memory database survives across sessions
        return {"poolclass": StaticPool, "connect_args": {"check_same_thread": False}}
    return {}


@pytest_asyncio.fixture(scope="function")
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Create a fresh database session for each test."""
    test_engine = create_async_engine(
        TEST_DATABASE_URL, echo=False, **_engine_kwargs(TEST_DATABASE_URL)
    )
    TestSessionLocal = sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with TestSessionLocal() as session:
        yield session

    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await test_engine.dispose()


@pytest.fixture
def mailer() -> RecordingEmailService:
    return RecordingEmailService()


@pytest_asyncio.fixture(scope="function")
async def client(
    db_session: AsyncSession,
    mailer: RecordingEmailService,
) -> AsyncGenerator[AsyncClient, None]:
    """Create test client with database and mail overrides."""

    async def override_get_db():
        try:
            yield db_session
        except Exception:
            await db_session.rollback()
            raise

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_email_service] = lambda: mailer

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


async def _create_user(db_session: AsyncSession, username: str, email: str, password: str) -> User:
    user = User(
        username=username,
        full_name=username.title(),
        email=email,
        password_hash=hash_password(password),
    )
    db_session.add(user)
    await db_session.commit()
    await db_session.refresh(user)
    return user


@pytest_asyncio.fixture
async def regular_user(db_session: AsyncSession) -> User:
    """Create a regular user for testing."""
    return await _create_user(db_session, "regular", "user@test.com", "userpassword")


@pytest_asyncio.fixture
async def other_user(db_session: AsyncSession) -> User:
    """A second account, used to check ownership isolation."""
    return await _create_user(db_session, "other", "other@test.com", "otherpassword")


@pytest.fixture
def user_headers(regular_user: User) -> dict:
    return auth_headers(regular_user)


@pytest.fixture
def other_headers(other_user: User) -> dict:
    return auth_headers(other_user)
