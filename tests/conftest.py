import os
import sys
import tempfile
from pathlib import Path

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

sys.path.append(str(Path(__file__).parents[1] / "src"))

ENV_TEST_PATH = Path(__file__).parents[1] / ".env.test"


def _load_env_file(path: Path) -> None:
    if not path.exists():
        return
    for line in path.read_text().splitlines():
        line = line.strip()
        if not line or line.startswith("#") or "=" not in line:
            continue
        key, value = line.split("=", 1)
        os.environ.setdefault(key, value)


_load_env_file(ENV_TEST_PATH)

TEST_DATABASE_URL = os.getenv(
    "TEST_DATABASE_URL",
    f"sqlite+aiosqlite:///{Path(tempfile.gettempdir()) / 'fanclub_test.db'}",
)

# Settings are read at import time, so the environment must be ready first.
os.environ.setdefault("DATABASE_URL", TEST_DATABASE_URL)
os.environ.setdefault("SESSION_SECRET", "test-session-secret")
os.environ.setdefault("APP_ENV", "test")

from fanclub.db.session import get_db  # noqa: E402
from fanclub.main import app  # noqa: E402

test_engine = create_async_engine(TEST_DATABASE_URL, echo=False)
TestSessionLocal = async_sessionmaker(test_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture(scope="function")
async def setup_database():
    """Create tables for tests that need the database, and drop them after.

    Not autouse, so pure unit tests run without a database.
    """
    from fanclub.models.base import BaseModel

    async with test_engine.begin() as conn:
        await conn.run_sync(BaseModel.metadata.drop_all)
        await conn.run_sync(BaseModel.metadata.create_all)

    yield

    async with test_engine.begin() as conn:
        await conn.run_sync(BaseModel.metadata.drop_all)

    await test_engine.dispose()


@pytest.fixture
async def db_session(setup_database):
    """Provide test database session with fresh connection per test."""
    async with TestSessionLocal() as session:
        yield session
        await session.rollback()


@pytest.fixture
def session_factory(setup_database):
    """Session factory for tests that need several independent sessions."""
    return TestSessionLocal


async def _create_user(session: AsyncSession, username: str, email: str, password: str):
    from fanclub.core.security import hash_password
    from fanclub.models.user import User
    from fanclub.repositories.user import UserRepository

    repo = UserRepository(session)
    return await repo.create(
        User(
            first_name=username.capitalize(),
            last_name="Tester",
            email=email,
            username=username,
            password_hash=hash_password(password),
        )
    )


@pytest.fixture
async def test_user(db_session: AsyncSession):
    """Signed-up user alice / a@x.com / secret1."""
    return await _create_user(db_session, "alice", "a@x.com", "secret1")


@pytest.fixture
async def other_user(db_session: AsyncSession):
    """A second user for ownership tests."""
    return await _create_user(db_session, "bob", "b@x.com", "secret2")


@pytest.fixture
def make_session_cookie():
    """Build a valid session cookie value for a user record."""
    from fanclub.core.session import build_session_user, encode_session

    def _make(user) -> str:
        return encode_session(build_session_user(user))

    return _make


@pytest.fixture
async def client(db_session: AsyncSession):
    """Provide test client with database override."""
    async def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
async def auth_client(client: AsyncClient, test_user, make_session_cookie):
    """Test client carrying alice's session cookie."""
    from fanclub.config import settings

    client.cookies.set(settings.session_cookie_name, make_session_cookie(test_user))
    return client
