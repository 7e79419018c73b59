"""Root conftest — shared test configuration and async DB fixtures.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - Environment defaults set before any users_api module reads Settings
    - db_manager dependency overridden to use the test engine

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for repository and route tests
    - Fake DatabaseSessionManager built with __new__: reuses the real session()/error
      mapping while pointing at the test engine
    - raise_app_exceptions=False: the catch-all handler's 500 response is asserted
      instead of the exception surfacing in the test client
"""

import os

# Ensure tests never touch a developer database
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("LOG_FORMAT", "text")

import pytest  # noqa: E402
from sqlalchemy.ext.asyncio import (  # noqa: E402
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient  # noqa: E402

import users_api.models  # noqa: E402,F401
from users_api.db.base import Base  # noqa: E402
from users_api.infrastructure.database import (  # noqa: E402
    DatabaseSessionManager, get_db_manager,
)
import users_api.infrastructure.database as db_module  # noqa: E402
from users_api.main import app  # noqa: E402


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def test_db_manager(test_engine, test_session_factory):
    manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    manager.engine = test_engine
    manager._session_factory = test_session_factory
    return manager


@pytest.fixture
async def client(test_db_manager):
    """FastAPI test client wired to the in-memory database."""
    app.dependency_overrides[get_db_manager] = lambda: test_db_manager

    # Health probes read the module-level singleton directly
    original_manager = db_module.db_manager
    db_module.db_manager = test_db_manager

    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager
