"""Pytest configuration and shared fixtures for all tests.

This module provides:
- In-memory repository and stub collaborators for unit tests
- Function-scoped PostgreSQL fixtures for tests marked ``integration``,
  skipped when the test database cannot be reached
"""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import asyncpg
import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine

from omni_auth.core.settings import Settings, get_settings
from omni_auth.features.auth.services.identity_sanitizer import IdentitySanitizer
from tests.utils.database import (
    clear_all_tables,
    create_all_tables,
    create_test_database,
)
from tests.utils.fakes import (
    InMemoryUserRepository,
    PlainPasswordHasher,
    TokenCreatorImpl,
)


@pytest.fixture
def user_repository() -> InMemoryUserRepository:
    """Provide an empty in-memory user repository."""
    return InMemoryUserRepository()


@pytest.fixture
def password_hasher() -> PlainPasswordHasher:
    """Provide a cheap reversible password hasher."""
    return PlainPasswordHasher()


@pytest.fixture
def token_creator() -> TokenCreatorImpl:
    """Provide a token creator that records the claims it signs."""
    return TokenCreatorImpl()


@pytest.fixture
def identity_sanitizer() -> IdentitySanitizer:
    """Provide a sanitizer with the default placeholder domains."""
    return IdentitySanitizer()


@pytest.fixture(scope="function")
def test_settings() -> Settings:
    """Provide test settings with testing mode enabled."""
    settings = get_settings()
    settings.testing = True
    return settings


@pytest_asyncio.fixture(scope="function")
async def async_engine(test_settings: Settings) -> AsyncGenerator[AsyncEngine, None]:
    """Provide SQLAlchemy async engine for integration tests.

    Creates a fresh engine for each test to avoid event loop issues.
    """
    try:
        await create_test_database(test_settings)
    except (OSError, asyncpg.PostgresError) as e:
        pytest.skip(f"PostgreSQL unavailable: {e}")

    engine = create_async_engine(test_settings.database_url, echo=False)
    await create_all_tables(engine)

    yield engine

    async with engine.begin() as conn:
        await clear_all_tables(conn)
    await engine.dispose()


@pytest.fixture
def session_factory(async_engine: AsyncEngine):
    """Create a session factory opening a fresh session per call."""

    @asynccontextmanager
    async def get_session():
        async with AsyncSession(async_engine, expire_on_commit=False) as session:
            yield session

    return get_session
