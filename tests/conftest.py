"""Pytest configuration for all tests."""

import os
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

os.environ.setdefault("GATEKEEPER_SECRET_KEY", "test-secret-key-for-gatekeeper")
os.environ.setdefault("GATEKEEPER_ENVIRONMENT", "testing")

from gatekeeper.core.config import Settings  # noqa: E402
from gatekeeper.infrastructure.auth import PasswordHasher, TokenIssuer  # noqa: E402
from gatekeeper.infrastructure.persistence.database import Base  # noqa: E402
from gatekeeper.infrastructure.persistence.models import RoleModel  # noqa: E402

TEST_SECRET_KEY = "test-secret-key-for-gatekeeper"


@pytest.fixture
def settings() -> Settings:
    """Settings for tests: fast hashing, in-memory database, console logs."""
    return Settings(
        secret_key=TEST_SECRET_KEY,
        environment="testing",
        database_url="sqlite+aiosqlite:///:memory:",
        hash_time_cost=1,
        hash_memory_cost=8,
        hash_parallelism=1,
        log_format="console",
        log_level="WARNING",
    )


@pytest.fixture
def password_hasher(settings: Settings) -> PasswordHasher:
    """Password hasher with a minimal work factor."""
    return PasswordHasher.from_settings(settings)


@pytest.fixture
def token_issuer(settings: Settings) -> TokenIssuer:
    """Token issuer signed with the test key."""
    return TokenIssuer.from_settings(settings)


@pytest_asyncio.fixture
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session.

    Uses an in-memory SQLite database seeded with the ADMIN and CUSTOMER roles.
    """
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
        echo=False,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async_session_maker = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session_maker() as session:
        session.add_all([RoleModel(name="ADMIN"), RoleModel(name="CUSTOMER")])
        await session.commit()

    async with async_session_maker() as session:
        yield session
        await session.rollback()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    """Application built from the test settings."""
    from gatekeeper.infrastructure.api.app import create_app

    return create_app(settings)


@pytest_asyncio.fixture
async def client(app: FastAPI, db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client with overridden database dependency."""
    from gatekeeper.infrastructure.persistence.database import get_db_session

    app.dependency_overrides[get_db_session] = lambda: db_session

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

    app.dependency_overrides = {}
