"""
Pytest configuration and fixtures.
"""

import os

# Settings are read at import time, so the test environment goes first
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("EMAIL_PROVIDER", "console")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")

from typing import AsyncGenerator
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from skillswapper.application.interfaces.repositories import (
    ConnectionRepositoryInterface,
    NotificationRepositoryInterface,
    SkillRepositoryInterface,
    UserRepositoryInterface,
)
from skillswapper.application.interfaces.services import (
    ConnectionMailerInterface,
    TransactionServiceInterface,
)
from skillswapper.infrastructure.database.models import Base
from skillswapper.infrastructure.email.service import ConsoleEmailProvider, EmailService

# Test database URL
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def test_engine():
    """Create a fresh in-memory database per test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    # Create all tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    # Cleanup
    await engine.dispose()


@pytest.fixture
def session_factory(test_engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )


@pytest_asyncio.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Create test database session."""
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def email_provider():
    """Console provider whose outbox the tests can inspect."""
    return ConsoleEmailProvider()


@pytest_asyncio.fixture
async def client(session_factory, email_provider) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client bound to an app backed by the test database."""
    from skillswapper.api.app import create_app
    from skillswapper.api.dependencies import get_mailer
    from skillswapper.config.database import get_db_session

    app = create_app()

    async def override_db_session():
        async with session_factory() as session:
            try:
                yield session
            except Exception:
                await session.rollback()
                raise

    async def override_mailer():
        return EmailService(provider=email_provider, frontend_url="http://frontend.test")

    app.dependency_overrides[get_db_session] = override_db_session
    app.dependency_overrides[get_mailer] = override_mailer

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
def mock_user_repository():
    """Mock user repository."""
    mock_repo = AsyncMock(spec=UserRepositoryInterface)

    # Mock methods
    mock_repo.get_by_id = AsyncMock(return_value=None)
    mock_repo.get_profile = AsyncMock(return_value=None)
    mock_repo.find_reciprocal_profiles = AsyncMock(return_value=[])

    return mock_repo


@pytest.fixture
def mock_skill_repository():
    """Mock skill repository."""
    return AsyncMock(spec=SkillRepositoryInterface)


@pytest.fixture
def mock_connection_repository():
    """Mock connection repository."""
    mock_repo = AsyncMock(spec=ConnectionRepositoryInterface)

    # Mock methods
    mock_repo.get_between = AsyncMock(return_value=None)
    mock_repo.transition_pending = AsyncMock(return_value=None)

    return mock_repo


@pytest.fixture
def mock_notification_repository():
    """Mock notification repository that echoes what it stores."""
    mock_repo = AsyncMock(spec=NotificationRepositoryInterface)

    async def create(notification):
        return notification

    mock_repo.create = AsyncMock(side_effect=create)
    return mock_repo


@pytest.fixture
def mock_transaction_service():
    """Transaction service that simply runs the operation."""
    mock_service = AsyncMock(spec=TransactionServiceInterface)

    async def execute(operation):
        return await operation()

    mock_service.execute_in_transaction = AsyncMock(side_effect=execute)
    return mock_service


@pytest.fixture
def mock_mailer():
    """Mock connection mailer that always succeeds."""
    mailer = AsyncMock(spec=ConnectionMailerInterface)
    mailer.send_connection_accepted_to_requester = AsyncMock(return_value=True)
    mailer.send_connection_accepted_to_accepter = AsyncMock(return_value=True)
    return mailer
