"""
Fixtures for integration tests.

Provides:
- Sample dataset pinned to a fixed reference time
- Test client backed by in-memory repositories
- Test client backed by a seeded in-memory SQLite database
"""

from datetime import datetime, timezone
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from src.main import app
from src.core.dependencies import (
    get_account_repository,
    get_transaction_repository,
)
from src.infrastructure.database import Base, seed_database
from src.infrastructure.fixtures import FixtureDataset, build_fixture_dataset
from src.infrastructure.repositories import (
    InMemoryAccountRepository,
    InMemoryTransactionRepository,
    PostgresAccountRepository,
    PostgresTransactionRepository,
)


REFERENCE_TIME = datetime(2025, 6, 15, 12, 0, 0, tzinfo=timezone.utc)


# =============================================================================
# Dataset Fixtures
# =============================================================================

@pytest.fixture
def dataset() -> FixtureDataset:
    """Sample dataset built against a fixed reference time."""
    return build_fixture_dataset(REFERENCE_TIME)


@pytest.fixture
def account_repository(dataset: FixtureDataset) -> InMemoryAccountRepository:
    return InMemoryAccountRepository(dataset.accounts)


@pytest.fixture
def transaction_repository(dataset: FixtureDataset) -> InMemoryTransactionRepository:
    return InMemoryTransactionRepository(dataset.transactions)


# =============================================================================
# Database Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def test_engine():
    """Create an in-memory SQLite async engine for testing."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def test_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    async_session = async_sessionmaker(
        bind=test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )

    async with async_session() as session:
        yield session


@pytest_asyncio.fixture
async def seeded_session(
    test_session: AsyncSession,
    dataset: FixtureDataset,
) -> AsyncSession:
    """A test session whose database holds the sample dataset."""
    await seed_database(test_session, dataset.accounts, dataset.transactions)
    await test_session.commit()
    return test_session


# =============================================================================
# App Client Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def client(
    account_repository: InMemoryAccountRepository,
    transaction_repository: InMemoryTransactionRepository,
) -> AsyncGenerator[AsyncClient, None]:
    """
    Create a test client backed by in-memory repositories.

    The repositories hold the sample dataset pinned to REFERENCE_TIME.
    """
    def override_get_account_repository():
        return account_repository

    def override_get_transaction_repository():
        return transaction_repository

    app.dependency_overrides[get_account_repository] = override_get_account_repository
    app.dependency_overrides[get_transaction_repository] = override_get_transaction_repository

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def db_client(seeded_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create a test client backed by the seeded SQLite database."""
    def override_get_account_repository():
        return PostgresAccountRepository(seeded_session)

    def override_get_transaction_repository():
        return PostgresTransactionRepository(seeded_session)

    app.dependency_overrides[get_account_repository] = override_get_account_repository
    app.dependency_overrides[get_transaction_repository] = override_get_transaction_repository

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()
