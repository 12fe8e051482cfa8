"""Database connection and session management."""

from contextlib import asynccontextmanager
from typing import AsyncGenerator, Iterable

import structlog
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import (
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from src.core.config import settings
from src.domain.entities import Account, Transaction
from .models import AccountModel, Base, TransactionModel

logger = structlog.get_logger(__name__)


class DatabaseSessionManager:
    """
    Manages database connections and sessions.

    Uses SQLAlchemy async engine for non-blocking database operations.
    """

    def __init__(self):
        self._engine = None
        self._sessionmaker = None

    @property
    def is_initialized(self) -> bool:
        return self._sessionmaker is not None

    def init(self, database_url: str | None = None):
        """
        Initialize the database engine and session factory.

        Args:
            database_url: Optional override for the database URL
        """
        url = database_url or settings.database_url

        # Convert postgres:// to postgresql+asyncpg://
        if url.startswith("postgres://"):
            url = url.replace("postgres://", "postgresql+asyncpg://", 1)
        elif url.startswith("postgresql://"):
            url = url.replace("postgresql://", "postgresql+asyncpg://", 1)

        engine_kwargs = {"echo": settings.debug, "pool_pre_ping": True}
        if not url.startswith("sqlite"):
            engine_kwargs["pool_size"] = settings.db_pool_size
            engine_kwargs["max_overflow"] = settings.db_max_overflow

        self._engine = create_async_engine(url, **engine_kwargs)

        self._sessionmaker = async_sessionmaker(
            bind=self._engine,
            class_=AsyncSession,
            expire_on_commit=False,
            autocommit=False,
            autoflush=False,
        )

    async def create_all(self) -> None:
        """Create any missing tables."""
        if self._engine is None:
            raise RuntimeError("Database not initialized. Call init() first.")

        async with self._engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def close(self):
        """Close the database engine."""
        if self._engine:
            await self._engine.dispose()
        self._engine = None
        self._sessionmaker = None

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """
        Provide a transactional scope around operations.

        Yields:
            An async database session
        """
        if self._sessionmaker is None:
            raise RuntimeError("Database not initialized. Call init() first.")

        session = self._sessionmaker()
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()


db_manager = DatabaseSessionManager()


async def seed_database(
    session: AsyncSession,
    accounts: Iterable[Account],
    transactions: Iterable[Transaction],
) -> bool:
    """
    Insert accounts and transactions into an empty database.

    Args:
        session: The session to write through
        accounts: Accounts to insert
        transactions: Transactions to insert

    Returns:
        True if the data was inserted, False if accounts already existed
    """
    existing = await session.scalar(select(func.count()).select_from(AccountModel))
    if existing:
        logger.info("database_seed_skipped", existing_accounts=existing)
        return False

    account_models = [
        AccountModel(
            account_number=account.account_number,
            credit_limit_cents=account.credit_limit_cents,
            balance_cents=account.balance_cents,
            last_payment_date=account.last_payment_date,
            status=account.status.value,
            decline_reason=(
                account.decline_reason.value if account.decline_reason else None
            ),
        )
        for account in accounts
    ]
    transaction_models = [
        TransactionModel(
            id=txn.id,
            account_number=txn.account_number,
            amount_cents=txn.amount_cents,
            date=txn.date,
            description=txn.description,
        )
        for txn in transactions
    ]

    session.add_all(account_models)
    session.add_all(transaction_models)
    await session.flush()

    logger.info(
        "database_seeded",
        accounts=len(account_models),
        transactions=len(transaction_models),
    )
    return True
