"""Dependency injection for FastAPI."""

from functools import lru_cache
from typing import Annotated, AsyncGenerator

from fastapi import Depends

from src.core.config import settings
from src.domain.interfaces import AccountRepository, TransactionRepository
from src.infrastructure.database import db_manager
from src.infrastructure.fixtures import FixtureDataset, build_fixture_dataset
from src.infrastructure.repositories import (
    InMemoryAccountRepository,
    InMemoryTransactionRepository,
    PostgresAccountRepository,
    PostgresTransactionRepository,
)
from src.application.services import AccountQueryService


@lru_cache
def get_fixture_dataset() -> FixtureDataset:
    """Build the sample dataset once per process."""
    return build_fixture_dataset()


@lru_cache
def get_in_memory_account_repository() -> InMemoryAccountRepository:
    return InMemoryAccountRepository(get_fixture_dataset().accounts)


@lru_cache
def get_in_memory_transaction_repository() -> InMemoryTransactionRepository:
    return InMemoryTransactionRepository(get_fixture_dataset().transactions)


# Repository dependencies
async def get_account_repository() -> AsyncGenerator[AccountRepository, None]:
    """Get an AccountRepository for the configured backend."""
    if settings.repository_backend == "database":
        async with db_manager.session() as session:
            yield PostgresAccountRepository(session)
    else:
        yield get_in_memory_account_repository()


async def get_transaction_repository() -> AsyncGenerator[TransactionRepository, None]:
    """Get a TransactionRepository for the configured backend."""
    if settings.repository_backend == "database":
        async with db_manager.session() as session:
            yield PostgresTransactionRepository(session)
    else:
        yield get_in_memory_transaction_repository()


# Service dependencies
async def get_account_query_service(
    account_repo: Annotated[AccountRepository, Depends(get_account_repository)],
    transaction_repo: Annotated[
        TransactionRepository, Depends(get_transaction_repository)
    ],
) -> AccountQueryService:
    """Get an AccountQueryService instance with all dependencies."""
    return AccountQueryService(
        account_repository=account_repo,
        transaction_repository=transaction_repo,
    )
