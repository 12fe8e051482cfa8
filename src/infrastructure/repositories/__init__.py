"""Repository implementations."""

from .account_repository import PostgresAccountRepository
from .transaction_repository import PostgresTransactionRepository
from .in_memory_repository import (
    InMemoryAccountRepository,
    InMemoryTransactionRepository,
)

__all__ = [
    "PostgresAccountRepository",
    "PostgresTransactionRepository",
    "InMemoryAccountRepository",
    "InMemoryTransactionRepository",
]
