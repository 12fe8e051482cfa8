"""Database infrastructure."""

from .connection import DatabaseSessionManager, db_manager, seed_database
from .models import Base, AccountModel, TransactionModel

__all__ = [
    "DatabaseSessionManager",
    "db_manager",
    "seed_database",
    "Base",
    "AccountModel",
    "TransactionModel",
]
