"""
Domain Interfaces (Ports)
"""

from .repositories import AccountRepository, TransactionRepository

__all__ = [
    "AccountRepository",
    "TransactionRepository",
]
