"""Data Transfer Objects for application layer."""

from .account import AccountStatusResponse, BalanceResponse, TransactionResponse

__all__ = [
    "AccountStatusResponse",
    "BalanceResponse",
    "TransactionResponse",
]
