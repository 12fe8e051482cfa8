"""Pydantic schemas for API request/response validation."""

from .account import (
    AccountStatusResponseSchema,
    BalanceResponseSchema,
    TransactionSchema,
)
from .error import ErrorResponseSchema

__all__ = [
    "AccountStatusResponseSchema",
    "BalanceResponseSchema",
    "TransactionSchema",
    "ErrorResponseSchema",
]
