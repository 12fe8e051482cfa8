"""Domain Exceptions - Business rule violations and domain errors."""

from .base import DomainException
from .account import (
    AccountNotFoundException,
    InvalidAccountException,
)

__all__ = [
    "DomainException",
    "AccountNotFoundException",
    "InvalidAccountException",
]
