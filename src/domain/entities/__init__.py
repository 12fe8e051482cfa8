"""Domain Entities - Core business objects."""

from .account import Account, AccountStatus
from .decline_reason import DeclineReason
from .transaction import Transaction

__all__ = [
    "Account",
    "AccountStatus",
    "DeclineReason",
    "Transaction",
]
