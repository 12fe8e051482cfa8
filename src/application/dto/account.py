"""Data transfer objects for account query operations."""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class BalanceResponse:
    """Balance, limit and status of an account."""

    account_number: str
    credit_limit: float
    balance: float
    last_payment_date: datetime
    status: str
    decline_reason: Optional[str]

    @classmethod
    def from_entity(cls, account) -> "BalanceResponse":
        return cls(
            account_number=account.account_number,
            credit_limit=account.credit_limit_dollars,
            balance=account.balance_dollars,
            last_payment_date=account.last_payment_date,
            status=account.status.value,
            decline_reason=(
                account.decline_reason.value if account.decline_reason else None
            ),
        )


@dataclass(frozen=True)
class TransactionResponse:
    """Single transaction in a history listing."""

    id: str
    account_number: str
    amount: float
    date: datetime
    description: str

    @classmethod
    def from_entity(cls, transaction) -> "TransactionResponse":
        return cls(
            id=transaction.id,
            account_number=transaction.account_number,
            amount=transaction.amount_dollars,
            date=transaction.date,
            description=transaction.description,
        )


@dataclass(frozen=True)
class AccountStatusResponse:
    """Status projection of an account."""

    status: str
    decline_reason: Optional[str]

    @classmethod
    def from_entity(cls, account) -> "AccountStatusResponse":
        return cls(
            status=account.status.value,
            decline_reason=(
                account.decline_reason.value if account.decline_reason else None
            ),
        )
