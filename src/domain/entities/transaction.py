"""Transaction entity representing a card transaction."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Transaction:
    """
    Immutable representation of a card transaction.

    The account_number is a lookup key only; the referenced account
    does not have to exist.

    Attributes:
        id: Unique transaction identifier
        account_number: Account the transaction was charged to
        amount_cents: Signed amount in cents, negative for debits
        date: When the transaction happened
        description: Human-readable transaction description
    """

    id: str
    account_number: str
    amount_cents: int
    date: datetime
    description: str = ""

    @property
    def is_debit(self) -> bool:
        """Check if this transaction took money out of the account."""
        return self.amount_cents < 0

    @property
    def amount_dollars(self) -> float:
        """Get amount in dollars."""
        return self.amount_cents / 100
