"""Account entity representing a credit-card account snapshot."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Optional

from src.domain.exceptions import InvalidAccountException

from .decline_reason import DeclineReason


class AccountStatus(str, Enum):
    """Whether the card can currently be used."""

    ACTIVE = "active"
    DECLINED = "declined"


@dataclass(frozen=True)
class Account:
    """
    Immutable representation of a credit-card account.

    Attributes:
        account_number: Opaque account identifier
        credit_limit_cents: Credit limit in cents
        balance_cents: Current balance in cents, may exceed the limit
        last_payment_date: When the last payment was received
        status: Active or declined
        decline_reason: Why the account is declined, only set when declined

    Raises:
        InvalidAccountException: If amounts are negative, the status or
            decline reason is outside its catalog, or the decline reason
            does not agree with the status
    """

    account_number: str
    credit_limit_cents: int
    balance_cents: int
    last_payment_date: datetime
    status: AccountStatus
    decline_reason: Optional[DeclineReason] = None

    def __post_init__(self) -> None:
        # Coerce raw strings (ORM rows, fixtures) into catalog members
        try:
            object.__setattr__(self, "status", AccountStatus(self.status))
            if self.decline_reason is not None:
                object.__setattr__(
                    self, "decline_reason", DeclineReason(self.decline_reason)
                )
        except ValueError as e:
            raise InvalidAccountException(
                f"Account {self.account_number}: {e}"
            ) from e

        if self.credit_limit_cents < 0 or self.balance_cents < 0:
            raise InvalidAccountException(
                f"Account {self.account_number}: amounts must be non-negative"
            )

        declined = self.status == AccountStatus.DECLINED
        if declined != (self.decline_reason is not None):
            raise InvalidAccountException(
                f"Account {self.account_number}: decline_reason must be set "
                "if and only if status is declined"
            )

    @property
    def is_declined(self) -> bool:
        return self.status == AccountStatus.DECLINED

    @property
    def is_over_limit(self) -> bool:
        """Check if the balance exceeds the credit limit."""
        return self.balance_cents > self.credit_limit_cents

    @property
    def credit_limit_dollars(self) -> float:
        return self.credit_limit_cents / 100

    @property
    def balance_dollars(self) -> float:
        return self.balance_cents / 100
