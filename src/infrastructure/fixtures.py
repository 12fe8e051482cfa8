"""
Built-in sample dataset of credit-card accounts and transactions.

Dates are relative to a reference time so the data always looks
recent. Both repository backends are seeded from here.
"""

import calendar
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import List, Optional, Tuple

from src.domain.entities import Account, AccountStatus, DeclineReason, Transaction


@dataclass(frozen=True)
class FixtureDataset:
    """Accounts and transactions built against one reference time."""

    accounts: Tuple[Account, ...]
    transactions: Tuple[Transaction, ...]


def _months_before(moment: datetime, months: int) -> datetime:
    """Step back whole calendar months, clamping to the last day."""
    month_index = moment.year * 12 + (moment.month - 1) - months
    year, month = divmod(month_index, 12)
    month += 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


def build_accounts(now: datetime) -> List[Account]:
    """Sample accounts covering the active state and most decline reasons."""

    def days_ago(days: int) -> datetime:
        return now - timedelta(days=days)

    return [
        Account(
            account_number="1234",
            credit_limit_cents=500000,
            balance_cents=150000,
            last_payment_date=days_ago(15),
            status=AccountStatus.ACTIVE,
        ),
        Account(
            account_number="0987",
            credit_limit_cents=1000000,
            balance_cents=1000100,
            last_payment_date=days_ago(5),
            status=AccountStatus.DECLINED,
            decline_reason=DeclineReason.CREDIT_LIMIT_REACHED,
        ),
        Account(
            account_number="1111",
            credit_limit_cents=800000,
            balance_cents=700000,
            last_payment_date=days_ago(20),
            status=AccountStatus.DECLINED,
            decline_reason=DeclineReason.TRAVEL_USAGE,
        ),
        Account(
            account_number="4444",
            credit_limit_cents=1500000,
            balance_cents=1400000,
            last_payment_date=days_ago(10),
            status=AccountStatus.DECLINED,
            decline_reason=DeclineReason.LARGE_PURCHASE_FLAGGED,
        ),
        Account(
            account_number="7777",
            credit_limit_cents=600000,
            balance_cents=550000,
            last_payment_date=days_ago(30),
            status=AccountStatus.DECLINED,
            decline_reason=DeclineReason.MISSED_PAYMENTS,
        ),
        Account(
            account_number="0000",
            credit_limit_cents=700000,
            balance_cents=600000,
            last_payment_date=_months_before(now, 1),
            status=AccountStatus.DECLINED,
            decline_reason=DeclineReason.EXPIRED_OR_DEACTIVATED,
        ),
    ]


# (id, account_number, amount_cents, days_ago, description)
_TRANSACTION_ROWS = [
    ("1", "1234", -10000, 1, "Restaurant"),
    ("2", "1234", -5000, 2, "Gas Station"),
    ("3", "0987", -50000, 1, "Electronics"),
    ("4", "4444", -500000, 1, "Luxury Purchase"),
    ("5", "1111", -15075, 1, "Hotel - Paris"),
    ("6", "1111", -8950, 1, "Restaurant - Paris"),
    ("7", "1111", -20000, 2, "Train Ticket - London to Paris"),
    ("8", "1111", -7525, 2, "Taxi - London"),
    ("9", "1111", -150000, 3, "Flight - New York to London"),
    ("10", "1111", -12030, 3, "Duty Free Shop - JFK Airport"),
    ("11", "1111", -4500, 4, "Taxi - New York"),
    ("12", "1111", -8575, 4, "Restaurant - New York"),
    ("13", "1111", -25000, 5, "Hotel - New York"),
    ("14", "1111", -6025, 5, "Souvenir Shop - Times Square"),
]


def build_transactions(now: datetime) -> List[Transaction]:
    """Sample transactions, including a multi-city trip on account 1111."""
    return [
        Transaction(
            id=txn_id,
            account_number=account_number,
            amount_cents=amount_cents,
            date=now - timedelta(days=days),
            description=description,
        )
        for txn_id, account_number, amount_cents, days, description in _TRANSACTION_ROWS
    ]


def build_fixture_dataset(now: Optional[datetime] = None) -> FixtureDataset:
    """
    Build the full sample dataset.

    Args:
        now: Reference time, defaults to the current UTC time

    Returns:
        FixtureDataset with accounts and transactions
    """
    now = now or datetime.now(timezone.utc)
    return FixtureDataset(
        accounts=tuple(build_accounts(now)),
        transactions=tuple(build_transactions(now)),
    )
