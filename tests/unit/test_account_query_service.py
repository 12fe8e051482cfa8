"""
Unit tests for AccountQueryService.

These tests verify:
1. Balance and status lookups, including not-found handling
2. Recent transaction ordering, truncation and stable tie-breaking
3. History never raises for unknown accounts
4. The service never mutates repository data
"""

from datetime import datetime, timedelta, timezone
from typing import List, Optional

import pytest

from src.application.services import AccountQueryService
from src.domain.entities import Account, AccountStatus, DeclineReason, Transaction
from src.domain.exceptions import AccountNotFoundException
from src.domain.interfaces import AccountRepository, TransactionRepository
from src.infrastructure.fixtures import build_fixture_dataset
from src.infrastructure.repositories import (
    InMemoryAccountRepository,
    InMemoryTransactionRepository,
)


NOW = datetime(2025, 6, 15, 12, 0, 0, tzinfo=timezone.utc)


def make_transaction(txn_id: str, days_ago: int, account_number: str = "A1") -> Transaction:
    """Helper to create transactions relative to NOW."""
    return Transaction(
        id=txn_id,
        account_number=account_number,
        amount_cents=-1000,
        date=NOW - timedelta(days=days_ago),
        description=f"Purchase {txn_id}",
    )


class StaticTransactionRepository(TransactionRepository):
    """Returns the same list object on every call."""

    def __init__(self, transactions: List[Transaction]):
        self.transactions = transactions
        self.call_count = 0

    async def find_by_account(self, account_number: str) -> List[Transaction]:
        self.call_count += 1
        return self.transactions


class EmptyAccountRepository(AccountRepository):

    async def find(self, account_number: str) -> Optional[Account]:
        return None


@pytest.fixture
def service() -> AccountQueryService:
    dataset = build_fixture_dataset(NOW)
    return AccountQueryService(
        account_repository=InMemoryAccountRepository(dataset.accounts),
        transaction_repository=InMemoryTransactionRepository(dataset.transactions),
    )


def service_with_transactions(transactions: List[Transaction]) -> AccountQueryService:
    return AccountQueryService(
        account_repository=EmptyAccountRepository(),
        transaction_repository=StaticTransactionRepository(transactions),
    )


# =============================================================================
# get_balance
# =============================================================================

class TestGetBalance:

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "account_number",
        ["1234", "0987", "1111", "4444", "7777", "0000"],
    )
    async def test_known_account_matches_input(
        self,
        service: AccountQueryService,
        account_number: str,
    ):
        balance = await service.get_balance(account_number)

        assert balance.account_number == account_number

    @pytest.mark.asyncio
    async def test_over_limit_declined_account(self, service: AccountQueryService):
        balance = await service.get_balance("0987")

        assert balance.credit_limit == 10000.0
        assert balance.balance == 10001.0
        assert balance.status == "declined"
        assert balance.decline_reason == "You met your credit limit"
        assert balance.last_payment_date == NOW - timedelta(days=5)

    @pytest.mark.asyncio
    async def test_active_account_has_no_reason(self, service: AccountQueryService):
        balance = await service.get_balance("1234")

        assert balance.status == "active"
        assert balance.decline_reason is None

    @pytest.mark.asyncio
    @pytest.mark.parametrize("account_number", ["9999999999", "", "12 34", "../1234"])
    async def test_unknown_account_raises(
        self,
        service: AccountQueryService,
        account_number: str,
    ):
        with pytest.raises(AccountNotFoundException) as exc_info:
            await service.get_balance(account_number)

        assert exc_info.value.account_number == account_number
        assert exc_info.value.code == "ACCOUNT_NOT_FOUND"


# =============================================================================
# get_account_status
# =============================================================================

class TestGetAccountStatus:

    @pytest.mark.asyncio
    async def test_active_account(self, service: AccountQueryService):
        status = await service.get_account_status("1234")

        assert status.status == "active"
        assert status.decline_reason is None

    @pytest.mark.asyncio
    async def test_declined_account(self, service: AccountQueryService):
        status = await service.get_account_status("0987")

        assert status.status == "declined"
        assert status.decline_reason == DeclineReason.CREDIT_LIMIT_REACHED.value

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "account_number",
        ["1234", "0987", "1111", "4444", "7777", "0000"],
    )
    async def test_reason_present_iff_declined(
        self,
        service: AccountQueryService,
        account_number: str,
    ):
        status = await service.get_account_status(account_number)

        assert (status.decline_reason is not None) == (status.status == "declined")

    @pytest.mark.asyncio
    async def test_unknown_account_raises(self, service: AccountQueryService):
        with pytest.raises(AccountNotFoundException):
            await service.get_account_status("9999999999")


# =============================================================================
# get_recent_transactions
# =============================================================================

class TestGetRecentTransactions:

    @pytest.mark.asyncio
    async def test_travel_history_scenario(self, service: AccountQueryService):
        """Account 1111: 10 transactions over 5 days, all returned newest first."""
        transactions = await service.get_recent_transactions("1111")

        assert len(transactions) == 10
        assert [t.description for t in transactions[:2]] == [
            "Hotel - Paris",
            "Restaurant - Paris",
        ]
        assert all(t.date == NOW - timedelta(days=2) for t in transactions[2:4])
        assert [t.id for t in transactions] == [
            "5", "6", "7", "8", "9", "10", "11", "12", "13", "14",
        ]

    @pytest.mark.asyncio
    async def test_sorted_newest_first(self):
        transactions = [make_transaction(str(i), days) for i, days in enumerate([3, 1, 7, 2, 5])]
        service = service_with_transactions(transactions)

        result = await service.get_recent_transactions("A1")

        assert [t.date for t in result] == sorted(
            (t.date for t in transactions), reverse=True
        )

    @pytest.mark.asyncio
    async def test_amounts_reported_in_dollars(self):
        service = service_with_transactions([make_transaction("1", 1)])

        result = await service.get_recent_transactions("A1")

        assert result[0].amount == -10.0

    @pytest.mark.asyncio
    async def test_ties_keep_repository_order(self):
        transactions = [
            make_transaction("a", 2),
            make_transaction("b", 2),
            make_transaction("newest", 0),
            make_transaction("c", 2),
        ]
        service = service_with_transactions(transactions)

        result = await service.get_recent_transactions("A1")

        assert [t.id for t in result] == ["newest", "a", "b", "c"]

    @pytest.mark.asyncio
    @pytest.mark.parametrize("count", [0, 1, 9, 10, 11, 25])
    async def test_length_is_capped(self, count: int):
        transactions = [make_transaction(str(i), i) for i in range(count)]
        service = service_with_transactions(transactions)

        result = await service.get_recent_transactions("A1")

        assert len(result) == min(AccountQueryService.RECENT_TRANSACTIONS_LIMIT, count)

    @pytest.mark.asyncio
    async def test_truncation_keeps_most_recent(self):
        # Oldest first in the repository
        transactions = [make_transaction(str(i), 20 - i) for i in range(20)]
        service = service_with_transactions(transactions)

        result = await service.get_recent_transactions("A1")

        assert [t.id for t in result] == [str(i) for i in range(19, 9, -1)]

    @pytest.mark.asyncio
    async def test_repository_data_not_mutated(self):
        transactions = [make_transaction(str(i), days) for i, days in enumerate([3, 1, 7, 2, 5] * 3)]
        original = list(transactions)
        service = service_with_transactions(transactions)

        await service.get_recent_transactions("A1")

        assert transactions == original

    @pytest.mark.asyncio
    async def test_unknown_account_returns_empty(self, service: AccountQueryService):
        assert await service.get_recent_transactions("9999999999") == []

    @pytest.mark.asyncio
    async def test_existing_account_without_transactions(self, service: AccountQueryService):
        assert await service.get_recent_transactions("7777") == []

    @pytest.mark.asyncio
    async def test_history_does_not_consult_accounts(self):
        """Transactions for an account the account repository lacks are still returned."""
        service = service_with_transactions([make_transaction("orphan", 1, "ghost")])

        result = await service.get_recent_transactions("ghost")

        assert [t.id for t in result] == ["orphan"]

    @pytest.mark.asyncio
    async def test_idempotent(self, service: AccountQueryService):
        first = await service.get_recent_transactions("1111")
        second = await service.get_recent_transactions("1111")

        assert first == second


class TestNotFoundAsymmetry:
    """Only the account-keyed lookups report missing accounts."""

    @pytest.mark.asyncio
    async def test_asymmetry(self, service: AccountQueryService):
        with pytest.raises(AccountNotFoundException):
            await service.get_balance("missing")
        with pytest.raises(AccountNotFoundException):
            await service.get_account_status("missing")

        assert await service.get_recent_transactions("missing") == []
