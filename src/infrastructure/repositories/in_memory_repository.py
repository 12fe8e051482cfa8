"""In-memory repository implementations over a fixed snapshot."""

from typing import Iterable, List, Optional

from src.domain.entities import Account, Transaction
from src.domain.interfaces import AccountRepository, TransactionRepository


class InMemoryAccountRepository(AccountRepository):
    """
    Account repository backed by a dict built once at construction.

    The snapshot is never mutated, so one instance can serve
    concurrent requests.
    """

    def __init__(self, accounts: Iterable[Account]):
        self._accounts = {account.account_number: account for account in accounts}

    async def find(self, account_number: str) -> Optional[Account]:
        return self._accounts.get(account_number)


class InMemoryTransactionRepository(TransactionRepository):
    """
    Transaction repository backed by a tuple built once at construction.

    Matches are returned in the order they were supplied.
    """

    def __init__(self, transactions: Iterable[Transaction]):
        self._transactions = tuple(transactions)

    async def find_by_account(self, account_number: str) -> List[Transaction]:
        return [t for t in self._transactions if t.account_number == account_number]
