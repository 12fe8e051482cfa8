"""Repository interfaces for account data access."""

from abc import ABC, abstractmethod
from typing import List, Optional

from src.domain.entities import Account, Transaction


class AccountRepository(ABC):
    """
    Abstract read-only repository for Account lookup.

    Implementations may use in-memory storage, PostgreSQL, etc.
    """

    @abstractmethod
    async def find(self, account_number: str) -> Optional[Account]:
        """
        Retrieve an account by its account number.

        Args:
            account_number: The account's identifier

        Returns:
            The account if found, None otherwise
        """
        ...


class TransactionRepository(ABC):
    """
    Abstract read-only repository for Transaction lookup.

    No ordering is guaranteed; callers sort as they need.
    """

    @abstractmethod
    async def find_by_account(self, account_number: str) -> List[Transaction]:
        """
        Retrieve all transactions charged to an account.

        Args:
            account_number: The account's identifier

        Returns:
            A new list of matching transactions, empty when there are none
            or the account is unknown
        """
        ...
