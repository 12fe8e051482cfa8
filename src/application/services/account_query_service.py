"""Account query service - answers balance, history and status lookups."""

from typing import List

import structlog

from src.domain.entities import Account
from src.domain.exceptions import AccountNotFoundException
from src.domain.interfaces import AccountRepository, TransactionRepository
from src.application.dto import (
    AccountStatusResponse,
    BalanceResponse,
    TransactionResponse,
)

logger = structlog.get_logger(__name__)


class AccountQueryService:
    """
    Application service for read-only account queries.

    Balance and status lookups raise AccountNotFoundException for unknown
    accounts. The transaction history never does: an unknown account simply
    has no transactions.
    """

    RECENT_TRANSACTIONS_LIMIT = 10

    def __init__(
        self,
        account_repository: AccountRepository,
        transaction_repository: TransactionRepository,
    ):
        self._account_repo = account_repository
        self._transaction_repo = transaction_repository

    async def get_balance(self, account_number: str) -> BalanceResponse:
        """
        Get the balance, credit limit and status of an account.

        Args:
            account_number: The account's identifier

        Returns:
            BalanceResponse for the account

        Raises:
            AccountNotFoundException: If the account does not exist
        """
        account = await self._get_account(account_number)

        logger.info(
            "account_balance_retrieved",
            account_number=account_number,
            status=account.status.value,
            over_limit=account.is_over_limit,
        )

        return BalanceResponse.from_entity(account)

    async def get_recent_transactions(
        self,
        account_number: str,
    ) -> List[TransactionResponse]:
        """
        Get the most recent transactions for an account.

        Transactions are ordered by date, newest first, and capped at
        RECENT_TRANSACTIONS_LIMIT. Transactions sharing a date keep the
        order the repository returned them in.

        Args:
            account_number: The account's identifier

        Returns:
            Up to RECENT_TRANSACTIONS_LIMIT transactions, possibly empty
        """
        transactions = await self._transaction_repo.find_by_account(account_number)

        # sorted() is stable and leaves the repository's list untouched
        recent = sorted(transactions, key=lambda t: t.date, reverse=True)
        recent = recent[: self.RECENT_TRANSACTIONS_LIMIT]

        logger.info(
            "recent_transactions_retrieved",
            account_number=account_number,
            total=len(transactions),
            returned=len(recent),
        )

        return [TransactionResponse.from_entity(t) for t in recent]

    async def get_account_status(self, account_number: str) -> AccountStatusResponse:
        """
        Get the status of an account and, if declined, the reason.

        Args:
            account_number: The account's identifier

        Returns:
            AccountStatusResponse with status and optional decline reason

        Raises:
            AccountNotFoundException: If the account does not exist
        """
        account = await self._get_account(account_number)

        logger.info(
            "account_status_retrieved",
            account_number=account_number,
            status=account.status.value,
        )

        return AccountStatusResponse.from_entity(account)

    async def _get_account(self, account_number: str) -> Account:
        account = await self._account_repo.find(account_number)

        if account is None:
            logger.warning("account_not_found", account_number=account_number)
            raise AccountNotFoundException(account_number)

        return account
