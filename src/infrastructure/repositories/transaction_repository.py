"""PostgreSQL implementation of TransactionRepository."""

from datetime import timezone
from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities import Transaction
from src.domain.interfaces import TransactionRepository
from src.infrastructure.database.models import TransactionModel


class PostgresTransactionRepository(TransactionRepository):
    """PostgreSQL-backed transaction repository."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def find_by_account(self, account_number: str) -> List[Transaction]:
        stmt = select(TransactionModel).where(
            TransactionModel.account_number == account_number
        )
        result = await self._session.execute(stmt)
        models = result.scalars().all()

        return [self._to_entity(model) for model in models]

    def _to_entity(self, model: TransactionModel) -> Transaction:
        txn_date = model.date
        if txn_date.tzinfo is None:
            txn_date = txn_date.replace(tzinfo=timezone.utc)

        return Transaction(
            id=model.id,
            account_number=model.account_number,
            amount_cents=model.amount_cents,
            date=txn_date,
            description=model.description,
        )
