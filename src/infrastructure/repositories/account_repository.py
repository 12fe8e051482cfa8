"""PostgreSQL implementation of AccountRepository."""

from datetime import timezone
from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.domain.entities import Account
from src.domain.interfaces import AccountRepository
from src.infrastructure.database.models import AccountModel


class PostgresAccountRepository(AccountRepository):
    """
    PostgreSQL implementation of the Account repository.

    Uses SQLAlchemy async session for database operations.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def find(self, account_number: str) -> Optional[Account]:
        """Retrieve an account by account number."""
        stmt = select(AccountModel).where(
            AccountModel.account_number == account_number
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._to_entity(model)

    def _to_entity(self, model: AccountModel) -> Account:
        """Convert database model to domain entity."""
        last_payment_date = model.last_payment_date
        # SQLite drops tzinfo on the way back
        if last_payment_date.tzinfo is None:
            last_payment_date = last_payment_date.replace(tzinfo=timezone.utc)

        return Account(
            account_number=model.account_number,
            credit_limit_cents=model.credit_limit_cents,
            balance_cents=model.balance_cents,
            last_payment_date=last_payment_date,
            status=model.status,
            decline_reason=model.decline_reason,
        )
