"""SQLAlchemy ORM models for credit-card accounts and transactions."""

from datetime import datetime

from sqlalchemy import BigInteger, DateTime, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class AccountModel(Base):
    """Persisted credit-card account record."""

    __tablename__ = "credit_card_accounts"

    account_number: Mapped[str] = mapped_column(String(64), primary_key=True)
    credit_limit_cents: Mapped[int] = mapped_column(BigInteger, nullable=False)
    balance_cents: Mapped[int] = mapped_column(BigInteger, nullable=False)
    last_payment_date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
    )
    status: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        default="active",
    )
    decline_reason: Mapped[str | None] = mapped_column(String(255), nullable=True)


class TransactionModel(Base):
    """
    Persisted card transaction record.

    account_number is not a foreign key: transactions may reference
    accounts that are not stored.
    """

    __tablename__ = "credit_card_transactions"

    id: Mapped[str] = mapped_column(String(64), primary_key=True)
    account_number: Mapped[str] = mapped_column(
        String(64),
        nullable=False,
        index=True,
    )
    amount_cents: Mapped[int] = mapped_column(BigInteger, nullable=False)
    date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
