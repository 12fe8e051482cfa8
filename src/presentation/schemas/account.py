"""Account-related Pydantic schemas."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class BalanceResponseSchema(BaseModel):
    """Schema for GET /v1/balance/{account_number} response."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "account_number": "0987",
                    "credit_limit": 10000.0,
                    "balance": 10001.0,
                    "last_payment_date": "2025-10-14T12:00:00Z",
                    "status": "declined",
                    "decline_reason": "You met your credit limit",
                }
            ]
        }
    )

    account_number: str = Field(
        ...,
        description="Account identifier",
        examples=["1234"],
    )
    credit_limit: float = Field(
        ...,
        ge=0,
        description="Credit limit in dollars",
        examples=[5000.0],
    )
    balance: float = Field(
        ...,
        ge=0,
        description="Current balance in dollars, may exceed the credit limit",
        examples=[1500.0],
    )
    last_payment_date: datetime = Field(
        ...,
        description="Timestamp of the last payment",
    )
    status: str = Field(
        ...,
        description="Account status",
        examples=["active"],
    )
    decline_reason: Optional[str] = Field(
        None,
        description="Why the account is declined, omitted for active accounts",
        examples=["You met your credit limit"],
    )


class TransactionSchema(BaseModel):
    """Schema for a transaction in GET /v1/transactions/{account_number}."""

    id: str = Field(
        ...,
        description="Transaction identifier",
        examples=["5"],
    )
    account_number: str = Field(
        ...,
        description="Account the transaction was charged to",
        examples=["1111"],
    )
    amount: float = Field(
        ...,
        description="Signed amount in dollars, negative for debits",
        examples=[-150.75],
    )
    date: datetime = Field(
        ...,
        description="When the transaction happened",
    )
    description: str = Field(
        ...,
        description="Transaction description",
        examples=["Hotel - Paris"],
    )


class AccountStatusResponseSchema(BaseModel):
    """Schema for GET /v1/status/{account_number} response."""

    status: str = Field(
        ...,
        description="Account status",
        examples=["declined"],
    )
    decline_reason: Optional[str] = Field(
        None,
        description="Why the account is declined, omitted for active accounts",
        examples=["Traveled to a new city where you never used your card before"],
    )
