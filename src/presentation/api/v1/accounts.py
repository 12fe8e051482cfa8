"""Account query API endpoints."""

from typing import Annotated, List

from fastapi import APIRouter, Depends, Path

from src.application.services import AccountQueryService
from src.core.dependencies import get_account_query_service
from src.core.metrics import record_history_size, track_account_query
from src.presentation.schemas import (
    AccountStatusResponseSchema,
    BalanceResponseSchema,
    ErrorResponseSchema,
    TransactionSchema,
)

accounts_router = APIRouter()

AccountNumber = Annotated[str, Path(description="Account identifier")]


@accounts_router.get(
    "/balance/{account_number}",
    response_model=BalanceResponseSchema,
    response_model_exclude_none=True,
    summary="Get Account Balance",
    description="""
    Retrieve the balance, credit limit, last payment date and status
    of an account. The decline reason is included only for declined accounts.
    """,
    responses={
        200: {"description": "Balance retrieved successfully"},
        404: {"model": ErrorResponseSchema, "description": "Account not found"},
    },
)
async def get_balance(
    account_number: AccountNumber,
    account_service: Annotated[AccountQueryService, Depends(get_account_query_service)],
) -> BalanceResponseSchema:
    with track_account_query("balance"):
        response = await account_service.get_balance(account_number)

    return BalanceResponseSchema(
        account_number=response.account_number,
        credit_limit=response.credit_limit,
        balance=response.balance,
        last_payment_date=response.last_payment_date,
        status=response.status,
        decline_reason=response.decline_reason,
    )


@accounts_router.get(
    "/transactions/{account_number}",
    response_model=List[TransactionSchema],
    summary="Get Recent Transactions",
    description="""
    Retrieve up to 10 of the account's most recent transactions,
    newest first.

    Unknown accounts are not an error here: they return an empty list.
    """,
    responses={
        200: {"description": "Transactions retrieved successfully"},
    },
)
async def get_recent_transactions(
    account_number: AccountNumber,
    account_service: Annotated[AccountQueryService, Depends(get_account_query_service)],
) -> List[TransactionSchema]:
    with track_account_query("transactions"):
        transactions = await account_service.get_recent_transactions(account_number)

    record_history_size(len(transactions))

    return [
        TransactionSchema(
            id=t.id,
            account_number=t.account_number,
            amount=t.amount,
            date=t.date,
            description=t.description,
        )
        for t in transactions
    ]


@accounts_router.get(
    "/status/{account_number}",
    response_model=AccountStatusResponseSchema,
    response_model_exclude_none=True,
    summary="Get Account Status",
    description="""
    Retrieve whether the account is active or declined, with the
    decline reason when declined.
    """,
    responses={
        200: {"description": "Status retrieved successfully"},
        404: {"model": ErrorResponseSchema, "description": "Account not found"},
    },
)
async def get_account_status(
    account_number: AccountNumber,
    account_service: Annotated[AccountQueryService, Depends(get_account_query_service)],
) -> AccountStatusResponseSchema:
    with track_account_query("status"):
        response = await account_service.get_account_status(account_number)

    return AccountStatusResponseSchema(
        status=response.status,
        decline_reason=response.decline_reason,
    )
