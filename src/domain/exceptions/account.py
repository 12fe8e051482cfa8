"""Account-related domain exceptions."""

from .base import DomainException


class AccountNotFoundException(DomainException):
    """Raised when no account matches the requested account number."""

    def __init__(self, account_number: str):
        super().__init__(
            message=f"Account not found: {account_number}",
            code="ACCOUNT_NOT_FOUND",
        )
        self.account_number = account_number


class InvalidAccountException(DomainException):
    """Raised when account data violates the account invariants."""

    def __init__(self, message: str):
        super().__init__(
            message=message,
            code="INVALID_ACCOUNT",
        )
