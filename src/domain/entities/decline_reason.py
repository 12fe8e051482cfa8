"""Catalog of reasons an account can be declined."""

from enum import Enum


class DeclineReason(str, Enum):
    """
    Closed set of decline causes.

    Values are the customer-facing messages returned by the API.
    """

    CREDIT_LIMIT_REACHED = "You met your credit limit"
    TRAVEL_USAGE = "Traveled to a new city where you never used your card before"
    LARGE_PURCHASE_FLAGGED = "Your large purchase was flagged"
    INCORRECT_PAYMENT_INFO = "You entered incorrect payment information"
    MISSED_PAYMENTS = "You have missed payments"
    EXPIRED_OR_DEACTIVATED = "You're using an expired or deactivated card"
    CARD_HOLD = "Your card has a hold on it"
