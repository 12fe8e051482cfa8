"""
Credit Card Service - Account Query API

A FastAPI-based microservice that answers read-only questions about
credit-card accounts: balance and limit, recent transactions, and
whether the card is declined and why.
"""

__version__ = "0.1.0"
