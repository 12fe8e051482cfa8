"""Application services (use cases)."""

from .account_query_service import AccountQueryService

__all__ = [
    "AccountQueryService",
]
