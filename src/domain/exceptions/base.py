"""Base domain exception."""

from typing import Optional


class DomainException(Exception):
    """
    Base exception for all domain-level errors.

    Carries a human-readable message and a machine-readable code that
    the HTTP layer returns unchanged.
    """

    def __init__(self, message: str, code: str = "DOMAIN_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)

    def to_dict(self, request_id: Optional[str] = None) -> dict:
        """Convert to the error response body."""
        return {
            "error": self.code,
            "message": self.message,
            "request_id": request_id,
        }
